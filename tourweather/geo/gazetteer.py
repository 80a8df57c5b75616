"""Central Vietnam gazetteer: cities and points of interest with label variants."""

from collections.abc import Iterable

from tourweather.models.place import City, PointOfInterest

CITIES: tuple[City, ...] = (
    City("da-nang", ("đà nẵng", "da nang", "danang", "dn")),
    City("hoi-an", ("hội an", "hoi an", "hoian")),
    City("hue", ("huế", "hue", "thừa thiên huế", "thua thien hue")),
    City("quang-nam", ("quảng nam", "quang nam", "tam ky", "tam kỳ")),
    City("quang-binh", ("quảng bình", "quang binh", "dong hoi", "đồng hới")),
    City("quang-ngai", ("quảng ngãi", "quang ngai")),
    City("ly-son", ("lý sơn", "ly son", "đảo lý sơn", "ly son island")),
)


def _poi(key: str, labels: tuple[str, ...], city: str) -> PointOfInterest:
    return PointOfInterest(key=key, labels=labels, city=city)


POIS: tuple[PointOfInterest, ...] = (
    # Da Nang
    _poi("ba-na", ("bà nà hills", "ba na hills", "bana hill"), "da-nang"),
    _poi("golden-bridge", ("cầu vàng", "golden bridge"), "da-nang"),
    _poi("dragon-bridge", ("cầu rồng", "dragon bridge"), "da-nang"),
    _poi("han-river", ("sông hàn", "han river"), "da-nang"),
    _poi("my-khe", ("biển mỹ khê", "my khe beach"), "da-nang"),
    _poi("marble-mountains", ("ngũ hành sơn", "marble mountains"), "da-nang"),
    _poi("son-tra", ("sơn trà", "bán đảo sơn trà", "son tra peninsula"), "da-nang"),
    _poi("linh-ung", ("chùa linh ứng", "linh ung pagoda"), "da-nang"),
    _poi("asia-park", ("asia park", "sun world da nang wonders"), "da-nang"),
    _poi("love-bridge", ("cầu tình yêu", "love bridge"), "da-nang"),
    _poi("museum-cham", ("bảo tàng điêu khắc chăm", "cham museum"), "da-nang"),
    _poi("sun-wheel", ("sun wheel", "vòng quay mặt trời"), "da-nang"),
    _poi("pink-church", ("nhà thờ chính tòa", "cathedral", "pink church"), "da-nang"),
    _poi("son-tra-lighthouse", ("hải đăng sơn trà", "son tra lighthouse"), "da-nang"),
    _poi("tien-sa", ("tiên sa", "tien sa port", "tien sa beach"), "da-nang"),
    # Hoi An
    _poi("ancient-town", ("phố cổ hội an", "hoi an ancient town", "old town"), "hoi-an"),
    _poi("an-bang", ("biển an bàng", "an bang beach"), "hoi-an"),
    _poi("cua-dai", ("biển cửa đại", "cua dai beach"), "hoi-an"),
    _poi("chua-cau", ("chùa cầu", "japanese covered bridge"), "hoi-an"),
    _poi("tra-que", ("làng rau trà quế", "tra que village"), "hoi-an"),
    _poi("cam-thanh", ("làng dừa bảy mẫu", "bay mau coconut village", "cam thanh"), "hoi-an"),
    _poi("night-market", ("chợ đêm hội an", "hoi an night market"), "hoi-an"),
    _poi("lantern", ("đèn lồng", "lanterns"), "hoi-an"),
    _poi("hoi-an-river", ("sông thu bồn", "thu bon river"), "hoi-an"),
    # Hue
    _poi("imperial", ("đại nội", "hoàng thành huế", "imperial city", "citadel"), "hue"),
    _poi("thien-mu", ("chùa thiên mụ", "thien mu pagoda"), "hue"),
    _poi("perfume-river", ("sông hương", "perfume river"), "hue"),
    _poi("lang-co", ("lăng cô", "lang co beach"), "hue"),
    _poi("tomb-minh-mang", ("lăng minh mạng", "minh mang tomb"), "hue"),
    _poi("tomb-khai-dinh", ("lăng khai định", "khai dinh tomb"), "hue"),
    _poi("tomb-tu-duc", ("lăng tự đức", "tu duc tomb"), "hue"),
    _poi("truong-tien", ("cầu trường tiền", "truong tien bridge"), "hue"),
    _poi("dong-ba", ("chợ đông ba", "dong ba market"), "hue"),
    _poi("thuan-an", ("biển thuận an", "thuan an beach"), "hue"),
    _poi("bach-ma", ("vườn quốc gia bạch mã", "bach ma national park"), "hue"),
    # Quang Nam
    _poi("my-son", ("mỹ sơn", "my son sanctuary"), "quang-nam"),
    _poi("tam-ky", ("tam kỳ", "tam ky"), "quang-nam"),
    _poi("phu-ninh", ("hồ phú ninh", "phu ninh lake"), "quang-nam"),
    _poi("cham-island", ("cù lao chàm", "cham island"), "quang-nam"),
    _poi("thanh-ha", ("làng gốm thanh hà", "thanh ha pottery village"), "quang-nam"),
    _poi("ha-my", ("biển hà my", "ha my beach"), "quang-nam"),
    _poi("bang-an", ("tháp bàng an", "bang an tower"), "quang-nam"),
    # Quang Binh
    _poi(
        "phong-nha",
        ("phong nha", "phong nha-ke bang", "phong nha ke bang national park"),
        "quang-binh",
    ),
    _poi("son-doong", ("hang sơn đoòng", "son doong cave"), "quang-binh"),
    _poi("paradise-cave", ("động thiên đường", "paradise cave"), "quang-binh"),
    _poi("hang-en", ("hang én", "hang en cave"), "quang-binh"),
    _poi("dong-hoi", ("đồng hới", "dong hoi city"), "quang-binh"),
    _poi("mooc", ("suối nước mọoc", "mooc spring"), "quang-binh"),
    _poi("chay-river", ("sông chày", "chay river"), "quang-binh"),
    _poi("nhat-le", ("biển nhật lệ", "nhat le beach"), "quang-binh"),
    # Quang Ngai and Ly Son
    _poi("ly-son", ("lý sơn", "ly son island", "đảo lý sơn"), "ly-son"),
    _poi("hang-cau", ("hang câu", "hang cau"), "ly-son"),
    _poi("to-vo", ("cổng tò vò", "to vo gate"), "ly-son"),
    _poi("thoi-loi", ("núi thới lới", "thoi loi mountain"), "ly-son"),
    _poi(
        "my-khe-quang-ngai",
        ("biển mỹ khê quảng ngãi", "my khe quang ngai beach"),
        "quang-ngai",
    ),
    _poi("sa-huynh", ("sa huỳnh", "sa huynh beach"), "quang-ngai"),
    _poi("truong-luu", ("thành cổ trường lưu", "truong luu citadel"), "quang-ngai"),
)


def validate_gazetteer(
    cities: Iterable[City], pois: Iterable[PointOfInterest]
) -> None:
    """Raise ValueError if a POI points at a city key that does not exist."""
    known = {c.key for c in cities}
    dangling = [p.key for p in pois if p.city not in known]
    if dangling:
        raise ValueError(f"POIs reference unknown cities: {', '.join(dangling)}")


validate_gazetteer(CITIES, POIS)
