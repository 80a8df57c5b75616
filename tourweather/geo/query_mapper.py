"""City key to geocoder query mapping."""

from tourweather.models.common import CityKey

DEFAULT_CITY_KEY: CityKey = "da-nang"

CITY_QUERIES: dict[CityKey, str] = {
    "da-nang": "Da Nang, Vietnam",
    "hoi-an": "Hoi An, Vietnam",
    "hue": "Hue, Vietnam",
    "quang-nam": "Quang Nam, Vietnam",
    "quang-binh": "Dong Hoi, Quang Binh, Vietnam",
    "quang-ngai": "Quang Ngai, Vietnam",
    "ly-son": "Ly Son Island, Vietnam",
}


def city_key_to_query(city_key: CityKey) -> str:
    """Map a city key to a geocoder query. Unknown keys map to Da Nang."""
    return CITY_QUERIES.get(city_key, CITY_QUERIES[DEFAULT_CITY_KEY])
