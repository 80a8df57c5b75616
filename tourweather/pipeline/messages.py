"""Localized user-facing messages."""

from tourweather.models.common import Language

_WEATHER_ERROR = {
    Language.VIETNAMESE: "Không lấy được dữ liệu thời tiết.",
    Language.ENGLISH: "Could not load weather data.",
    Language.KOREAN: "날씨 데이터를 불러오지 못했습니다.",
}


def error_message(language: str) -> str:
    """Generic weather failure message; unknown languages fall back to Vietnamese."""
    try:
        return _WEATHER_ERROR[Language(language)]
    except ValueError:
        return _WEATHER_ERROR[Language.VIETNAMESE]
