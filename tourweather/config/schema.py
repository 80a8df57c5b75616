"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from tourweather.models.common import Language

MAX_CITIES_PER_RUN = 3


class GeocoderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://nominatim.openstreetmap.org/search"
    user_agent: str = "tourweather/0.1.0"
    country_codes: str = "vn"


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5/forecast"
    api_key: str = ""  # empty: read OPENWEATHER_API_KEY
    units: str = "metric"
    max_days: int = Field(default=6, ge=1, le=6)


class PipelineConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_cities: int = Field(default=MAX_CITIES_PER_RUN, ge=1, le=MAX_CITIES_PER_RUN)
    fallback_city: str = "da-nang"
    default_language: Language = Language.VIETNAMESE


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoder: GeocoderConfig = GeocoderConfig()
    forecast: ForecastConfig = ForecastConfig()
    pipeline: PipelineConfig = PipelineConfig()
    log_level: str = "INFO"
