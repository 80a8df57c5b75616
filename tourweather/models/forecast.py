"""Forecast data models and the pipeline output shape."""

from dataclasses import dataclass

from tourweather.models.common import CityKey


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float


@dataclass(frozen=True)
class HourlyForecastEntry:
    timestamp: int  # Unix seconds
    temperature: float | None
    temperature_min: float | None
    temperature_max: float | None
    description: str


@dataclass(frozen=True)
class DailyTemperature:
    day: float | None
    min: float | None
    max: float | None


@dataclass(frozen=True)
class DailySummary:
    representative_timestamp: int
    temperature: DailyTemperature
    description: str

    def to_dict(self) -> dict:
        return {
            "dt": self.representative_timestamp,
            "temp": {
                "day": self.temperature.day,
                "min": self.temperature.min,
                "max": self.temperature.max,
            },
            "weather": [{"description": self.description}],
        }


@dataclass(frozen=True)
class PipelineResult:
    city_key: CityKey
    query: str
    days: list[DailySummary]

    def to_dict(self) -> dict:
        return {
            "cityKey": self.city_key,
            "query": self.query,
            "days": [d.to_dict() for d in self.days],
        }
