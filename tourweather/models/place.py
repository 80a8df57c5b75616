"""Gazetteer reference records."""

from dataclasses import dataclass

from tourweather.models.common import CityKey


@dataclass(frozen=True)
class City:
    key: CityKey
    labels: tuple[str, ...]


@dataclass(frozen=True)
class PointOfInterest:
    key: str
    labels: tuple[str, ...]
    city: CityKey


@dataclass(frozen=True)
class ExtractedPlaces:
    primary: CityKey | None
    all: list[CityKey]
