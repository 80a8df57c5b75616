"""Place extraction: find gazetteer cities and POIs mentioned in free text."""

from collections.abc import Sequence

from tourweather.geo.gazetteer import CITIES, POIS
from tourweather.geo.normalize import normalize
from tourweather.models.common import CityKey
from tourweather.models.place import City, ExtractedPlaces, PointOfInterest


def extract_cities(
    text: str,
    cities: Sequence[City] = CITIES,
    pois: Sequence[PointOfInterest] = POIS,
) -> ExtractedPlaces:
    """Return the city keys mentioned in ``text``, in first-match order.

    POIs are matched before city names, and a POI resolves to its owning
    city. Each key appears once. No match yields an empty list; applying a
    fallback city is left to the caller.
    """
    s = normalize(text)
    # dict keys: ordered and unique
    hits: dict[CityKey, None] = {}

    for poi in pois:
        if any(normalize(label) in s for label in poi.labels):
            hits.setdefault(poi.city, None)

    for city in cities:
        if any(normalize(label) in s for label in city.labels):
            hits.setdefault(city.key, None)

    found = list(hits)
    return ExtractedPlaces(primary=found[0] if found else None, all=found)
