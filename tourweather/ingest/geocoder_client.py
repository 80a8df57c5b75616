"""Nominatim forward geocoding client. Fail-soft: misses and errors return None."""

import logging

import httpx

from tourweather.config.schema import GeocoderConfig
from tourweather.models.forecast import Coordinate

logger = logging.getLogger(__name__)


class GeocoderClient:
    def __init__(
        self,
        config: GeocoderConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config or GeocoderConfig()
        self._client = client

    async def forward_geocode(self, query: str) -> Coordinate | None:
        """Resolve a place query to the best-guess coordinate.

        One GET, one result, restricted to the configured country. Any
        failure (network error, non-2xx status, bad JSON, empty result) is
        logged and returns None so a single bad lookup cannot abort a run.
        """
        params = {
            "q": query,
            "format": "json",
            "limit": 1,
            "countrycodes": self.config.country_codes,
        }
        headers = {"User-Agent": self.config.user_agent}
        try:
            if self._client is not None:
                resp = await self._client.get(
                    self.config.base_url, params=params, headers=headers
                )
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.get(
                        self.config.base_url, params=params, headers=headers
                    )
            resp.raise_for_status()
            data = resp.json()
            if not data:
                logger.info("No geocode result for query=%r", query)
                return None
            first = data[0]
            return Coordinate(lat=float(first["lat"]), lon=float(first["lon"]))
        except httpx.HTTPError as e:
            logger.warning("Geocode request failed for query=%r: %s", query, e)
            return None
        except (ValueError, KeyError, TypeError, IndexError) as e:
            logger.warning("Malformed geocode response for query=%r: %s", query, e)
            return None
        except Exception as e:
            logger.warning("Geocode failed for query=%r: %s", query, e)
            return None
