"""OpenWeather 3-hourly forecast API client."""

import logging
import os

import httpx

from tourweather.config.schema import ForecastConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHER_API_KEY"
REDACTED = "***"


class ForecastClientError(Exception):
    """Raised when the forecast API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    def __init__(
        self,
        config: ForecastConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config or ForecastConfig()
        self.api_key = self.config.api_key or os.environ.get(API_KEY_ENV, "")
        self._client = client

    def _redact(self, text: str) -> str:
        """Mask the API key, which travels in the query string."""
        if not self.api_key:
            return text
        return text.replace(self.api_key, REDACTED)

    async def get_forecast(self, lat: float, lon: float, language: str) -> dict:
        """Fetch the raw 3-hourly forecast for a coordinate.

        Transport errors and non-2xx responses are raised as
        ForecastClientError with the API key masked. Decoding errors
        propagate as is.
        """
        if not self.api_key:
            raise ForecastClientError(f"{API_KEY_ENV} not set")
        params = {
            "lat": lat,
            "lon": lon,
            "units": self.config.units,
            "lang": language,
            "appid": self.api_key,
        }
        try:
            if self._client is not None:
                resp = await self._client.get(self.config.base_url, params=params)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.get(self.config.base_url, params=params)
        except httpx.RequestError as e:
            message = self._redact(f"Request failed: {e}")
            logger.error(
                "OpenWeather request failed for lat=%s lon=%s: %s", lat, lon, message
            )
            raise ForecastClientError(message) from None
        if resp.status_code >= 400:
            logger.error(
                "OpenWeather %d for lat=%s lon=%s", resp.status_code, lat, lon
            )
            raise ForecastClientError(
                f"HTTP {resp.status_code} from forecast API", resp.status_code
            )
        return resp.json()
