"""Tests for the OpenWeather forecast client with mocked httpx."""

import logging

import httpx
import pytest
import respx

from tourweather.config.schema import ForecastConfig
from tourweather.ingest.openweather_client import ForecastClientError, OpenWeatherClient

FORECAST_URL = "https://test-owm.example.com/data/2.5/forecast"


@pytest.fixture
def owm() -> OpenWeatherClient:
    return OpenWeatherClient(ForecastConfig(base_url=FORECAST_URL, api_key="k123"))


@pytest.mark.asyncio
class TestGetForecast:
    @respx.mock
    async def test_success(self, owm: OpenWeatherClient, openweather_da_nang: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=openweather_da_nang)
        )

        result = await owm.get_forecast(16.068, 108.212, "vi")
        assert len(result["list"]) == 4

    @respx.mock
    async def test_request_params(self, owm: OpenWeatherClient, openweather_da_nang: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=openweather_da_nang)
        )

        await owm.get_forecast(16.068, 108.212, "en")
        params = route.calls[0].request.url.params
        assert params["lat"] == "16.068"
        assert params["lon"] == "108.212"
        assert params["units"] == "metric"
        assert params["lang"] == "en"
        assert params["appid"] == "k123"

    @respx.mock
    async def test_http_error_raises(self, owm: OpenWeatherClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(401))
        with pytest.raises(ForecastClientError) as exc_info:
            await owm.get_forecast(16.068, 108.212, "vi")
        assert exc_info.value.status_code == 401
        assert "k123" not in str(exc_info.value)

    @respx.mock
    async def test_network_error_raises(self, owm: OpenWeatherClient):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(ForecastClientError, match="down"):
            await owm.get_forecast(16.068, 108.212, "vi")

    @respx.mock
    async def test_network_error_masks_key(self, owm: OpenWeatherClient, caplog):
        respx.get(FORECAST_URL).mock(
            side_effect=httpx.ConnectError("cannot reach /forecast?appid=k123")
        )
        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ForecastClientError) as exc_info:
                await owm.get_forecast(16.068, 108.212, "vi")
        assert "k123" not in str(exc_info.value)
        assert "appid=***" in str(exc_info.value)
        assert exc_info.value.__suppress_context__
        assert "k123" not in caplog.text

    async def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        client = OpenWeatherClient(ForecastConfig(base_url=FORECAST_URL))
        with pytest.raises(ForecastClientError):
            await client.get_forecast(16.068, 108.212, "vi")


class TestApiKey:
    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
        client = OpenWeatherClient(ForecastConfig(base_url=FORECAST_URL))
        assert client.api_key == "from-env"
