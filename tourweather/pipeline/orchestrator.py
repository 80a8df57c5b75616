"""Weather orchestrator: text -> city keys -> coordinates -> daily forecasts.

Cities are processed strictly one after another. At most one request is
outstanding at a time and results keep the order of the selected city keys.
"""

import logging

from tourweather.config.schema import MAX_CITIES_PER_RUN, PipelineConfig
from tourweather.geo.extractor import extract_cities
from tourweather.geo.query_mapper import city_key_to_query
from tourweather.ingest.forecast_aggregator import ForecastAggregator
from tourweather.ingest.geocoder_client import GeocoderClient
from tourweather.models.common import CityKey
from tourweather.models.forecast import PipelineResult
from tourweather.models.source import DescriptionSource, TextSource, TourSource
from tourweather.models.state import OrchestratorState
from tourweather.pipeline.messages import error_message

logger = logging.getLogger(__name__)


class CancelToken:
    """Cooperative cancellation flag, checked after every await."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class WeatherOrchestrator:
    def __init__(
        self,
        geocoder: GeocoderClient,
        forecaster: ForecastAggregator,
        config: PipelineConfig | None = None,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.config = config or PipelineConfig()

    def select_city_keys(self, source: TextSource) -> list[CityKey]:
        """Choose which cities to forecast for a source, before the run cap."""
        fallback = [self.config.fallback_city]

        if isinstance(source, DescriptionSource):
            found = extract_cities(source.description).all
            return found or fallback

        for text in (source.name_text, source.schedule_text):
            found = extract_cities(text).all
            if not found:
                continue
            if not source.multi:
                return found[:1]
            if source.limit > 0:
                return found[: source.limit]
            return found
        return fallback

    async def run(
        self,
        source: TextSource,
        state: OrchestratorState,
        language: str | None = None,
        token: CancelToken | None = None,
    ) -> bool:
        """Run the pipeline for ``source`` and record the outcome on ``state``.

        Returns True when the run completed and replaced the state's data.
        Sources without any text never start. A cancelled run leaves
        ``state`` untouched from the point of cancellation on.
        """
        if source.is_empty:
            logger.debug("No text to extract places from, not starting")
            return False

        language = language or self.config.default_language.value
        token = token or CancelToken()
        if token.cancelled:
            return False

        state.begin()
        cap = min(self.config.max_cities, MAX_CITIES_PER_RUN)
        city_keys = self.select_city_keys(source)[:cap]
        logger.info("Fetching weather for %s (lang=%s)", city_keys, language)

        results: list[PipelineResult] = []
        try:
            for city_key in city_keys:
                query = city_key_to_query(city_key)
                coords = await self.geocoder.forward_geocode(query)
                if token.cancelled:
                    logger.debug("Run cancelled after geocoding %r", query)
                    return False
                if coords is None:
                    logger.info("Skipping %s: no coordinates for %r", city_key, query)
                    continue

                days = await self.forecaster.fetch_daily_forecast(
                    coords.lat, coords.lon, language
                )
                if token.cancelled:
                    logger.debug("Run cancelled after forecast for %s", city_key)
                    return False
                results.append(
                    PipelineResult(city_key=city_key, query=query, days=days)
                )
        except Exception:
            if token.cancelled:
                return False
            logger.exception("Weather run failed for %s", city_keys)
            state.fail(error_message(language))
            return False

        if token.cancelled:
            return False
        state.succeed(results)
        logger.info("Weather run complete: %d cities", len(results))
        return True
