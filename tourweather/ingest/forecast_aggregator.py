"""Forecast aggregator: collapses 3-hourly forecast entries into daily summaries."""

import logging
from collections import Counter
from datetime import date, datetime, tzinfo

from tourweather.ingest.openweather_client import OpenWeatherClient
from tourweather.models.forecast import (
    DailySummary,
    DailyTemperature,
    HourlyForecastEntry,
)

logger = logging.getLogger(__name__)

MAX_DAYS = 6
NOON_HOUR = 12


class ForecastAggregator:
    def __init__(self, client: OpenWeatherClient, max_days: int = MAX_DAYS):
        self.client = client
        self.max_days = max_days

    async def fetch_daily_forecast(
        self, lat: float, lon: float, language: str
    ) -> list[DailySummary]:
        """Fetch the forecast for a coordinate and summarize it per local day."""
        raw = await self.client.get_forecast(lat, lon, language)
        entries = parse_entries(raw)
        days = aggregate_daily(entries, max_days=self.max_days)
        logger.debug(
            "Aggregated %d entries into %d days for lat=%s lon=%s",
            len(entries), len(days), lat, lon,
        )
        return days


def parse_entries(raw: dict) -> list[HourlyForecastEntry]:
    """Parse the forecast ``list`` array. A missing or non-list value is empty."""
    items = raw.get("list") if isinstance(raw, dict) else None
    if not isinstance(items, list):
        return []

    entries: list[HourlyForecastEntry] = []
    for it in items:
        if not isinstance(it, dict):
            continue
        main = it.get("main")
        if not isinstance(main, dict):
            main = {}
        weather = it.get("weather")
        first = weather[0] if isinstance(weather, list) and weather else {}
        if not isinstance(first, dict):
            first = {}
        entries.append(
            HourlyForecastEntry(
                timestamp=int(it.get("dt") or 0),
                temperature=_number(main.get("temp")),
                temperature_min=_number(main.get("temp_min")),
                temperature_max=_number(main.get("temp_max")),
                description=first.get("description") or "",
            )
        )
    return entries


def aggregate_daily(
    entries: list[HourlyForecastEntry],
    max_days: int = MAX_DAYS,
    tz: tzinfo | None = None,
) -> list[DailySummary]:
    """Group entries by calendar date and summarize each bucket.

    Dates are taken in ``tz``, defaulting to the local timezone of the
    running process. Buckets keep the order they are first seen in.
    """
    buckets: dict[date, list[HourlyForecastEntry]] = {}
    for entry in entries:
        day = _local_datetime(entry.timestamp, tz).date()
        buckets.setdefault(day, []).append(entry)

    daily = [_summarize(bucket, tz) for bucket in buckets.values()]
    return daily[:max_days]


def _summarize(bucket: list[HourlyForecastEntry], tz: tzinfo | None) -> DailySummary:
    temps = [e.temperature for e in bucket if e.temperature is not None]
    mins = [e.temperature_min for e in bucket if e.temperature_min is not None]
    maxs = [e.temperature_max for e in bucket if e.temperature_max is not None]

    avg = sum(temps) / len(temps) if temps else None
    low = min(mins) if mins else avg
    high = max(maxs) if maxs else avg

    return DailySummary(
        representative_timestamp=_representative_timestamp(bucket, tz),
        temperature=DailyTemperature(day=avg, min=low, max=high),
        description=_most_common_description(bucket),
    )


def _most_common_description(bucket: list[HourlyForecastEntry]) -> str:
    """Most frequent description; on a tie the one seen first wins."""
    counts = Counter(e.description for e in bucket if e.description)
    best, best_count = "", -1
    # Counter preserves first-seen order; strict > keeps the earliest tie
    for desc, count in counts.items():
        if count > best_count:
            best, best_count = desc, count
    return best


def _representative_timestamp(
    bucket: list[HourlyForecastEntry], tz: tzinfo | None
) -> int:
    for e in bucket:
        if _local_datetime(e.timestamp, tz).hour == NOON_HOUR:
            return e.timestamp
    return bucket[0].timestamp


def _local_datetime(timestamp: int, tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.fromtimestamp(timestamp)
    return datetime.fromtimestamp(timestamp, tz)


def _number(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
