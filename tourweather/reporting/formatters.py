"""Output formatters for pipeline results."""

import json
import re
from datetime import datetime

from tourweather.models.forecast import DailySummary, PipelineResult

# Checked in order; first match wins
_ICON_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"mưa|rain"), "🌧️"),
    (re.compile(r"giông|thunder|storm"), "⛈️"),
    (re.compile(r"tuyết|snow"), "❄️"),
    (re.compile(r"mây rải rác|few clouds"), "⛅"),
    (re.compile(r"mây|cloud"), "☁️"),
    (re.compile(r"sương|mist|fog"), "🌫️"),
    (re.compile(r"nắng|clear|trong"), "☀️"),
]
DEFAULT_ICON = "🌤️"


def weather_icon(description: str) -> str:
    s = (description or "").lower()
    for pattern, icon in _ICON_RULES:
        if pattern.search(s):
            return icon
    return DEFAULT_ICON


def results_to_payload(results: list[PipelineResult]) -> list[dict]:
    """JSON-compatible pipeline output: [{cityKey, query, days: [...]}]."""
    return [r.to_dict() for r in results]


def format_results_json(results: list[PipelineResult]) -> str:
    return json.dumps(results_to_payload(results), indent=2, ensure_ascii=False)


def format_day_line(day: DailySummary) -> str:
    t = round(day.temperature.day if day.temperature.day is not None else 0)
    t_min = round(day.temperature.min) if day.temperature.min is not None else t
    t_max = round(day.temperature.max) if day.temperature.max is not None else t
    when = datetime.fromtimestamp(day.representative_timestamp).strftime("%a %d/%m")
    return (
        f"  {when} {weather_icon(day.description)} {day.description} "
        f"{t}°C (min {t_min}° / max {t_max}°)"
    )


def format_results_text(results: list[PipelineResult]) -> str:
    """Plain text: one block per city, one line per day."""
    if not results:
        return "No weather data."
    blocks = []
    for r in results:
        lines = [f"=== {r.query} ({r.city_key}) ==="]
        if r.days:
            lines.extend(format_day_line(d) for d in r.days)
        else:
            lines.append("  No weather data.")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
