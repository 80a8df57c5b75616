"""CLI entry point for the tour weather pipeline."""

import argparse
import asyncio
import logging
from pathlib import Path

from tourweather.config.loader import get_config_value, load_config, set_config_value
from tourweather.config.schema import AppConfig
from tourweather.geo.extractor import extract_cities
from tourweather.geo.query_mapper import city_key_to_query
from tourweather.ingest.forecast_aggregator import ForecastAggregator
from tourweather.ingest.geocoder_client import GeocoderClient
from tourweather.ingest.openweather_client import OpenWeatherClient
from tourweather.models.common import Language
from tourweather.models.source import DEFAULT_TOUR_LIMIT, DescriptionSource, TourSource
from tourweather.models.state import OrchestratorState
from tourweather.pipeline.orchestrator import WeatherOrchestrator
from tourweather.reporting.formatters import format_results_json, format_results_text

DEFAULT_CONFIG = "ops/configs/default.yaml"
QUIET_LOGGERS = ("httpx", "httpcore")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tourweather",
        description="Daily weather forecasts for places named in tour descriptions",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # extract
    extract_p = sub.add_parser("extract", help="List places found in a text")
    extract_p.add_argument("text", help="Free-form tour text")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Fetch daily forecasts for a tour")
    forecast_p.add_argument("--description", help="Single tour description")
    forecast_p.add_argument("--name", help="Tour name (searched before the schedule)")
    forecast_p.add_argument("--schedule", help="Tour schedule text")
    forecast_p.add_argument(
        "--multi", action="store_true", help="Use several cities from the tour"
    )
    forecast_p.add_argument(
        "--limit", type=int, default=DEFAULT_TOUR_LIMIT, help="City limit with --multi"
    )
    forecast_p.add_argument(
        "--lang", choices=[lang.value for lang in Language], default=None
    )
    forecast_p.add_argument("--format", choices=["text", "json"], default="text")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "forecast":
        tour_given = args.name is not None or args.schedule is not None
        if args.description is None and not tour_given:
            forecast_p.error("one of --description or --name/--schedule is required")
        if args.description is not None and tour_given:
            forecast_p.error("--description cannot be combined with --name/--schedule")

    config = load_config(_config_path(args.config))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, and the forecast URL carries the key
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if args.command == "extract":
        return _cmd_extract(args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _config_path(path: str) -> str | None:
    """An explicit path must exist; a missing default falls back to built-ins."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        return None
    return path


def _cmd_extract(args) -> int:
    places = extract_cities(args.text)
    if not places.all:
        print("No places found")
        return 0
    for key in places.all:
        marker = "*" if key == places.primary else " "
        print(f"{marker} {key}: {city_key_to_query(key)}")
    return 0


def build_orchestrator(config: AppConfig) -> WeatherOrchestrator:
    return WeatherOrchestrator(
        GeocoderClient(config.geocoder),
        ForecastAggregator(
            OpenWeatherClient(config.forecast), max_days=config.forecast.max_days
        ),
        config.pipeline,
    )


def _cmd_forecast(config: AppConfig, args) -> int:
    if args.description is not None:
        source = DescriptionSource(args.description)
    else:
        source = TourSource(
            name=args.name or "",
            schedule=args.schedule or "",
            multi=args.multi,
            limit=args.limit,
        )
    if source.is_empty:
        print("Error: no tour text given")
        return 1

    state = OrchestratorState()
    orchestrator = build_orchestrator(config)
    asyncio.run(orchestrator.run(source, state, args.lang))

    if state.error:
        print(f"Error: {state.error}")
        return 1
    if args.format == "json":
        print(format_results_json(state.data))
    else:
        print(format_results_text(state.data))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
