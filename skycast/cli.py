"""CLI entry point for the weather lookup tool."""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from skycast.config.defaults import API_KEY_ENV_VAR
from skycast.config.loader import get_config_value, load_config
from skycast.config.schema import AppConfig
from skycast.ingest.timeline_client import TimelineClient
from skycast.models.forecast import Pending, Ready
from skycast.pipeline.forecast_builder import ForecastBuilder
from skycast.pipeline.session import ForecastSession
from skycast.view.formatters import format_result_json, format_result_text
from skycast.view.labels import LOADING_MESSAGE

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Look up current conditions and a short forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Fetch the forecast for a location")
    lookup_p.add_argument("query", nargs="+", help="Location, e.g. London or 'New York, NY'")
    lookup_p.add_argument(
        "--day", type=int, default=0, help="Index of the upcoming day to show"
    )
    lookup_p.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.max_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which include the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_lookup(config: AppConfig, args) -> int:
    if not config.provider.api_key.get_secret_value():
        print(
            f"Error: no API key configured "
            f"(set provider.api_key or {API_KEY_ENV_VAR})"
        )
        return 1

    builder = ForecastBuilder(
        TimelineClient.from_config(config.provider),
        max_days=config.forecast.max_days,
    )
    session = ForecastSession(builder)
    session.subscribe(_print_loading)

    result = asyncio.run(session.submit(" ".join(args.query)))
    if isinstance(result, Ready) and args.day:
        if not 0 <= args.day < len(result.upcoming):
            print(f"Error: --day must be between 0 and {len(result.upcoming) - 1}")
            return 1
        result = session.select(args.day)

    if args.format == "json":
        print(format_result_json(result))
    else:
        print(format_result_text(result))
    return 0 if isinstance(result, Ready) else 1


def _print_loading(state) -> None:
    if isinstance(state, Pending):
        print(LOADING_MESSAGE, file=sys.stderr)


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1
