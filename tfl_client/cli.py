"""
Command line access to the TfL unified API.

Credentials come from the environment (TFL_APP_ID, TFL_APP_KEY) or a .env file.
Examples:
  tfl-client stop 940GZZLUASL
  tfl-client search "London Bridge" --modes national-rail,tube
  tfl-client journey 1001089 1000173 --date 20190401 --time 0715 --modes national-rail,tube
  tfl-client fare 940GZZLUASL 940GZZLUBNK
"""
import argparse
import json
import logging
import sys
from collections.abc import Sequence

import httpx
from pydantic import BaseModel

from tfl_client.api.client import TflClient
from tfl_client.api.errors import TflError
from tfl_client.api.models import JourneyQuery, SingleFareQuery
from tfl_client.settings import get_settings


def _split_modes(value: str | None) -> list[str]:
    if not value:
        return []
    return [m.strip() for m in value.split(",") if m.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tfl-client", description="Query the TfL unified API")
    parser.add_argument("--base-url", default=None, help="Override the API origin (default from TFL_BASE_URL)")
    parser.add_argument("--log-level", default=None, help="Logging level (default from TFL_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    stop = sub.add_parser("stop", help="Get a stop point by id")
    stop.add_argument("stop_id")

    search = sub.add_parser("search", help="Search stop points by name")
    search.add_argument("term")
    search.add_argument("--modes", default=None, help="Comma-separated modes, e.g. national-rail,tube")

    journey = sub.add_parser("journey", help="Plan a journey between two stop points")
    journey.add_argument("from_id")
    journey.add_argument("to_id")
    journey.add_argument("--date", required=True, help="yyyyMMdd")
    journey.add_argument("--time", required=True, help="HHmm")
    journey.add_argument("--modes", default=None, help="Comma-separated modes")

    fare = sub.add_parser("fare", help="Single fare between two stations")
    fare.add_argument("from_id")
    fare.add_argument("to_id")
    return parser


def run(client: TflClient, args: argparse.Namespace) -> BaseModel | list[BaseModel]:
    if args.command == "stop":
        return client.get_stop_point(args.stop_id)
    if args.command == "search":
        return client.search_stop_points_with_modes(args.term, _split_modes(args.modes))
    if args.command == "journey":
        query = JourneyQuery(
            from_id=args.from_id,
            to_id=args.to_id,
            date=args.date,
            time=args.time,
            modes=_split_modes(args.modes),
        )
        return client.get_journey_itinerary(query)
    if args.command == "fare":
        return client.single_fare_finder(SingleFareQuery(from_id=args.from_id, to_id=args.to_id))
    raise ValueError(f"unknown command: {args.command}")


def _to_json(result: BaseModel | list[BaseModel]) -> str:
    if isinstance(result, BaseModel):
        return result.model_dump_json(by_alias=True, indent=2)
    return json.dumps([item.model_dump(mode="json", by_alias=True) for item in result], indent=2)


def main(argv: Sequence[str] | None = None, client: TflClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s %(message)s",
    )
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})

    owns_client = client is None
    if client is None:
        client = TflClient.from_settings(settings)
    try:
        result = run(client, args)
    except (TflError, httpx.TransportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if owns_client:
            client.close()

    print(_to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
