"""Command-line interface for NS prices, station lookup and the price cache."""

import argparse
import asyncio
import json
import sys
from typing import Any

import aiohttp

from nstimes.adapters.ns_api import NsPriceRepository
from nstimes.application.services import PriceService, StationMatcher
from nstimes.bootstrap import (
    configure_logging,
    create_price_cache,
    create_station_matcher,
    load_config,
)
from nstimes.domain.errors import AmbiguousStationError, NsTimesError
from nstimes.domain.models import (
    MultipleMatches,
    NoMatch,
    Price,
    PriceQuote,
    SingleMatch,
    StationRecord,
    TravelClass,
    TravelType,
)


def _station_to_dict(station: StationRecord) -> dict[str, Any]:
    return {"name": station.display_name, "uic_code": station.code}


def format_euros(cents: int) -> str:
    """Format an amount in cents as euros."""
    return f"€{cents / 100:.2f}"


def format_price(price: Price) -> list[str]:
    """Format one price option as output lines."""
    class_str = TravelClass.from_api_value(price.travel_class).label
    line = f"{format_euros(price.total_price_in_cents)} - {price.display_name} ({class_str})"
    if price.is_best_option:
        line += " * Best option"

    lines = [line, f"  Per adult: {format_euros(price.price_per_adult_in_cents)}"]
    if price.discount_in_cents:
        lines.append(f"  Discount: {format_euros(price.discount_in_cents)}")
    if price.discount_type != "NONE":
        lines.append(f"  Discount type: {price.discount_type}")
    if price.operator_name:
        lines.append(f"  Operator: {price.operator_name}")
    return lines


def _print_quote(quote: PriceQuote) -> None:
    print(
        f"Getting prices from {quote.origin.display_name} to {quote.destination.display_name}"
    )
    if not quote.prices:
        print("No prices found for this route.")
        return

    print()
    for price in quote.prices:
        for line in format_price(price):
            print(line)
        print()


def _print_ambiguous(error: AmbiguousStationError) -> None:
    print(
        f"Your query `{error.query}` was ambiguous, multiple stations matched:",
        file=sys.stderr,
    )
    for station in error.candidates:
        print(f"{station.code} - {station.display_name}", file=sys.stderr)


async def _handle_price_command(
    matcher: StationMatcher,
    args: argparse.Namespace,
    cache_file: str | None,
) -> None:
    """Handle the price command."""
    config = load_config()
    api_token = config.require_api_token()
    cache = create_price_cache(cache_file)

    travel_class = TravelClass(args.travel_class)
    travel_type = TravelType.RETURN if args.is_return else TravelType.SINGLE

    async with aiohttp.ClientSession() as session:
        repository = NsPriceRepository(
            session=session, api_token=api_token, timeout=config.ns_api_timeout
        )
        service = PriceService(matcher, repository, cache)
        quote = await service.get_prices(args.origin, args.destination, travel_class, travel_type)

    _print_quote(quote)


def _handle_stations_command(matcher: StationMatcher, query: str, output_json: bool) -> None:
    """Handle the stations command."""
    result = matcher.lookup(query)

    if isinstance(result, SingleMatch):
        stations: tuple[StationRecord, ...] = (result.station,)
    elif isinstance(result, MultipleMatches):
        stations = result.candidates
    else:
        stations = ()

    if output_json:
        print(json.dumps([_station_to_dict(s) for s in stations], indent=2, ensure_ascii=False))
        return

    if isinstance(result, NoMatch):
        print(f"No stations found for '{query}'", file=sys.stderr)
        sys.exit(1)

    print(f"\nFound {len(stations)} station(s):\n")
    for station in stations:
        print(f"  {station.display_name}")
        print(f"    UIC code: {station.code}")


def _handle_cache_command(action: str, cache_file: str | None) -> None:
    """Handle the cache stats and cache cleanup commands."""
    if not cache_file:
        print("No cache file given; use --cache PATH or NSTIMES_CACHE_FILE", file=sys.stderr)
        sys.exit(1)

    cache = create_price_cache(cache_file)
    if action == "cleanup":
        removed = cache.cleanup()
        print(f"Removed {removed} expired entr{'y' if removed == 1 else 'ies'}")
        return

    stats = cache.stats()
    print(f"Cache file: {cache_file}")
    print(f"  Total entries:   {stats.total}")
    print(f"  Valid entries:   {stats.valid}")
    print(f"  Expired entries: {stats.expired}")


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="nstimes",
        description="NS (Dutch Railways) prices with offline station lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Second class single trip price
  nstimes price "Amsterdam Centraal" Utrecht

  # First class return, caching single-trip prices in a file
  nstimes --cache ~/.cache/nstimes/prices.json price Zwolle Groningen --class 1

  # Find station names and UIC codes
  nstimes stations rotterdam

  # Inspect or prune the price cache
  nstimes --cache ~/.cache/nstimes/prices.json cache stats
        """,
    )
    parser.add_argument(
        "--cache",
        metavar="PATH",
        help="Enable price caching in this JSON file (default: NSTIMES_CACHE_FILE)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    price_parser = subparsers.add_parser("price", help="Get price information for a trip")
    price_parser.add_argument("origin", help="Start station name to search for")
    price_parser.add_argument("destination", help="Destination station name to search for")
    price_parser.add_argument(
        "--class",
        dest="travel_class",
        type=int,
        choices=[1, 2],
        default=2,
        help="Travel class: 1 for first class, 2 for second class (default: 2)",
    )
    price_parser.add_argument(
        "--return",
        dest="is_return",
        action="store_true",
        help="Get price for return trip instead of single trip",
    )

    stations_parser = subparsers.add_parser("stations", help="Look up stations by name")
    stations_parser.add_argument("query", help="Station name or part of it")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    cache_parser = subparsers.add_parser("cache", help="Inspect or clean the price cache")
    cache_parser.add_argument("action", choices=["stats", "cleanup"], help="Cache action")

    return parser


async def _execute_command(args: argparse.Namespace) -> None:
    """Execute the appropriate command based on args."""
    cache_file = args.cache or load_config().cache_file
    matcher = create_station_matcher()

    if args.command == "price":
        await _handle_price_command(matcher, args, cache_file)
    elif args.command == "stations":
        _handle_stations_command(matcher, args.query, args.json)
    elif args.command == "cache":
        _handle_cache_command(args.action, cache_file)


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging("WARNING")

    try:
        await _execute_command(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except AmbiguousStationError as e:
        _print_ambiguous(e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (NsTimesError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
