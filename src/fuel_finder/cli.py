"""Command line front end for the fuel finder."""

import asyncio
import json
import logging
import sys
from typing import Any

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.console import ConsoleListSurface, ConsoleMapSurface
from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.adapters.location import create_location_provider
from fuel_finder.application.services import PresentationCoordinator
from fuel_finder.bootstrap import create_search_service, create_session
from fuel_finder.domain.models import FuelFinderError, GeocodedPlace
from fuel_finder.domain.models.finder_state import PHASE_ERROR

logger = logging.getLogger(__name__)


def place_to_dict(place: GeocodedPlace) -> dict[str, Any]:
    """JSON-ready representation of a geocoded place."""
    box = place.bounding_box
    return {
        "query": place.query,
        "display_name": place.display_name,
        "latitude": place.center.latitude,
        "longitude": place.center.longitude,
        "bounding_box": {
            "south": box.south,
            "north": box.north,
            "west": box.west,
            "east": box.east,
        },
    }


def coordinator_to_dict(
    coordinator: PresentationCoordinator, formatter: StationFormatter
) -> dict[str, Any]:
    """JSON-ready summary of what the coordinator currently displays."""
    state = coordinator.state
    nearest = coordinator.nearest_station()
    return {
        "query": state.last_query,
        "phase": state.phase,
        "outcome": state.last_outcome,
        "highway_filter": state.highway_filter,
        "message": state.message.text if state.message else None,
        "nearest": formatter.format_list_item(nearest, is_nearest=True) if nearest else None,
        "stations": [
            formatter.format_list_item(s, is_nearest=nearest is not None and s.id == nearest.id)
            for s in coordinator.displayed_stations()
        ],
    }


async def geocode_city(config: AppConfig, city: str, format_json: bool = False) -> int:
    """Resolve a city name and print it; returns the exit code."""
    async with create_session(config) as session:
        search_service = create_search_service(config, session)
        try:
            place = await search_service.geocode(city)
        except (FuelFinderError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if format_json:
        print(json.dumps(place_to_dict(place), indent=2, ensure_ascii=False))
    else:
        print(place.display_name)
        print(f"  Center:       {place.center.latitude:.5f}, {place.center.longitude:.5f}")
        box = place.bounding_box
        print(
            f"  Bounding box: S {box.south:.5f}, N {box.north:.5f}, "
            f"W {box.west:.5f}, E {box.east:.5f}"
        )
    return 0


async def search_city(
    config: AppConfig,
    city: str,
    highway: str | None = None,
    near_me: bool = False,
    latitude: float | None = None,
    longitude: float | None = None,
    format_json: bool = False,
) -> int:
    """Search stations for a city, optionally ranked from the user's position."""
    if (latitude is None) != (longitude is None):
        print("Error: --lat and --lon must be given together", file=sys.stderr)
        return 2

    formatter = StationFormatter()
    # Human-readable output goes to stderr when stdout carries JSON
    list_stream = sys.stderr if format_json else sys.stdout

    async with create_session(config) as session:
        coordinator = PresentationCoordinator(
            create_search_service(config, session),
            ConsoleMapSurface(formatter),
            ConsoleListSurface(formatter, stream=list_stream),
            configured_highways=config.highways,
            station_zoom=config.station_zoom,
            user_zoom=config.user_zoom,
        )

        if highway:
            coordinator.filter_by_highway(highway)

        phase = await coordinator.search_city(city)
        if phase != PHASE_ERROR and (near_me or latitude is not None or longitude is not None):
            provider = create_location_provider(config, session, latitude, longitude)
            phase = await coordinator.locate_me(provider)

    if format_json:
        summary = coordinator_to_dict(coordinator, formatter)
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    return 1 if phase == PHASE_ERROR else 0


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Find fuel stations for a city using OpenStreetMap data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve a city name
  fuel-finder-cli geocode "Nagpur"

  # List fuel stations for a city
  fuel-finder-cli search "Nagpur"

  # Only stations tagged with a highway, ranked from your position
  fuel-finder-cli search "Nagpur" --highway NH44 --near-me

  # Rank from a given position
  fuel-finder-cli search "Nagpur" --lat 21.15 --lon 79.09 --json
        """,
    )
    parser.add_argument("--log-level", default=None, help="Log level (default from config)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    geocode_parser = subparsers.add_parser("geocode", help="Resolve a city name")
    geocode_parser.add_argument("city", help="City or place name")
    geocode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search fuel stations for a city")
    search_parser.add_argument("city", help="City or place name")
    search_parser.add_argument("--highway", help="Only show stations on this highway (e.g. NH44)")
    search_parser.add_argument(
        "--near-me",
        action="store_true",
        help="Rank stations by distance from the configured location source",
    )
    search_parser.add_argument("--lat", type=float, help="Your latitude (implies --near-me)")
    search_parser.add_argument("--lon", type=float, help="Your longitude (implies --near-me)")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig().apply_toml()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=args.log_level.upper() if args.log_level else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        if args.command == "geocode":
            exit_code = await geocode_city(config, args.city, format_json=args.json)
        else:
            exit_code = await search_city(
                config,
                args.city,
                highway=args.highway,
                near_me=args.near_me,
                latitude=args.lat,
                longitude=args.lon,
                format_json=args.json,
            )
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("CLI command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
