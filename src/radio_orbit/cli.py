"""Command line front end for browsing radio stations."""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict

import aiohttp
from pydantic import ValidationError

from radio_orbit.adapters.config import AppConfig
from radio_orbit.adapters.geometry import country_code_of, country_name_of, geometry_center
from radio_orbit.application.services import filter_stations, is_favorite
from radio_orbit.domain.models import FilterState, Station
from radio_orbit.main import AppServices, build_services, configure_logging


def format_station(station: Station) -> str:
    """One-line summary of a station."""
    place = station.place or "Unknown"
    details = ", ".join(
        part
        for part in (station.codec, f"{station.bitrate}kbps" if station.bitrate else "")
        if part
    )
    line = f"  {station.name} ({place}) - {station.clickcount} clicks"
    if details:
        line += f" [{details}]"
    return f"{line}\n    ID: {station.stationuuid}\n    URL: {station.url_resolved}"


def print_stations(stations: list[Station], as_json: bool, limit: int | None = None) -> None:
    shown = stations[:limit] if limit else stations
    if as_json:
        print(json.dumps([s.to_dict() for s in shown], indent=2, ensure_ascii=False))
        return
    if not stations:
        print("No stations found.", file=sys.stderr)
        return
    print(f"\nFound {len(stations)} station(s):\n")
    for station in shown:
        print(format_station(station))
        print()
    if len(shown) < len(stations):
        print(f"  ... {len(stations) - len(shown)} more (use --limit to show more)")


def _discard_stale(selection: str) -> int:
    print(f"Results for {selection} were superseded by a newer request.", file=sys.stderr)
    return 0


async def _country(services: AppServices, args: argparse.Namespace) -> int:
    state = FilterState().with_country(args.code, args.name)
    if args.city:
        state = state.with_city(args.city)
    stations, applied = await services.selection.run(
        lambda: services.aggregation.get_stations_by_country(args.code, args.name)
    )
    if not applied:
        return _discard_stale(args.name)
    stations = filter_stations(stations, city=state.city, search_term=args.filter or "")
    print_stations(stations, args.json, args.limit)
    return 0


async def _search(services: AppServices, args: argparse.Namespace) -> int:
    stations, applied = await services.selection.run(
        lambda: services.aggregation.search_global_stations(args.query)
    )
    if not applied:
        return _discard_stale(args.query)
    print_stations(stations, args.json, args.limit)
    return 0


async def _clusters(services: AppServices, args: argparse.Namespace) -> int:
    stations = await services.aggregation.get_stations_by_country(args.code, args.name)
    clusters = services.clustering.cluster(stations)
    highlighted = services.clustering.find_cluster(clusters, args.highlight)

    if args.json:
        print(json.dumps([asdict(c) for c in clusters], indent=2, ensure_ascii=False))
        return 0
    if not clusters:
        print(f"No geolocated cities for {args.name}.", file=sys.stderr)
        return 0
    print(f"\n{len(clusters)} city cluster(s) for {args.name}:\n")
    for cluster in sorted(clusters, key=lambda c: -c.station_count):
        marker = " *" if highlighted is not None and cluster == highlighted else ""
        print(
            f"  {cluster.name}{marker}: {cluster.station_count} station(s) "
            f"at ({cluster.lat:.4f}, {cluster.lng:.4f})"
        )
    if args.highlight and highlighted is None:
        print(f"\nCity '{args.highlight}' has no cluster.", file=sys.stderr)
    return 0


async def _ask(services: AppServices, args: argparse.Namespace) -> int:
    if args.no_search:
        reply = await services.assistant.ask(args.prompt)
        stations: list[Station] = []
    else:
        reply, stations = await services.assistant.ask_and_search(args.prompt)

    print(f"\nOrbit AI: {reply.text}")
    if reply.search_term:
        print(f"\nSuggested search: {reply.search_term}")
    if stations:
        print_stations(stations, as_json=False, limit=args.limit)
    return 0


async def _favorites(services: AppServices, args: argparse.Namespace) -> int:
    if args.favorites_command == "list":
        print_stations(services.favorites.favorites, args.json)
        return 0

    if args.favorites_command == "remove":
        before = len(services.favorites.favorites)
        after = services.favorites.remove(args.station_id)
        if len(after) == before:
            print(f"Station {args.station_id} is not a favorite.", file=sys.stderr)
            return 1
        print(f"Removed {args.station_id}.")
        return 0

    # toggle: look the station up in the country's current list
    stations = await services.aggregation.get_stations_by_country(args.code, args.name)
    station = next((s for s in stations if s.stationuuid == args.station_id), None)
    if station is None:
        print(f"Station {args.station_id} not found in {args.name}.", file=sys.stderr)
        return 1
    was_favorite = is_favorite(services.favorites.favorites, station)
    services.favorites.toggle(station)
    print(f"{'Removed' if was_favorite else 'Added'} {station.name}.")
    return 0


async def _geometry(services: AppServices, args: argparse.Namespace) -> int:
    collection = await services.geometry.load()
    countries = []
    for feature in collection.get("features", []):
        code = country_code_of(feature)
        if not code:
            continue
        lat, lng = geometry_center(feature.get("geometry"))
        countries.append(
            {"code": code, "name": country_name_of(feature), "lat": lat, "lng": lng}
        )

    if args.json:
        print(json.dumps(countries, indent=2, ensure_ascii=False))
        return 0
    if not countries:
        print("No country geometry available.", file=sys.stderr)
        return 1
    for country in sorted(countries, key=lambda c: c["name"]):
        print(f"  {country['code']}  {country['name']} ({country['lat']:.2f}, {country['lng']:.2f})")
    return 0


COMMANDS = {
    "country": _country,
    "search": _search,
    "clusters": _clusters,
    "ask": _ask,
    "favorites": _favorites,
    "geometry": _geometry,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radio-orbit",
        description="Browse internet radio stations by country and city",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stations for a country
  radio-orbit country CO Colombia

  # Only stations in one city
  radio-orbit country CO Colombia --city Cali

  # Search the whole directory
  radio-orbit search "jazz"

  # City clusters for the map
  radio-orbit clusters US "United States of America"

  # Ask the assistant for a recommendation
  radio-orbit ask "Salsa in Colombia"
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    country_parser = subparsers.add_parser("country", help="List stations for a country")
    country_parser.add_argument("code", help="Two-letter country code (e.g., CO)")
    country_parser.add_argument("name", help="Country display name (e.g., Colombia)")
    country_parser.add_argument("--city", help="Only stations in this city or region")
    country_parser.add_argument("--filter", help="Only stations whose name, tags or city match")
    country_parser.add_argument("--limit", type=int, default=50, help="Maximum stations shown")
    country_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search stations worldwide")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--limit", type=int, default=50, help="Maximum stations shown")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    clusters_parser = subparsers.add_parser("clusters", help="Show city clusters for a country")
    clusters_parser.add_argument("code", help="Two-letter country code")
    clusters_parser.add_argument("name", help="Country display name")
    clusters_parser.add_argument("--highlight", help="Mark the cluster with this exact name")
    clusters_parser.add_argument("--json", action="store_true", help="Output as JSON")

    ask_parser = subparsers.add_parser("ask", help="Ask the Orbit AI assistant")
    ask_parser.add_argument("prompt", help="What you want to listen to")
    ask_parser.add_argument(
        "--no-search", action="store_true", help="Don't run the suggested search"
    )
    ask_parser.add_argument("--limit", type=int, default=10, help="Maximum stations shown")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite stations")
    favorites_sub = favorites_parser.add_subparsers(dest="favorites_command", required=True)
    list_parser = favorites_sub.add_parser("list", help="List favorites")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")
    toggle_parser = favorites_sub.add_parser("toggle", help="Add or remove a country station")
    toggle_parser.add_argument("code", help="Two-letter country code")
    toggle_parser.add_argument("name", help="Country display name")
    toggle_parser.add_argument("station_id", help="Station identifier")
    remove_parser = favorites_sub.add_parser("remove", help="Remove a favorite")
    remove_parser.add_argument("station_id", help="Station identifier")

    geometry_parser = subparsers.add_parser("geometry", help="List countries from map data")
    geometry_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)

    try:
        async with aiohttp.ClientSession() as session:
            services = build_services(config, session=session)
            return await COMMANDS[args.command](services, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
