"""CLI entry point for the weatherdex service."""

import argparse
import json
import logging

from weatherdex.config.loader import resolve_config
from weatherdex.errors import CityNotFound, UpstreamError
from weatherdex.health import HealthChecker
from weatherdex.pipeline.weather_item_pipeline import WeatherItemPipeline


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdex",
        description="Current weather for a city, paired with a matching Pokémon",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (default: $WEATHERDEX_CONFIG)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Listening port")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up one city and print the result")
    lookup_p.add_argument("city", help="City name, e.g. 'Lisbon, PT'")

    # health
    sub.add_parser("health", help="Check upstream provider reachability")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = resolve_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "health":
        return _cmd_health(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdex.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    print(f"Server running at http://localhost:{port}")
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_lookup(config, args) -> int:
    city = args.city.strip()
    if not city:
        print("Error: city must not be empty")
        return 1
    pipeline = WeatherItemPipeline.from_config(config)
    try:
        result = pipeline.run(city)
    except CityNotFound:
        print(f"City not found: {city}")
        return 1
    except UpstreamError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    return 0


def _cmd_health(config, args) -> int:
    status = HealthChecker(config).check()
    print(f"Geocoding API: {'OK' if status.geocoding_reachable else 'FAIL'}")
    print(f"Weather API: {'OK' if status.weather_reachable else 'FAIL'}")
    print(f"Catalog API: {'OK' if status.catalog_reachable else 'FAIL'}")
    return 0 if status.ok else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
