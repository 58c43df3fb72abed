"""CLI entry point for querying api.weather.gov."""

import argparse
import asyncio
import logging
import sys
from datetime import datetime

import yaml
from pydantic import BaseModel

from weathergov.client import NwsClient
from weathergov.config.loader import load_config
from weathergov.config.schema import ClientConfig
from weathergov.core.errors import NwsError
from weathergov.models.alert import AlertSeverity, AlertStatus, AlertUrgency
from weathergov.models.common import Coordinate
from weathergov.models.zone import ZoneType

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathergov",
        description="National Weather Service API client",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--user-agent", default=None, help="Override the User-Agent header")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # points / forecasts
    point_p = sub.add_parser("point", help="Resolve a coordinate to its grid cell")
    point_p.add_argument("latitude", type=float)
    point_p.add_argument("longitude", type=float)

    forecast_p = sub.add_parser("forecast", help="Forecast for a coordinate")
    forecast_p.add_argument("latitude", type=float)
    forecast_p.add_argument("longitude", type=float)
    forecast_p.add_argument("--hourly", action="store_true")

    grid_p = sub.add_parser("gridpoint", help="Forecast for a grid cell")
    grid_p.add_argument("office")
    grid_p.add_argument("grid_x", type=int)
    grid_p.add_argument("grid_y", type=int)
    grid_p.add_argument("--hourly", action="store_true")

    # alerts
    alerts_p = sub.add_parser("alerts", help="Search alerts")
    alerts_p.add_argument("--active", action="store_true", help="Only active alerts")
    alerts_p.add_argument("--status", choices=[s.value for s in AlertStatus])
    alerts_p.add_argument("--event")
    alerts_p.add_argument("--area")
    alerts_p.add_argument("--zone")
    alerts_p.add_argument("--point", help="lat,lon")
    alerts_p.add_argument("--urgency", choices=[u.value for u in AlertUrgency])
    alerts_p.add_argument("--severity", choices=[s.value for s in AlertSeverity])
    alerts_p.add_argument("--limit", type=int)
    sub.add_parser("alert-count", help="Count active alerts")
    sub.add_parser("alert-types", help="List recognized alert event types")

    # stations / observations
    stations_p = sub.add_parser("stations", help="List observation stations")
    stations_p.add_argument(
        "--point", nargs=2, type=float, metavar=("LAT", "LON"),
        help="Only stations serving this coordinate",
    )
    station_p = sub.add_parser("station", help="Show one station")
    station_p.add_argument("station_id")

    obs_p = sub.add_parser("observations", help="Observations for a station")
    obs_p.add_argument("station_id")
    obs_p.add_argument("--latest", action="store_true")
    obs_p.add_argument("--start", type=datetime.fromisoformat, help="ISO-8601 start")
    obs_p.add_argument("--end", type=datetime.fromisoformat, help="ISO-8601 end")

    # zones / offices
    zones_p = sub.add_parser("zones", help="Zones of a type, or one zone")
    zones_p.add_argument("zone_type", choices=[z.value for z in ZoneType])
    zones_p.add_argument("zone_id", nargs="?")
    zones_p.add_argument("--forecast", action="store_true", help="Zone text forecast")

    offices_p = sub.add_parser("offices", help="Forecast offices, or one office")
    offices_p.add_argument("office_id", nargs="?")
    offices_p.add_argument("--headlines", action="store_true")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else ClientConfig()
    except (OSError, yaml.YAMLError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1

    client = NwsClient(config)
    if args.user_agent:
        client.set_user_agent(args.user_agent)

    if args.command == "config":
        return _cmd_config(config, args)

    try:
        result = asyncio.run(_dispatch(client, args))
    except NwsError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=2, by_alias=True))
    return 0


async def _dispatch(client: NwsClient, args) -> BaseModel:
    if args.command == "point":
        return await client.points.get_point(args.latitude, args.longitude)
    elif args.command == "forecast":
        if args.hourly:
            return await client.forecasts.get_hourly_forecast_for_point(
                args.latitude, args.longitude
            )
        return await client.forecasts.get_forecast_for_point(args.latitude, args.longitude)
    elif args.command == "gridpoint":
        if args.hourly:
            return await client.forecasts.get_hourly_forecast_for_grid_point(
                args.office, args.grid_x, args.grid_y
            )
        return await client.forecasts.get_forecast_for_grid_point(
            args.office, args.grid_x, args.grid_y
        )
    elif args.command == "alerts":
        return await _cmd_alerts(client, args)
    elif args.command == "alert-count":
        return await client.alerts.get_active_alert_count()
    elif args.command == "alert-types":
        return await client.alerts.get_alert_types()
    elif args.command == "stations":
        if args.point:
            return await client.stations.get_stations_for_point(*args.point)
        return await client.stations.get_all_stations()
    elif args.command == "station":
        return await client.stations.get_station(args.station_id)
    elif args.command == "observations":
        if args.latest:
            return await client.observations.get_latest_observation(args.station_id)
        return await client.observations.get_observations(
            args.station_id, start=args.start, end=args.end
        )
    elif args.command == "zones":
        return await _cmd_zones(client, args)
    elif args.command == "offices":
        return await _cmd_offices(client, args)
    raise ValueError(f"Unknown command: {args.command}")


async def _cmd_alerts(client: NwsClient, args) -> BaseModel:
    filters = {
        "status": AlertStatus(args.status) if args.status else None,
        "event": args.event,
        "area": args.area,
        "zone": args.zone,
        "point": Coordinate.parse(args.point) if args.point else None,
        "urgency": AlertUrgency(args.urgency) if args.urgency else None,
        "severity": AlertSeverity(args.severity) if args.severity else None,
    }
    if args.active:
        if args.limit is not None:
            raise ValueError("--limit is not supported with --active")
        return await client.alerts.get_active_alerts(**filters)
    return await client.alerts.get_alerts(limit=args.limit, **filters)


async def _cmd_zones(client: NwsClient, args) -> BaseModel:
    zone_type = ZoneType(args.zone_type)
    if args.zone_id is None:
        if args.forecast:
            raise ValueError("--forecast requires a zone id")
        return await client.zones.get_zones(zone_type)
    if args.forecast:
        return await client.zones.get_zone_forecast(zone_type, args.zone_id)
    return await client.zones.get_zone(zone_type, args.zone_id)


async def _cmd_offices(client: NwsClient, args) -> BaseModel:
    if args.office_id is None:
        if args.headlines:
            raise ValueError("--headlines requires an office id")
        return await client.offices.get_all_offices()
    if args.headlines:
        return await client.offices.get_office_headlines(args.office_id)
    return await client.offices.get_office(args.office_id)


def _cmd_config(config: ClientConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Error: use 'config show'")
    return 1
