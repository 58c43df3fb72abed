"""Zones service."""

from dataclasses import dataclass

from weathergov.core.endpoint import HttpMethod
from weathergov.core.executor import RequestExecutor
from weathergov.models.zone import Zone, ZoneCollection, ZoneForecast, ZoneType


@dataclass(frozen=True)
class ZonesEndpoint:
    zone_type: ZoneType

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/zones/{self.zone_type}"


@dataclass(frozen=True)
class ZoneEndpoint:
    zone_type: ZoneType
    zone_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/zones/{self.zone_type}/{self.zone_id}"


@dataclass(frozen=True)
class ZoneForecastEndpoint:
    zone_type: ZoneType
    zone_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/zones/{self.zone_type}/{self.zone_id}/forecast"


class ZonesService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_zones(self, zone_type: ZoneType) -> ZoneCollection:
        return await self.executor.execute(ZonesEndpoint(zone_type), ZoneCollection)

    async def get_zone(self, zone_type: ZoneType, zone_id: str) -> Zone:
        return await self.executor.execute(ZoneEndpoint(zone_type, zone_id), Zone)

    async def get_zone_forecast(self, zone_type: ZoneType, zone_id: str) -> ZoneForecast:
        """Text forecast for a public zone. Not every zone type has one."""
        return await self.executor.execute(ZoneForecastEndpoint(zone_type, zone_id), ZoneForecast)
