"""Observation stations service."""

from dataclasses import dataclass

import httpx

from weathergov.core.endpoint import HttpMethod
from weathergov.core.executor import RequestExecutor
from weathergov.models.common import Coordinate
from weathergov.models.station import Station, StationCollection
from weathergov.services.points import resolve_point


@dataclass(frozen=True)
class StationsEndpoint:
    method = HttpMethod.GET
    query_items = None
    path = "/stations"


@dataclass(frozen=True)
class StationEndpoint:
    station_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/stations/{self.station_id}"


@dataclass(frozen=True)
class LinkedResourceEndpoint:
    """A resource named by an absolute URL from an earlier response.

    Only the URL's path is kept; it is requested against the configured
    base URL like any other endpoint.
    """

    url: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return httpx.URL(self.url).path


class StationsService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_all_stations(self) -> StationCollection:
        return await self.executor.execute(StationsEndpoint(), StationCollection)

    async def get_station(self, station_id: str) -> Station:
        return await self.executor.execute(StationEndpoint(station_id), Station)

    async def get_stations_for_point(self, latitude: float, longitude: float) -> StationCollection:
        """Stations that report observations for the point's grid cell."""
        point = await resolve_point(self.executor, Coordinate(latitude, longitude))
        endpoint = LinkedResourceEndpoint(point.properties.observation_stations)
        return await self.executor.execute(endpoint, StationCollection)
