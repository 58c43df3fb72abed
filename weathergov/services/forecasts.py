"""Gridpoint forecast service."""

from dataclasses import dataclass

from weathergov.core.endpoint import HttpMethod
from weathergov.core.executor import RequestExecutor
from weathergov.models.common import Coordinate
from weathergov.models.forecast import Forecast
from weathergov.models.point import GridReference
from weathergov.services.points import resolve_grid_reference


@dataclass(frozen=True)
class GridpointForecastEndpoint:
    office: str
    grid_x: int
    grid_y: int
    hourly: bool = False

    method = HttpMethod.GET
    query_items = None

    @classmethod
    def for_grid(cls, grid: GridReference, hourly: bool = False) -> "GridpointForecastEndpoint":
        return cls(grid.office, grid.x, grid.y, hourly)

    @property
    def path(self) -> str:
        path = f"/gridpoints/{self.office}/{self.grid_x},{self.grid_y}/forecast"
        return path + "/hourly" if self.hourly else path


class ForecastsService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_forecast_for_point(self, latitude: float, longitude: float) -> Forecast:
        """Resolve the point to its grid cell, then fetch the 12-hour forecast."""
        grid = await resolve_grid_reference(self.executor, Coordinate(latitude, longitude))
        return await self.executor.execute(GridpointForecastEndpoint.for_grid(grid), Forecast)

    async def get_hourly_forecast_for_point(self, latitude: float, longitude: float) -> Forecast:
        grid = await resolve_grid_reference(self.executor, Coordinate(latitude, longitude))
        return await self.executor.execute(
            GridpointForecastEndpoint.for_grid(grid, hourly=True), Forecast
        )

    async def get_forecast_for_grid_point(self, office: str, grid_x: int, grid_y: int) -> Forecast:
        return await self.executor.execute(
            GridpointForecastEndpoint(office, grid_x, grid_y), Forecast
        )

    async def get_hourly_forecast_for_grid_point(
        self, office: str, grid_x: int, grid_y: int
    ) -> Forecast:
        return await self.executor.execute(
            GridpointForecastEndpoint(office, grid_x, grid_y, hourly=True), Forecast
        )
