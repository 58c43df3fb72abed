"""Point lookup service and the grid resolution shared by chained calls."""

import logging
from dataclasses import dataclass

from weathergov.core.endpoint import HttpMethod
from weathergov.core.executor import RequestExecutor
from weathergov.models.common import Coordinate
from weathergov.models.point import GridReference, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointEndpoint:
    coordinate: Coordinate

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/points/{self.coordinate.path_string}"


async def resolve_point(executor: RequestExecutor, coordinate: Coordinate) -> Point:
    """First stage of every chained lookup. Errors propagate unchanged."""
    point = await executor.execute(PointEndpoint(coordinate), Point)
    logger.debug(
        "Resolved %s to %s/%d,%d",
        coordinate,
        point.properties.grid_id,
        point.properties.grid_x,
        point.properties.grid_y,
    )
    return point


async def resolve_grid_reference(
    executor: RequestExecutor, coordinate: Coordinate
) -> GridReference:
    point = await resolve_point(executor, coordinate)
    return point.grid_reference


class PointsService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_point(self, latitude: float, longitude: float) -> Point:
        """Fetch grid and metadata links for a coordinate."""
        return await resolve_point(self.executor, Coordinate(latitude, longitude))

    async def get_grid_reference(self, latitude: float, longitude: float) -> GridReference:
        return await resolve_grid_reference(self.executor, Coordinate(latitude, longitude))
