"""Station observations service."""

from dataclasses import dataclass
from datetime import UTC, datetime

from weathergov.core.endpoint import HttpMethod, normalize_query
from weathergov.core.executor import RequestExecutor
from weathergov.models.observation import Observation, ObservationCollection


@dataclass(frozen=True)
class StationObservationsEndpoint:
    station_id: str
    start: datetime | None = None
    end: datetime | None = None

    method = HttpMethod.GET

    @property
    def path(self) -> str:
        return f"/stations/{self.station_id}/observations"

    @property
    def query_items(self) -> dict[str, str] | None:
        params = {}
        if self.start is not None:
            params["start"] = format_timestamp(self.start)
        if self.end is not None:
            params["end"] = format_timestamp(self.end)
        return normalize_query(params)


@dataclass(frozen=True)
class LatestObservationEndpoint:
    station_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/stations/{self.station_id}/observations/latest"


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond fraction, e.g. ``2024-01-01T00:00:00.000Z``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ObservationsService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_latest_observation(self, station_id: str) -> Observation:
        return await self.executor.execute(LatestObservationEndpoint(station_id), Observation)

    async def get_observations(
        self,
        station_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> ObservationCollection:
        """Observations for a station, optionally bounded in time."""
        return await self.executor.execute(
            StationObservationsEndpoint(station_id, start, end), ObservationCollection
        )
