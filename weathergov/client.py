"""Client facade for api.weather.gov."""

from functools import cached_property

from weathergov.config.schema import ClientConfig
from weathergov.core.endpoint import Endpoint
from weathergov.core.executor import RequestExecutor
from weathergov.core.formats import ResponseFormat
from weathergov.services.alerts import AlertsService
from weathergov.services.forecasts import ForecastsService
from weathergov.services.observations import ObservationsService
from weathergov.services.offices import OfficesService
from weathergov.services.points import PointsService
from weathergov.services.stations import StationsService
from weathergov.services.zones import ZonesService


class NwsClient:
    """Entry point for the National Weather Service API.

    Owns one config and one request executor. Each service is built on first
    access and shares that executor, so changing the user agent affects all
    subsequent calls.

    Example::

        client = NwsClient(ClientConfig(user_agent="myapp (me@example.com)"))
        forecast = await client.forecasts.get_forecast_for_point(39.7456, -97.0892)
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._executor = RequestExecutor(self.config)

    @cached_property
    def points(self) -> PointsService:
        return PointsService(self._executor)

    @cached_property
    def forecasts(self) -> ForecastsService:
        return ForecastsService(self._executor)

    @cached_property
    def alerts(self) -> AlertsService:
        return AlertsService(self._executor)

    @cached_property
    def observations(self) -> ObservationsService:
        return ObservationsService(self._executor)

    @cached_property
    def stations(self) -> StationsService:
        return StationsService(self._executor)

    @cached_property
    def zones(self) -> ZonesService:
        return ZonesService(self._executor)

    @cached_property
    def offices(self) -> OfficesService:
        return OfficesService(self._executor)

    def set_user_agent(self, user_agent: str) -> None:
        """Must not be called while requests are in flight."""
        self.config.user_agent = user_agent

    async def fetch_raw(
        self, endpoint: Endpoint, response_format: ResponseFormat | None = None
    ) -> bytes:
        """Fetch an endpoint without decoding, e.g. CAP or ATOM documents."""
        return await self._executor.execute_raw(endpoint, response_format)
