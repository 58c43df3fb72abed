"""Alerts service."""

from dataclasses import dataclass

from weathergov.core.endpoint import HttpMethod, normalize_query
from weathergov.core.executor import RequestExecutor
from weathergov.models.alert import (
    AlertCertainty,
    AlertCollection,
    AlertCount,
    AlertMessageType,
    AlertSeverity,
    AlertStatus,
    AlertTypes,
    AlertUrgency,
)
from weathergov.models.common import Coordinate


@dataclass(frozen=True)
class AlertsEndpoint:
    """``/alerts`` or ``/alerts/active`` with optional filters.

    Filters are ordered name/value pairs so the endpoint stays hashable.
    """

    active: bool = False
    filters: tuple[tuple[str, str], ...] = ()

    method = HttpMethod.GET

    @property
    def path(self) -> str:
        return "/alerts/active" if self.active else "/alerts"

    @property
    def query_items(self) -> dict[str, str] | None:
        return normalize_query(dict(self.filters))


@dataclass(frozen=True)
class ActiveAlertCountEndpoint:
    method = HttpMethod.GET
    query_items = None
    path = "/alerts/active/count"


@dataclass(frozen=True)
class ActiveAlertsForZoneEndpoint:
    zone_id: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/alerts/active/zone/{self.zone_id}"


@dataclass(frozen=True)
class ActiveAlertsForAreaEndpoint:
    area: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/alerts/active/area/{self.area}"


@dataclass(frozen=True)
class ActiveAlertsForRegionEndpoint:
    region: str

    method = HttpMethod.GET
    query_items = None

    @property
    def path(self) -> str:
        return f"/alerts/active/region/{self.region}"


@dataclass(frozen=True)
class AlertTypesEndpoint:
    method = HttpMethod.GET
    query_items = None
    path = "/alerts/types"


def alert_filters(
    *,
    status: AlertStatus | None = None,
    message_type: AlertMessageType | None = None,
    event: str | None = None,
    code: str | None = None,
    area: str | None = None,
    point: Coordinate | None = None,
    region: str | None = None,
    region_type: str | None = None,
    zone: str | None = None,
    urgency: AlertUrgency | None = None,
    severity: AlertSeverity | None = None,
    certainty: AlertCertainty | None = None,
    limit: int | None = None,
) -> dict[str, str]:
    """Build the ordered query mapping for alert searches, skipping unset filters."""
    candidates = [
        ("status", status),
        ("message_type", message_type),
        ("event", event),
        ("code", code),
        ("area", area),
        ("point", point.path_string if point is not None else None),
        ("region", region),
        ("region_type", region_type),
        ("zone", zone),
        ("urgency", urgency),
        ("severity", severity),
        ("certainty", certainty),
        ("limit", limit),
    ]
    return {name: str(value) for name, value in candidates if value is not None}


class AlertsService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_alerts(
        self,
        *,
        status: AlertStatus | None = None,
        message_type: AlertMessageType | None = None,
        event: str | None = None,
        code: str | None = None,
        area: str | None = None,
        point: Coordinate | None = None,
        region: str | None = None,
        region_type: str | None = None,
        zone: str | None = None,
        urgency: AlertUrgency | None = None,
        severity: AlertSeverity | None = None,
        certainty: AlertCertainty | None = None,
        limit: int | None = None,
    ) -> AlertCollection:
        """Search all alerts, active or not.

        Every filter is optional; with none set the request has no query
        string at all.
        """
        filters = alert_filters(
            status=status,
            message_type=message_type,
            event=event,
            code=code,
            area=area,
            point=point,
            region=region,
            region_type=region_type,
            zone=zone,
            urgency=urgency,
            severity=severity,
            certainty=certainty,
            limit=limit,
        )
        endpoint = AlertsEndpoint(filters=tuple(filters.items()))
        return await self.executor.execute(endpoint, AlertCollection)

    async def get_active_alerts(
        self,
        *,
        status: AlertStatus | None = None,
        message_type: AlertMessageType | None = None,
        event: str | None = None,
        code: str | None = None,
        area: str | None = None,
        point: Coordinate | None = None,
        region: str | None = None,
        region_type: str | None = None,
        zone: str | None = None,
        urgency: AlertUrgency | None = None,
        severity: AlertSeverity | None = None,
        certainty: AlertCertainty | None = None,
    ) -> AlertCollection:
        """Currently active alerts. Accepts the same filters as ``get_alerts`` except limit."""
        filters = alert_filters(
            status=status,
            message_type=message_type,
            event=event,
            code=code,
            area=area,
            point=point,
            region=region,
            region_type=region_type,
            zone=zone,
            urgency=urgency,
            severity=severity,
            certainty=certainty,
        )
        return await self.executor.execute(
            AlertsEndpoint(active=True, filters=tuple(filters.items())), AlertCollection
        )

    async def get_active_alert_count(self) -> AlertCount:
        return await self.executor.execute(ActiveAlertCountEndpoint(), AlertCount)

    async def get_active_alerts_for_zone(self, zone_id: str) -> AlertCollection:
        return await self.executor.execute(ActiveAlertsForZoneEndpoint(zone_id), AlertCollection)

    async def get_active_alerts_for_area(self, area: str) -> AlertCollection:
        """Active alerts for a state or marine area code, e.g. ``KS``."""
        return await self.executor.execute(ActiveAlertsForAreaEndpoint(area), AlertCollection)

    async def get_active_alerts_for_region(self, region: str) -> AlertCollection:
        return await self.executor.execute(
            ActiveAlertsForRegionEndpoint(region), AlertCollection
        )

    async def get_alert_types(self) -> AlertTypes:
        return await self.executor.execute(AlertTypesEndpoint(), AlertTypes)
