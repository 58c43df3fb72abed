"""Zone models."""

from enum import StrEnum

from weathergov.models.common import ApiModel, Pagination, Timestamp


class ZoneType(StrEnum):
    LAND = "land"
    MARINE = "marine"
    FORECAST = "forecast"
    PUBLIC = "public"
    COASTAL = "coastal"
    OFFSHORE = "offshore"
    FIRE = "fire"
    COUNTY = "county"


class ZoneProperties(ApiModel):
    id: str
    type: str
    name: str
    effective_date: Timestamp | None = None
    expiration_date: Timestamp | None = None
    state: str | None = None
    forecast_office: str | None = None
    grid_identifier: str | None = None
    cwa: list[str] | None = None
    forecast_offices: list[str] | None = None
    time_zone: list[str] | None = None
    observation_stations: list[str] | None = None
    radar_station: str | None = None


class Zone(ApiModel):
    id: str
    properties: ZoneProperties


class ZoneCollection(ApiModel):
    features: list[Zone]
    pagination: Pagination | None = None


class ZoneForecastPeriod(ApiModel):
    number: int
    name: str
    detailed_forecast: str


class ZoneForecastProperties(ApiModel):
    zone: str | None = None
    updated: Timestamp
    periods: list[ZoneForecastPeriod]


class ZoneForecast(ApiModel):
    properties: ZoneForecastProperties
