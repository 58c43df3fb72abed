"""Observation station models."""

from pydantic import Field

from weathergov.models.common import ApiModel, Pagination, QuantitativeValue


class StationProperties(ApiModel):
    id: str = Field(alias="@id")
    station_identifier: str
    name: str
    time_zone: str | None = None
    elevation: QuantitativeValue | None = None
    forecast: str | None = None
    county: str | None = None
    fire_weather_zone: str | None = None


class Station(ApiModel):
    id: str
    properties: StationProperties


class StationCollection(ApiModel):
    features: list[Station]
    observation_stations: list[str] | None = None
    pagination: Pagination | None = None
