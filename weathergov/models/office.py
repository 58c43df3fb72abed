"""Forecast office and headline models.

Office documents are JSON-LD objects rather than GeoJSON features, so their
fields sit at the top level instead of under ``properties``.
"""

from pydantic import Field

from weathergov.models.common import ApiModel, Pagination, Timestamp


class OfficeAddress(ApiModel):
    street_address: str | None = None
    address_locality: str | None = None
    address_region: str | None = None
    postal_code: str | None = None


class Office(ApiModel):
    uri: str | None = Field(default=None, alias="@id")
    id: str
    name: str
    address: OfficeAddress | None = None
    telephone: str | None = None
    fax_number: str | None = None
    email: str | None = None
    nws_region: str | None = None
    parent_organization: str | None = None
    responsible_counties: list[str] | None = None
    responsible_forecast_zones: list[str] | None = None
    responsible_fire_zones: list[str] | None = None
    approved_observation_stations: list[str] | None = None


class OfficeCollection(ApiModel):
    features: list[Office]
    pagination: Pagination | None = None


class Headline(ApiModel):
    uri: str = Field(alias="@id")
    id: str
    office: str
    important: bool
    issuance_time: Timestamp
    link: str
    name: str
    title: str
    summary: str | None = None
    content: str


class HeadlineCollection(ApiModel):
    headlines: list[Headline] = Field(alias="@graph")
