"""Station observation models."""

from pydantic import Field

from weathergov.models.common import ApiModel, Pagination, QuantitativeValue, Timestamp


class PresentWeather(ApiModel):
    intensity: str | None = None
    modifier: str | None = None
    weather: str | None = None
    raw_string: str | None = None
    in_vicinity: bool | None = None


class CloudLayer(ApiModel):
    base: QuantitativeValue | None = None
    amount: str | None = None


class ObservationProperties(ApiModel):
    id: str = Field(alias="@id")
    type: str | None = Field(default=None, alias="@type")
    station: str
    timestamp: Timestamp
    raw_message: str | None = None
    text_description: str | None = None
    icon: str | None = None
    present_weather: list[PresentWeather] | None = None
    temperature: QuantitativeValue | None = None
    dewpoint: QuantitativeValue | None = None
    wind_direction: QuantitativeValue | None = None
    wind_speed: QuantitativeValue | None = None
    wind_gust: QuantitativeValue | None = None
    barometric_pressure: QuantitativeValue | None = None
    sea_level_pressure: QuantitativeValue | None = None
    visibility: QuantitativeValue | None = None
    max_temperature_last_24_hours: QuantitativeValue | None = None
    min_temperature_last_24_hours: QuantitativeValue | None = None
    precipitation_last_hour: QuantitativeValue | None = None
    precipitation_last_3_hours: QuantitativeValue | None = None
    precipitation_last_6_hours: QuantitativeValue | None = None
    relative_humidity: QuantitativeValue | None = None
    wind_chill: QuantitativeValue | None = None
    heat_index: QuantitativeValue | None = None
    cloud_layers: list[CloudLayer] | None = None


class Observation(ApiModel):
    id: str
    properties: ObservationProperties


class ObservationCollection(ApiModel):
    features: list[Observation]
    pagination: Pagination | None = None
