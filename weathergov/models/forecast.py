"""Gridpoint forecast models."""

from weathergov.models.common import ApiModel, QuantitativeValue, Timestamp


class ForecastPeriod(ApiModel):
    number: int
    name: str
    start_time: Timestamp
    end_time: Timestamp
    is_daytime: bool
    temperature: int
    temperature_unit: str
    temperature_trend: str | None = None
    probability_of_precipitation: QuantitativeValue | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    icon: str | None = None
    short_forecast: str
    detailed_forecast: str


class ForecastProperties(ApiModel):
    updated: Timestamp | None = None
    units: str | None = None
    forecast_generator: str | None = None
    generated_at: Timestamp | None = None
    update_time: Timestamp | None = None
    valid_times: str | None = None
    elevation: QuantitativeValue | None = None
    periods: list[ForecastPeriod]


class Forecast(ApiModel):
    properties: ForecastProperties

    @property
    def periods(self) -> list[ForecastPeriod]:
        return self.properties.periods
