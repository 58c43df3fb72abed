"""Point lookup models."""

from dataclasses import dataclass

from weathergov.models.common import ApiModel


@dataclass(frozen=True)
class GridReference:
    """Forecast office plus grid X/Y identifying a forecast cell."""

    office: str
    x: int
    y: int


class PointProperties(ApiModel):
    grid_id: str
    grid_x: int
    grid_y: int
    forecast: str
    forecast_hourly: str
    forecast_grid_data: str
    observation_stations: str
    time_zone: str
    cwa: str | None = None
    forecast_office: str | None = None
    forecast_zone: str | None = None
    county: str | None = None
    fire_weather_zone: str | None = None
    radar_station: str | None = None


class Point(ApiModel):
    id: str
    properties: PointProperties

    @property
    def grid_reference(self) -> GridReference:
        p = self.properties
        return GridReference(office=p.grid_id, x=p.grid_x, y=p.grid_y)
