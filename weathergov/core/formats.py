"""Response formats accepted by api.weather.gov."""

from enum import StrEnum


class ResponseFormat(StrEnum):
    """Media types sent in the ``Accept`` header."""

    GEOJSON = "application/geo+json"
    JSON_LD = "application/ld+json"
    DWML = "application/vnd.noaa.dwml+xml"  # Digital Weather Markup Language
    OXML = "application/vnd.noaa.obs+xml"  # observation XML
    CAP = "application/cap+xml"
    ATOM = "application/atom+xml"
