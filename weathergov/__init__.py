"""Client library for the National Weather Service API (api.weather.gov)."""

from weathergov.client import NwsClient
from weathergov.config.schema import ClientConfig
from weathergov.core.errors import (
    DecodingError,
    InvalidRequestError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    NwsError,
    RateLimitExceededError,
    ServerError,
    UnauthorizedError,
    UnknownError,
)
from weathergov.core.formats import ResponseFormat
from weathergov.models.common import Coordinate
from weathergov.models.point import GridReference

__all__ = [
    "ClientConfig",
    "Coordinate",
    "DecodingError",
    "GridReference",
    "InvalidRequestError",
    "InvalidResponseError",
    "NetworkError",
    "NotFoundError",
    "NwsClient",
    "NwsError",
    "RateLimitExceededError",
    "ResponseFormat",
    "ServerError",
    "UnauthorizedError",
    "UnknownError",
]
