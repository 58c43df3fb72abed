"""Pydantic v2 client configuration schema."""

from pydantic import BaseModel, Field

from weathergov.config.defaults import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    NWS_BASE_URL,
)
from weathergov.core.formats import ResponseFormat


class ClientConfig(BaseModel):
    """Settings shared by every request a client makes.

    Only ``user_agent`` may change after construction. The base URL is kept
    as plain text and is parsed per request, so a bad value surfaces as an
    ``InvalidRequestError`` at call time.
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    base_url: str = Field(default=NWS_BASE_URL, frozen=True)
    user_agent: str = DEFAULT_USER_AGENT
    default_format: ResponseFormat = Field(default=ResponseFormat.GEOJSON, frozen=True)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0, frozen=True)
