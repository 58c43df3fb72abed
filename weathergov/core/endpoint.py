"""Endpoint descriptors and URL composition."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Protocol

import httpx

from weathergov.core.errors import InvalidRequestError


class HttpMethod(StrEnum):
    GET = "GET"


class Endpoint(Protocol):
    """One API call: a path, a method and optional query parameters.

    Route families implement this as frozen dataclasses, one per route.
    """

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HttpMethod: ...

    @property
    def query_items(self) -> dict[str, str] | None: ...


def normalize_query(items: Mapping[str, str] | None) -> dict[str, str] | None:
    """Treat an empty parameter set the same as no parameters."""
    if not items:
        return None
    return dict(items)


def build_url(base_url: str, endpoint: Endpoint) -> httpx.URL:
    """Compose the request URL from the configured base and an endpoint.

    The endpoint path replaces any path on the base URL. ``?`` and ``#``
    in a path are not escaped, so an identifier containing either raises
    ``InvalidRequestError`` rather than reaching the API.
    """
    try:
        base = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise InvalidRequestError("Invalid base URL") from e
    if not base.scheme or not base.host:
        raise InvalidRequestError("Invalid base URL")

    try:
        return base.copy_with(
            path=endpoint.path, params=normalize_query(endpoint.query_items)
        )
    except httpx.InvalidURL as e:
        raise InvalidRequestError("Could not construct URL") from e
