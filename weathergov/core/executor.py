"""Request executor: the single choke point for outbound API calls."""

import json
import logging
from typing import TypeVar

import httpx

from weathergov.config.schema import ClientConfig
from weathergov.core.decoder import decode
from weathergov.core.endpoint import Endpoint, build_url
from weathergov.core.errors import (
    InvalidRequestError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    RateLimitExceededError,
    ServerError,
    UnauthorizedError,
    UnknownError,
)
from weathergov.core.formats import ResponseFormat

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestExecutor:
    """Builds, sends and classifies requests for every service.

    Holds a reference to the owning client's config and reads it when each
    request is built, so a changed user agent applies to the next call.
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def _headers(self, response_format: ResponseFormat | None) -> dict[str, str]:
        accept = response_format or self.config.default_format
        return {"User-Agent": self.config.user_agent, "Accept": str(accept)}

    async def execute_raw(
        self, endpoint: Endpoint, response_format: ResponseFormat | None = None
    ) -> bytes:
        """Perform the call and return the body of a 2xx response."""
        url = build_url(self.config.base_url, endpoint)
        headers = self._headers(response_format)
        logger.debug("%s %s (Accept: %s)", endpoint.method, url, headers["Accept"])

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                resp = await client.request(str(endpoint.method), url, headers=headers)
        except httpx.RequestError as e:
            logger.error("NWS request failed: %s %s -> %s", endpoint.method, url, e)
            raise NetworkError(e) from e

        return check_response(resp)

    async def execute(
        self,
        endpoint: Endpoint,
        model: type[T],
        response_format: ResponseFormat | None = None,
    ) -> T:
        """Perform the call and decode the body as ``model``."""
        data = await self.execute_raw(endpoint, response_format)
        return decode(data, model)


def check_response(resp: httpx.Response) -> bytes:
    """Map an HTTP response to its body or to a typed error."""
    status = getattr(resp, "status_code", None)
    if not isinstance(status, int):
        raise InvalidResponseError()

    body = resp.content
    if 200 <= status <= 299:
        return body

    logger.warning("NWS API returned %d", status)
    if status == 401:
        raise UnauthorizedError()
    if status == 404:
        raise NotFoundError()
    if status == 429:
        raise RateLimitExceededError()
    if 400 <= status <= 499:
        raise InvalidRequestError(_error_detail(body), status)
    if 500 <= status <= 599:
        raise ServerError(status, _body_text(body))
    raise UnknownError(status_code=status)


def _error_detail(body: bytes) -> str:
    """Pull the ``detail`` string out of a problem+json body."""
    try:
        payload = json.loads(body)
    except ValueError:
        return "Bad request"
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    return "Bad request"


def _body_text(body: bytes) -> str | None:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None
