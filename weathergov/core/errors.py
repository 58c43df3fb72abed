"""Error taxonomy for every failure the client can surface.

All errors derive from ``NwsError`` and are terminal for the call that
raised them. Nothing here is retried.
"""


class NwsError(Exception):
    """Base class for client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(NwsError):
    """Transport failure: DNS, connection, timeout."""

    def __init__(self, cause: Exception):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class InvalidResponseError(NwsError):
    """The response carried no usable status."""

    def __init__(self) -> None:
        super().__init__("Invalid response from server")


class DecodingError(NwsError):
    """The body was received but did not match the expected schema."""

    def __init__(self, cause: Exception):
        super().__init__(f"Error decoding response: {cause}")
        self.cause = cause


class RateLimitExceededError(NwsError):
    def __init__(self) -> None:
        super().__init__("API rate limit exceeded. Please try again later.", 429)


class ServerError(NwsError):
    def __init__(self, status_code: int, body: str | None = None):
        if body:
            message = f"Server error ({status_code}): {body}"
        else:
            message = f"Server error ({status_code})"
        super().__init__(message, status_code)
        self.body = body


class InvalidRequestError(NwsError):
    """Malformed local request, or a 4xx other than 401/404/429."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(f"Invalid request: {message}", status_code)
        self.message = message


class UnauthorizedError(NwsError):
    def __init__(self) -> None:
        super().__init__("Unauthorized request", 401)


class NotFoundError(NwsError):
    def __init__(self) -> None:
        super().__init__("Resource not found", 404)


class UnknownError(NwsError):
    def __init__(self, cause: Exception | None = None, status_code: int | None = None):
        if cause is not None:
            message = f"Unknown error: {cause}"
        else:
            message = "Unknown error occurred"
        super().__init__(message, status_code)
        self.cause = cause
