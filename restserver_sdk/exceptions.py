"""Public exceptions for the RestServer SDK."""


class RestServerError(Exception):
    """Base exception for all RestServer SDK errors."""


class RestServerAPIError(RestServerError):
    """Error status returned by the REST server."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RestServerConfigError(RestServerError):
    """Configuration error (missing env vars, invalid config)."""


class PayloadTooLargeError(RestServerError):
    """Encoded request does not fit the transport's size limit."""

    def __init__(self, message: str, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class TransportUnavailableError(RestServerError):
    """No transport in the current environment can carry the call."""


class RestServerTimeoutError(RestServerError):
    """The server-side HTTP request timed out."""
