"""Client configuration for the RestServer SDK."""

import os

from pydantic import BaseModel, Field, field_validator

from restserver_sdk.exceptions import RestServerConfigError

DEFAULT_API_DOMAIN = "https://api.facebook.com/"
DEFAULT_ENDPOINT = "restserver.php"
DEFAULT_API_VERSION = "1.0"
DEFAULT_FORMAT = "json"
DEFAULT_MAX_URL_BYTES = 2000
DEFAULT_TIMEOUT_MS = 200 * 1000
DEFAULT_CALLBACK_PREFIX = "RestServer._callbacks"


class RestServerConfig(BaseModel):
    """Settings shared by the signer and every transport.

    Required fields:
        api_key: Application key stamped on every call.

    Optional fields:
        api_domain: Scheme and host of the API, always ending in "/".
        endpoint: Path of the REST endpoint under api_domain.
        api_version: Protocol version sent as the "v" parameter.
        response_format: Response format requested from the server.
        max_url_bytes: Size limit for GET URLs (and the GET/POST threshold).
        timeout_ms: Network timeout for the server-side HTTP transport.
        callback_prefix: Dotted name JSONP callbacks are published under.
        raise_on_timeout: Raise RestServerTimeoutError instead of delivering
            the {"timeout": True} sentinel.
        debug: Enable debug logging to stderr.
    """

    api_key: str = Field(min_length=1)
    api_domain: str = DEFAULT_API_DOMAIN
    endpoint: str = DEFAULT_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    response_format: str = DEFAULT_FORMAT
    max_url_bytes: int = Field(default=DEFAULT_MAX_URL_BYTES, gt=0)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    callback_prefix: str = DEFAULT_CALLBACK_PREFIX
    raise_on_timeout: bool = False
    debug: bool = False

    @field_validator("api_domain")
    @classmethod
    def domain_trailing_slash(cls, v: str) -> str:
        if not v.endswith("/"):
            v += "/"
        return v

    @property
    def endpoint_url(self) -> str:
        """Full URL of the REST endpoint, without a query string."""
        return self.api_domain + self.endpoint

    @property
    def timeout(self) -> float:
        """Network timeout in seconds."""
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls) -> "RestServerConfig":
        """Create a configuration from environment variables.

        Required environment variables:
            RESTSERVER_API_KEY: The application API key.

        Optional environment variables:
            RESTSERVER_API_DOMAIN: API domain (default: https://api.facebook.com/).
            RESTSERVER_TIMEOUT_MS: HTTP timeout in milliseconds.
            RESTSERVER_MAX_URL_BYTES: GET URL size limit in bytes.
            RESTSERVER_DEBUG: Set to "1" to enable debug logging.

        Raises:
            RestServerConfigError: If RESTSERVER_API_KEY is missing.
            ValueError: If a numeric variable is not a valid integer.
        """
        api_key = os.environ.get("RESTSERVER_API_KEY")
        if not api_key:
            raise RestServerConfigError("RESTSERVER_API_KEY is not set")

        api_domain = os.environ.get("RESTSERVER_API_DOMAIN", DEFAULT_API_DOMAIN)
        timeout_ms = int(os.environ.get("RESTSERVER_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        max_url_bytes = int(
            os.environ.get("RESTSERVER_MAX_URL_BYTES", str(DEFAULT_MAX_URL_BYTES))
        )
        debug = os.environ.get("RESTSERVER_DEBUG", "") == "1"

        return cls(
            api_key=api_key,
            api_domain=api_domain,
            timeout_ms=timeout_ms,
            max_url_bytes=max_url_bytes,
            debug=debug,
        )
