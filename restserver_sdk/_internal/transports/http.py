"""Server-side HTTP transport built on httpx."""

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

import httpx

from restserver_sdk._internal.debug import DebugLog, EventHook
from restserver_sdk._internal.http import create_http_client
from restserver_sdk._internal.pending import ResponseCallback
from restserver_sdk._internal.querystring import encode_query, stringify
from restserver_sdk._internal.redaction import redact_params
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.transports.base import choose_method, resolved_future, signed_copy
from restserver_sdk.config import RestServerConfig
from restserver_sdk.exceptions import RestServerAPIError, RestServerTimeoutError
from restserver_sdk.models import TIMEOUT_SENTINEL


class HttpTransport:
    """Synchronous REST server calls over a native HTTP client.

    The round-trip blocks the caller for up to ``config.timeout_ms``. A
    timeout is delivered to the callback as ``{"timeout": True}`` unless
    ``config.raise_on_timeout`` is set.
    """

    def __init__(
        self,
        config: RestServerConfig,
        session_store: SessionStore,
        *,
        client: httpx.Client | None = None,
        event_hook: EventHook | None = None,
    ) -> None:
        self._config = config
        self._session_store = session_store
        self._client = client or create_http_client(timeout=config.timeout)
        self._log = DebugLog("http", debug=config.debug, event_hook=event_hook)

    def close(self) -> None:
        self._client.close()

    def send(
        self, params: Mapping[str, Any], callback: ResponseCallback | None = None
    ) -> Future[Any]:
        """Sign params, perform the request and deliver the decoded response.

        Args:
            params: Call parameters; a truthy "multipart" entry forces a
                multipart/form-data POST.
            callback: Invoked once with the decoded response.

        Returns:
            A future already completed with the response.

        Raises:
            RestServerAPIError: If the server answers with status >= 400.
            RestServerTimeoutError: On timeout, if raise_on_timeout is set.
            json.JSONDecodeError: If the response body is not valid JSON.
        """
        params = dict(params)
        multipart = bool(params.pop("multipart", False))

        signed = signed_copy(params, self._config, self._session_store)
        body = encode_query(signed)
        method, url, body = choose_method(
            self._config.endpoint_url, body, self._config.max_url_bytes
        )
        if multipart:
            method, url = "POST", self._config.endpoint_url

        self._log(f"{method} {url.split('?')[0]} params={redact_params(signed)}")

        try:
            response = self._request(method, url, body, signed if multipart else None)
        except httpx.TimeoutException:
            self._log("Request timed out")
            if self._config.raise_on_timeout:
                raise RestServerTimeoutError(
                    f"Request timed out after {self._config.timeout_ms} ms"
                ) from None
            result: Any = dict(TIMEOUT_SENTINEL)
        else:
            if response.status_code >= 400:
                self._log(f"Request failed with status {response.status_code}")
                raise RestServerAPIError(
                    f"An error occurred with status code {response.status_code}",
                    status_code=response.status_code,
                )
            result = response.json()

        if callback is not None:
            callback(result)
        return resolved_future(result)

    def _request(
        self,
        method: str,
        url: str,
        body: str,
        parts: Mapping[str, Any] | None,
    ) -> httpx.Response:
        if parts is not None:
            files = {
                key: (None, stringify(value))
                for key, value in parts.items()
                if value is not None
            }
            return self._client.request(method, url, files=files)
        if body:
            return self._client.request(
                method,
                url,
                content=body,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        return self._client.request(method, url)
