"""Pieces shared by every transport."""

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any, Literal

from restserver_sdk._internal.namespace import copy
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.signing import sign
from restserver_sdk.config import DEFAULT_MAX_URL_BYTES, RestServerConfig

HttpMethod = Literal["GET", "POST"]


def choose_method(
    url: str, body: str, max_bytes: int = DEFAULT_MAX_URL_BYTES
) -> tuple[HttpMethod, str, str]:
    """Pick GET or POST for an encoded call.

    A call fits in a GET when url plus body is at most max_bytes; the body
    then moves into the query string.

    Returns:
        (method, url, body) ready to send.
    """
    if len(url) + len(body) > max_bytes:
        return "POST", url, body
    return "GET", f"{url}?{body}", ""


def signed_copy(
    params: Mapping[str, Any],
    config: RestServerConfig,
    session_store: SessionStore,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Shallow-clone params (on top of extra) and sign the clone."""
    clone: dict[str, Any] = dict(extra or {})
    copy(clone, params)
    sign(
        clone,
        api_key=config.api_key,
        session=session_store.session,
        api_version=config.api_version,
        response_format=config.response_format,
    )
    return clone


def resolved_future(response: Any) -> Future[Any]:
    """Return a future already completed with response."""
    future: Future[Any] = Future()
    future.set_result(response)
    return future
