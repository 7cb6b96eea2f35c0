"""Request signing for REST server calls."""

import hashlib
import time
from collections.abc import Callable, MutableMapping
from typing import Any

from restserver_sdk._internal.namespace import copy
from restserver_sdk._internal.querystring import encode_query
from restserver_sdk.config import DEFAULT_API_VERSION, DEFAULT_FORMAT
from restserver_sdk.models import Session


def _now_ms() -> int:
    return int(time.time() * 1000)


def compute_signature(params: MutableMapping[str, Any], secret: str) -> str:
    """MD5 hex digest of the unseparated, unencoded params plus the secret."""
    raw = encode_query(params, "", False) + secret
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def sign(
    params: MutableMapping[str, Any],
    *,
    api_key: str,
    session: Session | None = None,
    api_version: str = DEFAULT_API_VERSION,
    response_format: str = DEFAULT_FORMAT,
    clock: Callable[[], int] = _now_ms,
) -> MutableMapping[str, Any]:
    """Sign the given params for a REST server call.

    The general call fields are added without overwriting anything the
    caller already set. With a session, the session key is added and a
    signature computed over the result.

    Args:
        params: The parameters to sign; mutated in place.
        api_key: Application API key.
        session: Current user session, if any.
        api_version: Protocol version sent as "v".
        response_format: Requested response format.
        clock: Returns the call_id timestamp in milliseconds.

    Returns:
        The *same* params mapping back.
    """
    copy(params, {
        "api_key": api_key,
        "call_id": clock(),
        "format": response_format,
        "v": api_version,
    })

    if session is not None:
        copy(params, {
            "session_key": session.session_key,
            "ss": 1,
        })
        params["sig"] = compute_signature(params, session.secret)

    return params
