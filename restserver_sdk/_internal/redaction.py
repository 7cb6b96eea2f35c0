"""Redaction of credentials in logged request parameters."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "sig",
    "session_key",
    "secret",
    "access_token",
    "password",
    "auth_token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of flat params with sensitive values masked.

    The original mapping is never mutated.

    Args:
        params: The parameters to redact.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    result = {}
    for key, value in params.items():
        key_lower = key.lower() if isinstance(key, str) else key
        if key_lower in REDACT_KEYS:
            result[key] = REDACTED_VALUE
        else:
            result[key] = value
    return result
