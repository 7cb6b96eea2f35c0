"""Canonical query-string encoding for REST server parameters."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics.
_SAFE = "-_.!~*'()"


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _identity(s: str) -> str:
    return s


def _quote(s: str) -> str:
    return quote(s, safe=_SAFE)


def encode_query(params: Mapping[str, Any], sep: str = "&", encode: bool = True) -> str:
    """Encode a flat mapping as a sorted query string.

    Pairs with a None value are skipped. The pairs are sorted after
    encoding so the result does not depend on insertion order; the
    signature is computed over ``encode_query(params, "", False)``.

    Args:
        params: Flat mapping of parameter names to primitive values.
        sep: Separator placed between pairs.
        encode: Percent-encode names and values.

    Returns:
        The encoded query string (no leading "?").
    """
    enc = _quote if encode else _identity
    pairs = [
        f"{enc(str(key))}={enc(stringify(value))}"
        for key, value in params.items()
        if value is not None
    ]
    pairs.sort()
    return sep.join(pairs)

