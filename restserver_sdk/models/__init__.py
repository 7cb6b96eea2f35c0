"""Public models for the RestServer SDK.

    from restserver_sdk.models import Session, parse_error_response

    session = Session(session_key="2.abc-123", secret="s3cr3t", uid="42")
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# =============================================================================
# Constants
# =============================================================================

# Delivered instead of a response when the server-side HTTP request times out.
TIMEOUT_SENTINEL: dict[str, Any] = {"timeout": True}

UserStatus = Literal["unknown", "notConnected", "connected"]

# =============================================================================
# Session
# =============================================================================


class Session(BaseModel):
    """Credentials of an authenticated end user.

    Owned by the auth layer; the signer only reads it.
    """

    session_key: str = Field(min_length=1)
    secret: str = Field(min_length=1)
    uid: str | None = None
    expires: int | None = None

    model_config = {"frozen": True, "extra": "allow"}


# =============================================================================
# Responses
# =============================================================================


class ErrorResponse(BaseModel):
    """Error object returned in place of a normal response."""

    error_code: int
    error_msg: str = ""
    request_args: list[dict[str, Any]] | None = None

    model_config = {"extra": "allow"}


def is_timeout(response: Any) -> bool:
    """Check if a delivered response is the timeout sentinel."""
    return isinstance(response, dict) and response.get("timeout") is True and len(response) == 1


def parse_error_response(response: Any) -> ErrorResponse | None:
    """Return the error object carried by a response, or None."""
    if isinstance(response, dict) and "error_code" in response:
        return ErrorResponse.model_validate(response)
    return None


__all__ = [
    "TIMEOUT_SENTINEL",
    "UserStatus",
    "Session",
    "ErrorResponse",
    "is_timeout",
    "parse_error_response",
]
