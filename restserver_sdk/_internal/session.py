"""Holder for the current user session."""

from restserver_sdk.models import Session, UserStatus


class SessionStore:
    """Current session and user status, written by the auth layer."""

    def __init__(self, session: Session | None = None, status: UserStatus = "unknown") -> None:
        self._session = session
        self._status: UserStatus = "connected" if session is not None else status

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def status(self) -> UserStatus:
        return self._status

    def set_session(self, session: Session | None, status: UserStatus | None = None) -> None:
        """Replace the session; status defaults to connected/notConnected."""
        self._session = session
        if status is None:
            status = "connected" if session is not None else "notConnected"
        self._status = status
