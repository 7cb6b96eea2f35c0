"""One-shot correlation of in-flight requests with their responses."""

from collections.abc import Callable, Hashable
from concurrent.futures import Future
from typing import Any

from restserver_sdk._internal.debug import DebugLog

ResponseCallback = Callable[[Any], None]


class PendingRequests:
    """In-flight requests keyed by an internal request id.

    Each entry is resolved at most once: resolve() removes it before the
    future and the callback see the response. Entries whose response never
    arrives stay registered.
    """

    def __init__(self, log: DebugLog | None = None) -> None:
        self._entries: dict[Hashable, tuple[Future[Any], ResponseCallback | None]] = {}
        self._log = log or DebugLog("pending")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._entries

    def register(
        self, request_id: Hashable, callback: ResponseCallback | None = None
    ) -> Future[Any]:
        """Register a request and return the future its response completes.

        Raises:
            ValueError: If the id is already in flight.
        """
        if request_id in self._entries:
            raise ValueError(f"request {request_id!r} is already pending")
        future: Future[Any] = Future()
        # Running futures cannot be cancelled; resolve() is the only way out.
        future.set_running_or_notify_cancel()
        self._entries[request_id] = (future, callback)
        return future

    def discard(self, request_id: Hashable) -> None:
        """Forget a request whose send failed before it left the client."""
        self._entries.pop(request_id, None)

    def resolve(self, request_id: Hashable, response: Any) -> bool:
        """Deliver a response to the request registered under request_id.

        Returns:
            True if a pending request was resolved, False for an unknown or
            already resolved id.
        """
        entry = self._entries.pop(request_id, None)
        if entry is None:
            self._log(f"Dropping response for unknown request {request_id!r}")
            return False

        future, callback = entry
        future.set_result(response)
        if callback is not None:
            callback(response)
        return True
