"""Debug logging shared by the client and its transports."""

import sys
from collections.abc import Callable

EventHook = Callable[[str, str], None]

LOG_EVENT = "restserver.log"


class DebugLog:
    """Write prefixed debug lines to stderr and fire them on an event hook.

    Lines go to stderr only when debug is enabled. The event hook, when
    given, receives every message under ``restserver.log``.
    """

    def __init__(
        self,
        component: str,
        *,
        debug: bool = False,
        event_hook: EventHook | None = None,
    ) -> None:
        self._prefix = f"[restserver-sdk:{component}]"
        self._debug = debug
        self._event_hook = event_hook

    def __call__(self, message: str) -> None:
        if self._debug:
            print(f"{self._prefix} {message}", file=sys.stderr)
        if self._event_hook is not None:
            self._event_hook(LOG_EVENT, message)
