"""Script-tag (JSONP) transport."""

import json
import re
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any, Protocol

from restserver_sdk._internal.debug import DebugLog, EventHook
from restserver_sdk._internal.namespace import generate_guid
from restserver_sdk._internal.pending import PendingRequests, ResponseCallback
from restserver_sdk._internal.querystring import encode_query
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.transports.base import signed_copy
from restserver_sdk.config import RestServerConfig
from restserver_sdk.exceptions import PayloadTooLargeError

_JSONP_RE = re.compile(r"^\s*(?P<name>[\w$.]+)\s*\((?P<body>.*)\)\s*;?\s*$", re.DOTALL)


class ScriptHost(Protocol):
    """Page that can load a script element from a URL."""

    def inject(self, url: str) -> Any:
        """Append a script element pointing at url and return its handle."""
        ...

    def remove(self, handle: Any) -> None:
        """Detach a previously injected script element."""
        ...


class ScriptTagTransport:
    """GET-only calls delivered through injected script elements.

    Each call publishes a callback named ``<callback_prefix>.<guid>``; the
    response script invokes it, which the host forwards to receive(). There
    is no timeout: a script that never loads stays pending, along with its
    element.
    """

    def __init__(
        self,
        config: RestServerConfig,
        script_host: ScriptHost,
        session_store: SessionStore,
        *,
        event_hook: EventHook | None = None,
    ) -> None:
        self._config = config
        self._host = script_host
        self._session_store = session_store
        self._log = DebugLog("jsonp", debug=config.debug, event_hook=event_hook)
        self._pending = PendingRequests(self._log)
        self._scripts: dict[str, Any] = {}

    @property
    def pending(self) -> PendingRequests:
        return self._pending

    def callback_name(self, guid: str) -> str:
        return f"{self._config.callback_prefix}.{guid}"

    def send(
        self, params: Mapping[str, Any], callback: ResponseCallback | None = None
    ) -> Future[Any]:
        """Inject a script element for a signed GET of params.

        Raises:
            PayloadTooLargeError: If the URL exceeds config.max_url_bytes.
                Nothing is registered or injected in that case.
            Exception: Whatever the script host raises from inject(); the
                call is not left pending.
        """
        guid = generate_guid()
        signed = signed_copy(
            params,
            self._config,
            self._session_store,
            extra={"callback": self.callback_name(guid)},
        )
        url = f"{self._config.endpoint_url}?{encode_query(signed)}"
        if len(url) > self._config.max_url_bytes:
            raise PayloadTooLargeError(
                f"JSONP only supports a maximum of {self._config.max_url_bytes} bytes of input.",
                size=len(url),
                limit=self._config.max_url_bytes,
            )

        future = self._pending.register(guid, callback)
        try:
            self._scripts[guid] = self._host.inject(url)
        except Exception:
            self._pending.discard(guid)
            raise
        self._log(f"Injected script for {guid} ({len(url)} bytes)")
        return future

    def receive(self, guid: str, response: Any) -> bool:
        """Deliver the response a loaded script passed to its callback.

        Returns:
            True if a pending call was resolved.
        """
        handle = self._scripts.pop(guid, None)
        try:
            return self._pending.resolve(guid, response)
        finally:
            if handle is not None:
                self._host.remove(handle)

    def receive_script(self, source: str) -> bool:
        """Route a JSONP body such as ``RestServer._callbacks.f1a(...)``.

        Raises:
            ValueError: If source is not a call of one of our callbacks.
            json.JSONDecodeError: If the argument is not valid JSON.
        """
        match = _JSONP_RE.match(source)
        if match is None:
            raise ValueError("response is not a JSONP callback invocation")
        prefix, _, guid = match.group("name").rpartition(".")
        if prefix != self._config.callback_prefix:
            raise ValueError(f"unexpected JSONP callback {match.group('name')!r}")
        return self.receive(guid, json.loads(match.group("body")))
