"""Plugin-bridge transport for cross-domain HTTP through a host plugin."""

import json
from collections.abc import Callable, Hashable, Mapping
from concurrent.futures import Future
from typing import Any, Protocol
from urllib.parse import unquote

from restserver_sdk._internal.debug import DebugLog, EventHook
from restserver_sdk._internal.pending import PendingRequests, ResponseCallback
from restserver_sdk._internal.querystring import encode_query
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.transports.base import choose_method, signed_copy
from restserver_sdk.config import RestServerConfig

ResultHandler = Callable[[Hashable, str], None]


class BridgePlugin(Protocol):
    """Host plugin able to make cross-domain HTTP requests."""

    def has_min_version(self) -> bool:
        """Whether a usable plugin version is installed."""
        ...

    def on_ready(self, fn: Callable[[], None]) -> None:
        """Run fn once the plugin is ready (immediately if it already is)."""
        ...

    def send_request(self, method: str, url: str, body: str) -> Hashable:
        """Fire a request and return the plugin-assigned request id."""
        ...

    def set_result_handler(self, handler: ResultHandler) -> None:
        """Install the function the plugin calls with (request_id, data)."""
        ...


class BridgeClient:
    """Single owner of a bridge plugin and its response demultiplexing.

    Construct one per plugin: the constructor installs the result handler,
    and every response is routed by the plugin's request id. Sends wait for
    the plugin's ready signal without a timeout.
    """

    def __init__(
        self,
        plugin: BridgePlugin,
        config: RestServerConfig,
        session_store: SessionStore,
        *,
        decode: Callable[[str], str] = unquote,
        event_hook: EventHook | None = None,
    ) -> None:
        self._plugin = plugin
        self._config = config
        self._session_store = session_store
        self._decode = decode
        self._log = DebugLog("bridge", debug=config.debug, event_hook=event_hook)
        self._pending = PendingRequests(self._log)
        plugin.set_result_handler(self._on_result)

    @property
    def pending(self) -> PendingRequests:
        return self._pending

    @property
    def available(self) -> bool:
        return self._plugin.has_min_version()

    def send(
        self, params: Mapping[str, Any], callback: ResponseCallback | None = None
    ) -> Future[Any]:
        """Send params through the plugin once it reports ready.

        Returns:
            A future completed when the plugin delivers the response.
        """
        future: Future[Any] = Future()
        future.set_running_or_notify_cancel()

        def fire() -> None:
            body = encode_query(signed_copy(params, self._config, self._session_store))
            method, url, body = choose_method(
                self._config.endpoint_url, body, self._config.max_url_bytes
            )
            request_id = self._plugin.send_request(method, url, body)
            self._log(f"{method} request {request_id!r} sent through bridge")
            self._pending.register(request_id, callback).add_done_callback(
                lambda done: future.set_result(done.result())
            )

        self._plugin.on_ready(fire)
        return future

    def _on_result(self, request_id: Hashable, data: str) -> None:
        self._pending.resolve(request_id, json.loads(self._decode(data)))
