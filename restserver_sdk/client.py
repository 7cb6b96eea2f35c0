"""User-facing client for REST server calls.

Example usage:
    from restserver_sdk import RestServerClient

    client = RestServerClient.from_env()
    client.call(
        {"method": "fql.query", "query": "SELECT name FROM profile WHERE id=4"},
        lambda response: print(response[0]["name"]),
    )
"""

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

from restserver_sdk._internal.debug import DebugLog, EventHook
from restserver_sdk._internal.pending import ResponseCallback
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.transports import (
    BridgeClient,
    HttpTransport,
    ScriptTagTransport,
)
from restserver_sdk.config import RestServerConfig
from restserver_sdk.exceptions import TransportUnavailableError

REVOKE_AUTHORIZATION = "Auth.revokeAuthorization"


class RestServerClient:
    """Signs REST server calls and routes them to a transport.

    Transport policy, evaluated per call:
        1. A server-side HTTP transport, when configured, carries every call.
        2. Otherwise the script-tag transport is tried.
        3. If there is no script host, or the script-tag send raises (the
           call is too large for a GET URL, the host cannot inject), the
           plugin bridge is used when available.
        4. Otherwise TransportUnavailableError is raised, chained to the
           script-tag error if there was one.
    """

    def __init__(
        self,
        config: RestServerConfig,
        *,
        session_store: SessionStore | None = None,
        http_transport: HttpTransport | None = None,
        script_transport: ScriptTagTransport | None = None,
        bridge: BridgeClient | None = None,
        event_hook: EventHook | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Shared API configuration.
            session_store: Current session holder; a fresh empty one if None.
            http_transport: Native HTTP transport for server-side hosts.
            script_transport: JSONP transport for pages with a DOM.
            bridge: Plugin-bridge fallback.
            event_hook: Receives every diagnostic message.
        """
        self._config = config
        self._session_store = session_store or SessionStore()
        self._http = http_transport
        self._script = script_transport
        self._bridge = bridge
        self._log = DebugLog("client", debug=config.debug, event_hook=event_hook)

    @classmethod
    def from_env(cls, *, session_store: SessionStore | None = None) -> "RestServerClient":
        """Create a server-side client from environment variables.

        See RestServerConfig.from_env() for the variables read.
        """
        config = RestServerConfig.from_env()
        session_store = session_store or SessionStore()
        return cls(
            config,
            session_store=session_store,
            http_transport=HttpTransport(config, session_store),
        )

    @property
    def config(self) -> RestServerConfig:
        return self._config

    @property
    def session_store(self) -> SessionStore:
        return self._session_store

    def call(
        self, params: Mapping[str, Any], callback: ResponseCallback | None = None
    ) -> Future[Any]:
        """Make a signed API call.

        The caller's params are never modified. The call is signed with the
        current session when there is one.

        Args:
            params: Parameters for the call, including "method".
            callback: Invoked once with the decoded response.

        Returns:
            A future completed with the decoded response.

        Raises:
            TransportUnavailableError: If no transport can carry the call.
            RestServerAPIError: If the HTTP transport gets an error status.
        """
        if params.get("method") == REVOKE_AUTHORIZATION:
            callback = self._wrap_revoke(callback)

        if self._http is not None:
            return self._http.send(params, callback)

        script_error: Exception | None = None
        if self._script is not None:
            try:
                return self._script.send(params, callback)
            except Exception as e:
                self._log(f"Script-tag delivery failed, trying bridge: {e!r}")
                script_error = e

        if self._bridge is not None and self._bridge.available:
            return self._bridge.send(params, callback)

        raise TransportUnavailableError(
            "A plugin bridge is required for this API call."
        ) from script_error

    def _wrap_revoke(self, callback: ResponseCallback | None) -> ResponseCallback:
        def on_response(response: Any) -> None:
            if response is True:
                self._log("Authorization revoked, clearing session")
                self._session_store.set_session(None, "notConnected")
            if callback is not None:
                callback(response)

        return on_response
