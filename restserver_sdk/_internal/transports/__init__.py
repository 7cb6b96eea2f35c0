"""Transports for REST server calls."""

from restserver_sdk._internal.transports.base import choose_method
from restserver_sdk._internal.transports.bridge import BridgeClient, BridgePlugin
from restserver_sdk._internal.transports.http import HttpTransport
from restserver_sdk._internal.transports.script_tag import ScriptHost, ScriptTagTransport

__all__ = [
    "choose_method",
    "BridgeClient",
    "BridgePlugin",
    "HttpTransport",
    "ScriptHost",
    "ScriptTagTransport",
]
