"""RestServer SDK for Python.

This SDK signs calls to the REST server endpoint and dispatches them over
whichever transport the host supports.

Public API:
    RestServerClient - Signs and routes calls
    RestServerConfig - API key, domain and transport limits
    Session - End-user session credentials

Internal (not for direct use):
    _internal.transports - Script-tag, server-side HTTP and bridge transports
"""

from restserver_sdk._internal.namespace import copy
from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.signing import sign
from restserver_sdk._version import __version__
from restserver_sdk.client import RestServerClient
from restserver_sdk.config import RestServerConfig
from restserver_sdk.models import Session

__all__ = [
    "__version__",
    "RestServerClient",
    "RestServerConfig",
    "Session",
    "SessionStore",
    "copy",
    "sign",
]
