"""Tests for the plugin-bridge transport."""

import json
from urllib.parse import parse_qsl, quote

import pytest

from restserver_sdk._internal.session import SessionStore
from restserver_sdk._internal.transports.bridge import BridgeClient
from restserver_sdk.config import RestServerConfig


class FakePlugin:
    """Bridge plugin double with a manual ready switch."""

    def __init__(self, ready=True, version_ok=True):
        self.ready = ready
        self.version_ok = version_ok
        self.waiting = []
        self.requests = []
        self.handler = None

    def has_min_version(self):
        return self.version_ok

    def on_ready(self, fn):
        if self.ready:
            fn()
        else:
            self.waiting.append(fn)

    def become_ready(self):
        self.ready = True
        waiting, self.waiting = self.waiting, []
        for fn in waiting:
            fn()

    def send_request(self, method, url, body):
        self.requests.append((method, url, body))
        return len(self.requests)

    def set_result_handler(self, handler):
        self.handler = handler

    def respond(self, request_id, payload):
        self.handler(request_id, quote(json.dumps(payload)))


def make_bridge(plugin: FakePlugin) -> BridgeClient:
    config = RestServerConfig(api_key="app-key", api_domain="http://api.test/")
    return BridgeClient(plugin, config, SessionStore())


class TestBridgeClient:
    """Tests for BridgeClient."""

    def test_installs_handler_once(self):
        """Should install its result handler at construction."""
        plugin = FakePlugin()
        bridge = make_bridge(plugin)
        assert plugin.handler == bridge._on_result

    def test_available_follows_plugin_version(self):
        """Should report availability from the plugin version check."""
        assert make_bridge(FakePlugin()).available is True
        assert make_bridge(FakePlugin(version_ok=False)).available is False

    def test_short_call_is_get(self):
        """Should send short calls as GET with the query in the URL."""
        plugin = FakePlugin()
        make_bridge(plugin).send({"method": "users.getInfo"})

        ((method, url, body),) = plugin.requests
        assert method == "GET"
        assert url.startswith("http://api.test/restserver.php?")
        assert body == ""

    def test_long_call_is_post(self):
        """Should send long calls as POST with a form body."""
        plugin = FakePlugin()
        make_bridge(plugin).send({"method": "stream.publish", "message": "x" * 3000})

        ((method, url, body),) = plugin.requests
        assert method == "POST"
        assert url == "http://api.test/restserver.php"
        assert dict(parse_qsl(body))["message"] == "x" * 3000

    def test_response_resolves_and_removes_entry(self):
        """Should decode, call back once and return to baseline."""
        plugin = FakePlugin()
        bridge = make_bridge(plugin)
        received = []
        baseline = len(bridge.pending)

        future = bridge.send({"method": "friends.get"}, received.append)
        assert len(bridge.pending) == baseline + 1

        plugin.respond(1, [4, 5])
        assert received == [[4, 5]]
        assert future.result() == [4, 5]
        assert len(bridge.pending) == baseline

        plugin.respond(1, [6])
        assert received == [[4, 5]]

    def test_waits_for_ready(self):
        """Should hold the send until the plugin reports ready."""
        plugin = FakePlugin(ready=False)
        bridge = make_bridge(plugin)
        future = bridge.send({"method": "friends.get"})

        assert plugin.requests == []
        assert not future.done()

        plugin.become_ready()
        assert len(plugin.requests) == 1
        plugin.respond(1, {"ok": True})
        assert future.result() == {"ok": True}

    def test_responses_routed_by_request_id(self):
        """Should deliver each response to its own caller."""
        plugin = FakePlugin()
        bridge = make_bridge(plugin)
        first, second = [], []
        bridge.send({"method": "a"}, first.append)
        bridge.send({"method": "b"}, second.append)

        plugin.respond(2, "two")
        plugin.respond(1, "one")
        assert first == ["one"]
        assert second == ["two"]

    def test_malformed_payload_raises(self):
        """Should let a JSON parse error escape the handler."""
        plugin = FakePlugin()
        make_bridge(plugin).send({"method": "a"})
        with pytest.raises(json.JSONDecodeError):
            plugin.handler(1, "not%20json")
