from __future__ import annotations

import socket
from datetime import datetime, timezone

import pytest

import openvpn_management.runtime.command_manager as cm_mod
import openvpn_management.transport.tcp as tcp_mod
from openvpn_management.app.config import ManagementConfig
from openvpn_management.core.errors import ConfigError, MissingURLInputError
from openvpn_management.protocol.errors import MalformedResponseError, ParseIntError
from openvpn_management.transport.base import Transport
from openvpn_management.transport.errors import TransportIOError, TransportOpenError


ADDR = tcp_mod.ResolvedAddress(
    url="localhost:5555",
    family=socket.AF_INET,
    socktype=socket.SOCK_STREAM,
    proto=6,
    sockaddr=("127.0.0.1", 5555),
)

GOOD = [
    b"TITLE\ttest-title\r\n",
    b"TIME\ttimestamp\t1547913893\r\n",
    b"HEADER\tCLIENT_LIST\r\n",
    b"CLIENT_LIST\ttest-client\t127.0.0.1:12345\t10.8.0.2\t\t100\t200\tdate-string\t1546277714\r\n",
    b"END\r\n",
]


class FakeTransport(Transport):
    def __init__(self, lines=(), *, raise_on_open=None):
        self._lines = list(lines)
        self._raise_on_open = raise_on_open
        self.written = b""
        self.open_called = 0
        self.close_called = 0

    def open(self) -> None:
        self.open_called += 1
        if self._raise_on_open is not None:
            raise self._raise_on_open

    def close(self) -> None:
        self.close_called += 1

    def readline(self) -> bytes:
        return self._lines.pop(0) if self._lines else b""

    def write(self, data: bytes) -> int:
        self.written += data
        return len(data)


def _manager(transport: FakeTransport) -> cm_mod.CommandManager:
    return cm_mod.CommandManager(address=ADDR, transport_factory=lambda: transport)


def test_get_status_sends_command_and_parses():
    t = FakeTransport(GOOD)
    st = _manager(t).get_status()

    assert t.written == b"status\n"
    assert t.open_called == 1
    assert t.close_called == 1
    assert st.title == "test-title"
    assert st.timestamp == datetime.fromtimestamp(1547913893, tz=timezone.utc)
    assert [c.name for c in st.clients] == ["test-client"]
    assert st.clients[0].ip_address == "127.0.0.1"


def test_each_call_uses_a_new_connection():
    made = []

    def factory():
        t = FakeTransport(GOOD)
        made.append(t)
        return t

    mgr = cm_mod.CommandManager(address=ADDR, transport_factory=factory)
    mgr.get_status()
    mgr.get_status()

    assert len(made) == 2
    assert all(t.close_called == 1 for t in made)


def test_open_failure_propagates_unchanged():
    err = TransportOpenError("refused")
    t = FakeTransport(raise_on_open=err)

    with pytest.raises(TransportOpenError) as ei:
        _manager(t).get_status()
    assert ei.value is err


def test_eof_before_end_is_transport_error_and_closes():
    t = FakeTransport(GOOD[:3])
    with pytest.raises(TransportIOError):
        _manager(t).get_status()
    assert t.close_called == 1


def test_malformed_response_propagates():
    t = FakeTransport([b"no client string END"])
    with pytest.raises(MalformedResponseError) as ei:
        _manager(t).get_status()
    assert ei.value.response == "no client string END"


def test_decode_error_propagates():
    bad = list(GOOD)
    bad[3] = bad[3].replace(b"1546277714", b"NAN_DATE_TIME")
    with pytest.raises(ParseIntError):
        _manager(FakeTransport(bad)).get_status()


def test_default_transport_is_tcp_with_timeouts():
    mgr = cm_mod.CommandManager(address=ADDR, connect_timeout_s=2.0, read_timeout_s=1.0)
    t = mgr._new_transport()
    assert isinstance(t, tcp_mod.TCPTransport)
    assert t.address == ADDR
    assert t.connect_timeout_s == 2.0
    assert t.read_timeout_s == 1.0


def test_from_config_resolves_once(monkeypatch):
    calls = []

    def fake_resolve(url):
        calls.append(url)
        return ADDR

    monkeypatch.setattr(cm_mod, "resolve_management_url", fake_resolve)

    mgr = cm_mod.CommandManager.from_config(ManagementConfig("example:7505", read_timeout_s=3))
    assert calls == ["example:7505"]
    assert mgr.address is ADDR
    assert mgr.read_timeout_s == 3.0
    assert mgr.connect_timeout_s is None


def test_configure_defaults_to_localhost(monkeypatch):
    calls = []
    monkeypatch.setattr(cm_mod, "resolve_management_url", lambda url: calls.append(url) or ADDR)

    mgr = cm_mod.configure()
    assert calls == ["localhost:5555"]
    assert isinstance(mgr, cm_mod.EventManager)


def test_configure_missing_url_input(monkeypatch):
    monkeypatch.setattr(tcp_mod.socket, "getaddrinfo", lambda *a, **k: [])
    with pytest.raises(MissingURLInputError):
        cm_mod.configure("nowhere:5555")


def test_configure_rejects_bad_timeout():
    with pytest.raises(ConfigError):
        cm_mod.configure("localhost:5555", read_timeout_s=0)
