# openvpn_management/transport/tcp.py
from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional, Tuple

from openvpn_management.core.errors import MissingURLInputError
from .base import Transport
from .errors import TransportIOError, TransportOpenError


@dataclass(frozen=True)
class ResolvedAddress:
    """First endpoint a management url resolved to."""
    url: str
    family: int
    socktype: int
    proto: int
    sockaddr: Tuple[Any, ...]

    def __str__(self) -> str:
        host, port = self.sockaddr[0], self.sockaddr[1]
        if self.family == socket.AF_INET6:
            return f"[{host}]:{port}"
        return f"{host}:{port}"


def split_host_port(url: str) -> Tuple[str, int]:
    """
    Split 'host:port' (or '[v6-address]:port') into its parts.

    Raises TransportOpenError when no usable port is present.
    """
    host, sep, port_s = url.rpartition(":")
    if not sep or not host or not port_s.isdigit():
        raise TransportOpenError(
            f"Invalid socket address '{url}'.",
            hint="Use host:port, e.g. localhost:5555.",
            details={"url": url},
        )

    port = int(port_s)
    if port > 0xFFFF:
        raise TransportOpenError(
            f"Invalid port {port} in socket address '{url}'.",
            details={"url": url},
        )

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def resolve_management_url(url: str) -> ResolvedAddress:
    """
    Resolve a management url once, keeping the first stream endpoint.

    - resolver failure       -> TransportOpenError (generic I/O)
    - resolves to no address -> MissingURLInputError
    """
    host, port = split_host_port(url)
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except OSError as e:
        raise TransportOpenError(
            f"Could not resolve management url '{url}': {e}",
            details={"url": url},
        ) from e

    if not infos:
        raise MissingURLInputError(url)

    family, socktype, proto, _canon, sockaddr = infos[0]
    return ResolvedAddress(
        url=url,
        family=family,
        socktype=socktype,
        proto=proto,
        sockaddr=tuple(sockaddr),
    )


class TCPTransport(Transport):
    """
    Blocking TCP transport to the management interface.

    connect_timeout_s bounds the connection attempt; read_timeout_s is applied
    to the socket once connected and bounds every blocking read. None means
    block indefinitely.
    """

    def __init__(
        self,
        address: ResolvedAddress,
        connect_timeout_s: Optional[float] = None,
        read_timeout_s: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.address = address
        self.connect_timeout_s = connect_timeout_s
        self.read_timeout_s = read_timeout_s
        self.sock: Optional[socket.socket] = None
        self._reader: Optional[BinaryIO] = None
        self._log = logger or logging.getLogger(__name__)

    def open(self) -> None:
        if self.sock is not None:
            return

        sock: Optional[socket.socket] = None
        try:
            sock = socket.socket(self.address.family, self.address.socktype, self.address.proto)
            sock.settimeout(self.connect_timeout_s)
            sock.connect(self.address.sockaddr)
            sock.settimeout(self.read_timeout_s)
        except OSError as e:
            if sock is not None:
                sock.close()
            raise TransportOpenError(
                f"Could not connect to {self.address}: {e}",
                hint="Is the OpenVPN management interface enabled and reachable?",
                details={"address": str(self.address), "connect_timeout_s": self.connect_timeout_s},
            ) from e

        self.sock = sock
        self._reader = sock.makefile("rb")
        self._log.debug("Connected to %s (read_timeout_s=%s)", self.address, self.read_timeout_s)

    def close(self) -> None:
        reader, sock = self._reader, self.sock
        self._reader = None
        self.sock = None
        try:
            if reader is not None:
                reader.close()
        finally:
            if sock is not None:
                sock.close()
                self._log.debug("Closed connection to %s", self.address)

    def is_open(self) -> bool:
        return self.sock is not None

    def readline(self) -> bytes:
        if self._reader is None:
            raise TransportIOError("readline while transport not open")

        try:
            return self._reader.readline()
        except OSError as e:
            self.close()
            raise TransportIOError(
                f"TCP read from {self.address} failed: {e}",
                details={"address": str(self.address), "read_timeout_s": self.read_timeout_s},
            ) from e

    def write(self, data: bytes) -> int:
        if self.sock is None:
            raise TransportIOError("write while transport not open")

        try:
            self.sock.sendall(data)
            return len(data)
        except OSError as e:
            self.close()
            raise TransportIOError(f"TCP write to {self.address} failed: {e}") from e
