# openvpn_management/runtime/command_manager.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from openvpn_management.app.config import DEFAULT_MANAGEMENT_URL, ManagementConfig
from openvpn_management.model import Status
from openvpn_management.protocol import defs
from openvpn_management.protocol.framing import read_response
from openvpn_management.protocol.parser import StatusParser
from openvpn_management.transport.base import Transport
from openvpn_management.transport.errors import TransportError
from openvpn_management.transport.tcp import ResolvedAddress, TCPTransport, resolve_management_url


class EventManager(ABC):
    """Polling interface: one call, one fresh snapshot."""

    @abstractmethod
    def get_status(self) -> Status: ...


@dataclass
class CommandManager(EventManager):
    """
    Client handle for the OpenVPN management interface.

    Every get_status() opens a new connection, sends `status`, reads the
    response up to the END terminator and parses it. Nothing is retried or
    cached; the caller decides when to poll again. Not thread-safe.
    """

    address: ResolvedAddress
    connect_timeout_s: Optional[float] = None
    read_timeout_s: Optional[float] = None
    logger: Optional[logging.Logger] = None
    transport_factory: Optional[Callable[[], Transport]] = None

    def __post_init__(self) -> None:
        self._log = self.logger or logging.getLogger(__name__)
        self._parser = StatusParser(self._log)

    @classmethod
    def from_config(
        cls,
        cfg: ManagementConfig,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "CommandManager":
        """Resolve the management url once and build a handle."""
        return cls(
            address=resolve_management_url(cfg.management_url),
            connect_timeout_s=cfg.connect_timeout_s,
            read_timeout_s=cfg.read_timeout_s,
            logger=logger,
        )

    def _new_transport(self) -> Transport:
        if self.transport_factory is not None:
            return self.transport_factory()
        return TCPTransport(
            self.address,
            connect_timeout_s=self.connect_timeout_s,
            read_timeout_s=self.read_timeout_s,
            logger=self._log,
        )

    def get_status(self) -> Status:
        transport = self._new_transport()
        try:
            with transport:
                transport.write(defs.STATUS_COMMAND)
                response = read_response(transport)
        except TransportError as e:
            self._log.warning("STATUS_REQUEST_FAILED address=%s: %s", self.address, e)
            raise

        self._log.debug("Status response from %s: %d chars", self.address, len(response))
        return self._parser.parse(response)


def configure(
    address: str = DEFAULT_MANAGEMENT_URL,
    connect_timeout_s: Optional[float] = None,
    read_timeout_s: Optional[float] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> CommandManager:
    """
    Build a CommandManager for `address` (host:port).

    Raises MissingURLInputError when the address resolves to no endpoint and
    TransportOpenError when it cannot be resolved at all.
    """
    cfg = ManagementConfig(
        management_url=address,
        connect_timeout_s=connect_timeout_s,
        read_timeout_s=read_timeout_s,
    )
    return CommandManager.from_config(cfg, logger=logger)
