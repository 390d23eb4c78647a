# openvpn_management/model/client.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Client:
    """
    One VPN peer connected to the server when the status report was generated.

    Attributes:
        name: Common name presented by the client certificate.
        ip_address: Real (remote) address with the port suffix removed.
        connected_since: UTC time the client connected.
        bytes_received: Bytes received from the client.
        bytes_sent: Bytes sent to the client.
    """

    name: str
    ip_address: str
    connected_since: datetime
    bytes_received: float
    bytes_sent: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ip_address": self.ip_address,
            "connected_since": self.connected_since.isoformat(),
            "bytes_received": self.bytes_received,
            "bytes_sent": self.bytes_sent,
        }
