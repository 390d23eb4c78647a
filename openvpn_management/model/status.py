# openvpn_management/model/status.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

from .client import Client


@dataclass(frozen=True)
class Status:
    """
    Snapshot of the server's client table from a single `status` request.

    clients keeps response order; duplicates are not merged.
    """

    title: str
    timestamp: datetime
    clients: Tuple[Client, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any sequence, store an immutable one
        object.__setattr__(self, "clients", tuple(self.clients))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "timestamp": self.timestamp.isoformat(),
            "clients": [c.as_dict() for c in self.clients],
        }
