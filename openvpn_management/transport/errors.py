# openvpn_management/transport/errors.py
from __future__ import annotations

from openvpn_management.core.errors import OpenvpnError


class TransportError(OpenvpnError):
    """Base class for transport-layer failures (connect, read, write, resolve)."""
    code = "transport_error"


class TransportOpenError(TransportError):
    pass


class TransportIOError(TransportError):
    pass
