# openvpn_management/protocol/framing.py
from __future__ import annotations

from openvpn_management.transport.base import Transport
from openvpn_management.transport.errors import TransportIOError
from . import defs


def is_terminated(buffer: str) -> bool:
    """True once the trimmed buffer ends with the END token."""
    return buffer.strip().endswith(defs.ENDING)


def read_response(transport: Transport) -> str:
    """
    Read lines until the accumulated text ends with the terminator.

    The terminator line is part of the returned text. The transport's read
    timeout is the only bound on how long this blocks.
    """
    text = ""
    while not is_terminated(text):
        raw = transport.readline()
        if not raw:
            raise TransportIOError(
                "Connection closed before the END terminator was received.",
                details={"received": text},
            )
        try:
            text += raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportIOError(f"Response is not valid UTF-8: {e}") from e
    return text
