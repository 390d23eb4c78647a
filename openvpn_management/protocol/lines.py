# openvpn_management/protocol/lines.py
"""
Line classifier and field splitter for `status` responses.

Lines arrive split on b"\\n" only, so a trailing "\\r" is still attached.
It is kept in MalformedResponseError payloads and trimmed from a field only
when that field is decoded into its final value.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import List

from openvpn_management.model import Client
from . import defs
from .errors import MalformedResponseError, ParseFloatError, ParseIntError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class LineKind(Enum):
    HEADER_CLIENT_LIST = "header_client_list"
    CLIENT_LIST = "client_list"
    TITLE = "title"
    TIME = "time"
    OTHER = "other"


# order matters: the header marker must win over any shorter prefix
_PREFIXES = (
    (defs.HEADER_CLIENT_LIST, LineKind.HEADER_CLIENT_LIST),
    (defs.CLIENT_LIST, LineKind.CLIENT_LIST),
    (defs.TITLE, LineKind.TITLE),
    (defs.TIME, LineKind.TIME),
)


def classify(line: str) -> LineKind:
    """Return the record kind of a line by literal, case-sensitive prefix."""
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind
    return LineKind.OTHER


def split_fields(line: str, min_fields: int) -> List[str]:
    """
    Split a line on tabs, requiring at least min_fields values.

    Raises MalformedResponseError carrying the line verbatim otherwise.
    """
    fields = line.split(defs.FIELD_SEP)
    if len(fields) < min_fields:
        raise MalformedResponseError(line)
    return fields


def trim_cr(value: str) -> str:
    return value.rstrip("\r")


# ---------------------------------------------------------------------------
# Field decoders
# ---------------------------------------------------------------------------

def decode_int(raw: str) -> int:
    """Decode a base-10 signed 64-bit integer field."""
    value = trim_cr(raw)
    if not _INT_RE.fullmatch(value):
        raise ParseIntError(value)

    n = int(value)
    if n < defs.I64_MIN or n > defs.I64_MAX:
        raise ParseIntError(value, reason="number too large to fit in target type")
    return n


def decode_float(raw: str) -> float:
    """Decode a base-10 real number field (no whitespace, no digit separators)."""
    value = trim_cr(raw)
    if not _FLOAT_RE.fullmatch(value):
        raise ParseFloatError(value)
    return float(value)


def decode_epoch(raw: str) -> datetime:
    """Decode Unix epoch seconds into an aware UTC datetime."""
    seconds = decode_int(raw)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ParseIntError(trim_cr(raw), reason="timestamp out of range") from None


def strip_port(address: str) -> str:
    """Drop everything from the first ':' on; an address without one is kept whole."""
    return address.split(":", 1)[0]


# ---------------------------------------------------------------------------
# Record decoders
# ---------------------------------------------------------------------------

def parse_client_line(line: str) -> Client:
    """
    Decode a CLIENT_LIST line.

    Layout (0 is the tag): 1 common name, 2 real address:port, 3 virtual
    address, 4 virtual IPv6 address, 5 bytes received, 6 bytes sent,
    7 connected since (text), 8 connected since (time_t).
    """
    fields = split_fields(line, defs.CLIENT_LIST_MIN_FIELDS)

    connected_since = decode_epoch(fields[defs.CL_CONNECTED_SINCE])
    bytes_received = decode_float(fields[defs.CL_BYTES_RECEIVED])
    bytes_sent = decode_float(fields[defs.CL_BYTES_SENT])

    return Client(
        name=trim_cr(fields[defs.CL_NAME]),
        ip_address=trim_cr(strip_port(fields[defs.CL_REAL_ADDRESS])),
        connected_since=connected_since,
        bytes_received=bytes_received,
        bytes_sent=bytes_sent,
    )


def parse_title_line(line: str) -> str:
    fields = split_fields(line, defs.TITLE_MIN_FIELDS)
    return trim_cr(fields[defs.TITLE_TEXT])


def parse_time_line(line: str) -> datetime:
    fields = split_fields(line, defs.TIME_MIN_FIELDS)
    return decode_epoch(fields[defs.TIME_EPOCH])
