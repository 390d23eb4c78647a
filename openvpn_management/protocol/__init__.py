# protocol/__init__.py

from .errors import (
    ProtocolError,
    DecodeError,
    ParseIntError,
    ParseFloatError,
    MalformedResponseError,
)
from .framing import read_response
from .parser import StatusParser, parse_status

__all__ = [
    "ProtocolError", "DecodeError", "ParseIntError", "ParseFloatError", "MalformedResponseError",
    "read_response",
    "StatusParser", "parse_status"]
