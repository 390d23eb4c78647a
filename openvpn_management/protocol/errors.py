# openvpn_management/protocol/errors.py
from __future__ import annotations

from openvpn_management.core.errors import OpenvpnError


class ProtocolError(OpenvpnError):
    """Base for response-level failures (shape/decoding)."""
    code = "protocol_error"


class DecodeError(ProtocolError):
    """A field could not be decoded into its value type."""

    def __init__(self, message: str, *, value: str):
        super().__init__(message, details={"value": value})
        self.value = value


class ParseIntError(DecodeError):
    code = "parse_int_error"

    def __init__(self, value: str, reason: str = "invalid digit found in string"):
        super().__init__(f"cannot parse integer from '{value}': {reason}", value=value)


class ParseFloatError(DecodeError):
    code = "parse_float_error"

    def __init__(self, value: str):
        super().__init__(f"cannot parse float from '{value}': invalid float literal", value=value)


class MalformedResponseError(ProtocolError):
    """
    The response (or one of its lines) does not have the expected shape.

    response holds the offending text verbatim: the whole response when a
    section is missing, a single line when a record is too short.
    """
    code = "malformed_response"

    def __init__(self, response: str):
        super().__init__(
            f"could not parse '{response}' response from openvpn server",
            details={"response": response},
        )
        self.response = response
