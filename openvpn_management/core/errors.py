# openvpn_management/core/errors.py
from __future__ import annotations


class OpenvpnError(Exception):
    """
    Root of every failure a status call can surface.

    Subclasses pin a `code` so callers can branch on the kind without
    importing every class; `hint` is operator advice, `details` the raw
    context (url, offending value, ...).
    """

    code: str = "openvpn_error"

    def __init__(self, message: str, *, hint: str | None = None, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def report_lines(self) -> list[str]:
        """Operator-facing lines: the message, then the hint when there is one."""
        lines = [f"ERROR: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        return lines


# ---------------------------------------------------------------------------
# Configuration / setup errors (no network access yet)
# ---------------------------------------------------------------------------

class ConfigError(OpenvpnError):
    """
    Client configuration is invalid.

    Examples:
      - config file is not a YAML mapping
      - unknown config key
      - non-positive timeout
    """
    code = "config_error"


class MissingURLInputError(OpenvpnError):
    """
    The management address resolved, but to zero network endpoints.

    A resolver *failure* (unknown host, bad port) is a transport error instead.
    """
    code = "missing_url_input"

    def __init__(self, url: str):
        super().__init__(
            f"Management url '{url}' did not resolve to any address.",
            hint="Pass the management interface as host:port.",
            details={"url": url},
        )
        self.url = url
