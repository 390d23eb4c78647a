# openvpn_management/cli/args.py
from __future__ import annotations

import argparse
from typing import Optional


def positive_float(v: str) -> float:
    try:
        value = float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number of seconds '{v}'") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"Timeout must be > 0 (got '{v}')")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openvpn-status",
        description="Query the OpenVPN management interface for connected clients.",
    )
    parser.add_argument("--config", default=None, help="YAML config file (management_url, *_timeout_s).")
    parser.add_argument("--address", default=None, help="Management interface as host:port (default localhost:5555).")
    parser.add_argument("--connect-timeout", type=positive_float, default=None, help="Connect timeout in seconds.")
    parser.add_argument("--read-timeout", type=positive_float, default=None, help="Read timeout in seconds.")
    parser.add_argument("--json", action="store_true", help="Print the status as JSON.")
    parser.add_argument("--log-file", default=None, help="Append library logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
