# openvpn_management/cli/main.py
from __future__ import annotations

from typing import Optional

from openvpn_management.core.errors import OpenvpnError

from openvpn_management.cli.args import parse_args
from openvpn_management.cli.commands import cmd_status, configure_logging


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args)
    try:
        return cmd_status(args)
    except OpenvpnError as e:
        print("\n".join(e.report_lines()))
        return 1
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
