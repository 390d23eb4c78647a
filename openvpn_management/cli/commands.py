# openvpn_management/cli/commands.py
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from openvpn_management.app.config import ManagementConfig, load_config
from openvpn_management.model import Status
from openvpn_management.runtime.command_manager import CommandManager


# ---------------- Logging ----------------

LIBRARY_LOGGER = "openvpn_management"


def configure_file_logging(app_log_path: Path) -> None:
    """
    Append every library record, DEBUG included, to app_log_path (idempotent).

    The handler sits on the package logger so the root level (and any
    stderr output) is left alone.
    """
    lib_log = logging.getLogger(LIBRARY_LOGGER)
    app_log_path.parent.mkdir(parents=True, exist_ok=True)
    target = str(app_log_path.resolve())

    if not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in lib_log.handlers
    ):
        fh = logging.FileHandler(app_log_path, encoding="utf-8", delay=True)
        fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        lib_log.addHandler(fh)

    lib_log.setLevel(logging.DEBUG)


def configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")
    if args.log_file:
        configure_file_logging(Path(args.log_file))


# ---------------- Status printing ----------------

def format_bytes(n: float) -> str:
    for unit in ("B", "KiB", "MiB", "GiB"):
        if abs(n) < 1024.0:
            return f"{n:.0f} {unit}" if unit == "B" else f"{n:.1f} {unit}"
        n /= 1024.0
    return f"{n:.1f} TiB"


def print_status(st: Status) -> None:
    print(f"Title:     {st.title}")
    print(f"Time:      {st.timestamp.isoformat()}")

    if not st.clients:
        print("Clients:   (none)")
        return

    print(f"Clients:   {len(st.clients)}")
    for c in st.clients:
        print(
            f"  - {c.name} ip={c.ip_address} since={c.connected_since.isoformat()} "
            f"rx={format_bytes(c.bytes_received)} tx={format_bytes(c.bytes_sent)}"
        )


# ---------------- Commands ----------------

def resolve_config(args: argparse.Namespace) -> ManagementConfig:
    """File values first, then command-line overrides."""
    base = load_config(args.config) if args.config else ManagementConfig()
    return base.merged(
        management_url=args.address,
        connect_timeout_s=args.connect_timeout,
        read_timeout_s=args.read_timeout,
    )


def cmd_status(args: argparse.Namespace) -> int:
    cfg = resolve_config(args)
    manager = CommandManager.from_config(cfg)
    st = manager.get_status()

    if args.json:
        print(json.dumps(st.as_dict(), indent=2))
    else:
        print_status(st)
    return 0
