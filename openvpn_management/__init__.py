"""
Client for the OpenVPN management interface `status` command.

    from openvpn_management import configure

    manager = configure("localhost:5555", read_timeout_s=1.0)
    status = manager.get_status()
    for client in status.clients:
        print(client.name, client.ip_address, client.bytes_received)
"""

from .core.errors import OpenvpnError, ConfigError, MissingURLInputError
from .transport.errors import TransportError, TransportOpenError, TransportIOError
from .protocol.errors import DecodeError, ParseIntError, ParseFloatError, MalformedResponseError
from .model import Client, Status
from .app.config import ManagementConfig, load_config
from .runtime.command_manager import CommandManager, EventManager, configure

__all__ = [
    "OpenvpnError", "ConfigError", "MissingURLInputError",
    "TransportError", "TransportOpenError", "TransportIOError",
    "DecodeError", "ParseIntError", "ParseFloatError", "MalformedResponseError",
    "Client", "Status",
    "ManagementConfig", "load_config",
    "CommandManager", "EventManager", "configure"]
