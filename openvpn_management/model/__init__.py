from .client import Client
from .status import Status

__all__ = ["Client",
           "Status"]
