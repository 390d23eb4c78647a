# openvpn_management/app/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from openvpn_management.core.errors import ConfigError

DEFAULT_MANAGEMENT_URL = "localhost:5555"


@dataclass(frozen=True)
class ManagementConfig:
    management_url: str = DEFAULT_MANAGEMENT_URL
    connect_timeout_s: Optional[float] = None
    read_timeout_s: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.management_url, str) or not self.management_url.strip():
            raise ConfigError(
                "management_url must be a non-empty string.",
                hint="Use host:port, e.g. localhost:5555.",
                details={"management_url": self.management_url},
            )
        for name in ("connect_timeout_s", "read_timeout_s"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(
                    f"{name} must be a number of seconds.",
                    details={name: value},
                )
            if value <= 0:
                raise ConfigError(
                    f"{name} must be > 0 (got {value}).",
                    hint="Leave it unset to block without a timeout.",
                    details={name: value},
                )
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ManagementConfig":
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise ConfigError(
                    f"Unknown config key '{key}'.",
                    hint=f"Valid keys: {sorted(known)}",
                    details={"key": key},
                )
        return cls(**dict(data))

    def merged(self, **overrides: Any) -> "ManagementConfig":
        """Return a copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ManagementConfig.from_mapping(values)


def load_config(path: str | Path) -> ManagementConfig:
    """
    Load a ManagementConfig from a YAML file.

    Example:
        management_url: 127.0.0.1:7505
        connect_timeout_s: 2.0
        read_timeout_s: 1.0
    """
    full_path = Path(path)
    if not full_path.exists():
        raise FileNotFoundError(f"Missing config file: {full_path}")

    with open(full_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Config file {full_path} is not valid YAML.",
                hint=str(e),
                details={"path": str(full_path)},
            ) from None

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {full_path} must contain a mapping.",
            details={"path": str(full_path)},
        )

    return ManagementConfig.from_mapping(data)
