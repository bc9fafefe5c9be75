"""
Server configuration for DeskShot.
Settings come from defaults, an optional YAML file, DESKSHOT_* environment
variables and finally command-line overrides, in that order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000

ENV_PREFIX = "DESKSHOT_"

# Env var suffix -> config field
ENV_FIELDS = {
    "HOST": "host",
    "PORT": "port",
    "OUTPUT_ROOT": "output_root",
    "LOG_LEVEL": "log_level",
}


def _default_output_root() -> Path:
    return Path.home() / "Downloads"


@dataclass
class ServerConfig:
    """Everything the server needs to start."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    output_root: Path = field(default_factory=_default_output_root)
    activate_settle: float = 1.0
    subview_settle: float = 2.0
    fullscreen_settle: float = 2.0
    log_level: str = "INFO"

    def __post_init__(self):
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ValueError(f"port must be an integer, got {self.port!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

        self.output_root = Path(self.output_root).expanduser()

        for name in ("activate_settle", "subview_settle", "fullscreen_settle"):
            try:
                value = float(getattr(self, name))
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number of seconds")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")
            setattr(self, name, value)

        self.log_level = str(self.log_level).upper()


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ValueError(f"Config file not found at {path}")

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ServerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return data


def _read_env(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    environ = os.environ if environ is None else environ
    values = {}
    for suffix, name in ENV_FIELDS.items():
        raw = environ.get(ENV_PREFIX + suffix)
        if raw:
            values[name] = raw
    return values


def load_config(
    path: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
    **overrides: Any,
) -> ServerConfig:
    """
    Build a ServerConfig.

    Args:
        path: Optional YAML file with ServerConfig field names as keys.
        environ: Environment mapping (defaults to os.environ).
        **overrides: Highest-priority values, e.g. from argparse.
                     None values are ignored.

    Raises:
        ValueError: If the file is missing or malformed, or a value is invalid.
    """
    values: Dict[str, Any] = {}
    if path:
        values.update(_read_yaml(Path(path)))
    values.update(_read_env(environ))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ServerConfig(**values)
