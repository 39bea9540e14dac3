import os
import socket
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Config:
    """Runtime settings for the health endpoints."""

    ttl: int = 0
    hostname: str = ""
    port: int = DEFAULT_PORT


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def _as_int(name: str, value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if number < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {number}")
    return number


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from an optional YAML file and the environment.

    Environment variables win over values from ``HEALTHSVC_CONFIG``.
    """
    env = os.environ if environ is None else environ

    values: Dict[str, Any] = {}
    path = env.get("HEALTHSVC_CONFIG")
    if path:
        values.update(_read_yaml(path))

    if env.get("HEALTHSVC_TTL"):
        values["ttl"] = env["HEALTHSVC_TTL"]
    if env.get("HEALTHSVC_HOSTNAME"):
        values["hostname"] = env["HEALTHSVC_HOSTNAME"]
    if env.get("PORT"):
        values["port"] = env["PORT"]

    hostname = values.get("hostname") or socket.gethostname()
    return Config(
        ttl=_as_int("ttl", values.get("ttl", 0)),
        hostname=str(hostname),
        port=_as_int("port", values.get("port", DEFAULT_PORT), minimum=1),
    )


@lru_cache(maxsize=None)
def get_config() -> Config:
    """Process-wide Config, loaded from the environment on first use."""
    return load_config()
