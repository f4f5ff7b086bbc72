"""Configuration utilities for capitalcom.

Settings come from an optional JSON file and from ``CAPITALCOM_*``
environment variables; the environment wins. Secrets are expected in the
environment so that config files can be committed.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from capitalcom.infrastructure.http import (
    API_PATH_V1,
    DEFAULT_TIMEOUT_SECONDS,
    HOST_DEMO,
    HOST_LIVE,
)

ENV_PREFIX = "CAPITALCOM_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigurationError(Exception):
    """Raised when required settings are missing or malformed."""


def load_config(path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A dictionary of configuration values.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    return data


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ClientSettings:
    """Everything needed to build a :class:`~capitalcom.CapitalClient`."""

    api_key: str
    identifier: str | None = None
    password: str | None = None
    host: str = HOST_DEMO
    api_path: str = API_PATH_V1
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    encrypt_password: bool = False

    @property
    def is_live(self) -> bool:
        return self.host.rstrip("/") == HOST_LIVE

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ClientSettings":
        """Build settings from a flat mapping (config file keys)."""
        api_key = values.get("api_key")
        if not api_key:
            raise ConfigurationError(
                f"Missing API key: set {ENV_PREFIX}API_KEY or 'api_key' in the config file"
            )

        host = values.get("host") or (
            HOST_LIVE if _as_bool(values.get("live", False)) else HOST_DEMO
        )
        try:
            timeout = float(values.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid timeout: {exc}") from exc

        return cls(
            api_key=str(api_key),
            identifier=values.get("identifier") or None,
            password=values.get("password") or None,
            host=str(host).rstrip("/"),
            api_path=str(values.get("api_path") or API_PATH_V1),
            timeout_seconds=timeout,
            encrypt_password=_as_bool(values.get("encrypt_password", False)),
        )

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> "ClientSettings":
        return cls.from_mapping(_env_values(prefix, environ))

    @classmethod
    def load(
        cls,
        config_path: Path | str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> "ClientSettings":
        """Merge config file, environment and explicit overrides (in that order)."""
        values: Dict[str, Any] = {}
        if config_path is not None:
            values.update(load_config(config_path))
        values.update(_env_values(ENV_PREFIX, environ))
        if overrides:
            values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_mapping(values)


_ENV_KEYS = {
    "API_KEY": "api_key",
    "IDENTIFIER": "identifier",
    "PASSWORD": "password",
    "LIVE": "live",
    "HOST": "host",
    "API_PATH": "api_path",
    "TIMEOUT": "timeout_seconds",
    "ENCRYPT_PASSWORD": "encrypt_password",
}


def _env_values(prefix: str, environ: Mapping[str, str] | None) -> Dict[str, str]:
    env = os.environ if environ is None else environ
    values: Dict[str, str] = {}
    for env_name, key in _ENV_KEYS.items():
        raw = env.get(prefix + env_name)
        if raw:
            values[key] = raw
    return values


__all__ = ["ClientSettings", "ConfigurationError", "ENV_PREFIX", "load_config"]
