"""Application-level wiring: configuration loading."""

from .config import ClientSettings, ConfigurationError, load_config

__all__ = ["ClientSettings", "ConfigurationError", "load_config"]
