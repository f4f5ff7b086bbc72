"""Domain layer: typed payloads exchanged with the Capital.com API."""

from . import models

__all__ = ["models"]
