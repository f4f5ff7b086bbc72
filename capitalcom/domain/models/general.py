"""Payloads of the unauthenticated service endpoints."""

from __future__ import annotations

from .base import ApiModel
from .timestamps import EpochMillis


class ServerTime(ApiModel):
    server_time: EpochMillis


__all__ = ["ServerTime"]
