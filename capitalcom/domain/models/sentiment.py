"""Client sentiment payloads."""

from __future__ import annotations

from pydantic import Field

from .base import ApiModel


class ClientSentiment(ApiModel):
    market_id: str = ""
    long_position_percentage: float = 0.0
    short_position_percentage: float = 0.0


class ClientSentimentList(ApiModel):
    client_sentiments: list[ClientSentiment] = Field(default_factory=list)


__all__ = ["ClientSentiment", "ClientSentimentList"]
