"""Client sentiment per market."""

from __future__ import annotations

from typing import Iterable

from capitalcom.domain.models import ClientSentiment, ClientSentimentList

from .base import BaseService, path_segment


class SentimentService(BaseService):
    def list(
        self, market_ids: Iterable[str], *, timeout: float | None = None
    ) -> list[ClientSentiment]:
        query = {"marketIds": ",".join(market_ids)}
        return self._authenticated(
            "GET",
            "/clientsentiment",
            ClientSentimentList,
            params=query,
            timeout=timeout,
        ).client_sentiments

    def get(self, market_id: str, *, timeout: float | None = None) -> ClientSentiment:
        return self._authenticated(
            "GET",
            f"/clientsentiment/{path_segment(market_id)}",
            ClientSentiment,
            timeout=timeout,
        )


__all__ = ["SentimentService"]
