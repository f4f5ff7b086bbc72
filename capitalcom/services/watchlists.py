"""Watchlists and their markets."""

from __future__ import annotations

from capitalcom.domain.models import (
    AddMarketRequest,
    CreateWatchlistRequest,
    Market,
    MarketList,
    StatusResponse,
    Watchlist,
    WatchlistList,
    WatchlistResponse,
)

from .base import BaseService, path_segment


class WatchlistService(BaseService):
    def list(self, *, timeout: float | None = None) -> list[Watchlist]:
        return self._authenticated(
            "GET", "/watchlists", WatchlistList, timeout=timeout
        ).watchlists

    def create(
        self,
        name: str,
        epics: list[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> WatchlistResponse:
        request = CreateWatchlistRequest(name=name, epics=epics or [])
        return self._authenticated(
            "POST", "/watchlists", WatchlistResponse, body=request, timeout=timeout
        )

    def get(self, watchlist_id: str, *, timeout: float | None = None) -> list[Market]:
        """Markets on the watchlist."""
        return self._authenticated(
            "GET",
            f"/watchlists/{path_segment(watchlist_id)}",
            MarketList,
            timeout=timeout,
        ).markets

    def add_market(
        self, watchlist_id: str, epic: str, *, timeout: float | None = None
    ) -> str:
        return self._authenticated(
            "PUT",
            f"/watchlists/{path_segment(watchlist_id)}",
            StatusResponse,
            body=AddMarketRequest(epic=epic),
            timeout=timeout,
        ).status

    def delete(self, watchlist_id: str, *, timeout: float | None = None) -> str:
        return self._authenticated(
            "DELETE",
            f"/watchlists/{path_segment(watchlist_id)}",
            StatusResponse,
            timeout=timeout,
        ).status

    def remove_market(
        self, watchlist_id: str, epic: str, *, timeout: float | None = None
    ) -> str:
        return self._authenticated(
            "DELETE",
            f"/watchlists/{path_segment(watchlist_id)}/{path_segment(epic)}",
            StatusResponse,
            timeout=timeout,
        ).status


__all__ = ["WatchlistService"]
