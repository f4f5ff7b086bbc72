"""Watchlist payloads."""

from __future__ import annotations

from pydantic import Field

from .base import ApiModel


class Watchlist(ApiModel):
    id: str = ""
    name: str = ""
    editable: bool = False
    deleteable: bool = False
    default_system_watchlist: bool = False


class WatchlistList(ApiModel):
    watchlists: list[Watchlist] = Field(default_factory=list)


class CreateWatchlistRequest(ApiModel):
    name: str
    epics: list[str] = Field(default_factory=list)


class WatchlistResponse(ApiModel):
    watchlist_id: str = ""
    status: str = ""


class AddMarketRequest(ApiModel):
    epic: str


__all__ = [
    "AddMarketRequest",
    "CreateWatchlistRequest",
    "Watchlist",
    "WatchlistList",
    "WatchlistResponse",
]
