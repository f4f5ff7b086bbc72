"""Market navigation and market details."""

from __future__ import annotations

from capitalcom.domain.models import (
    Market,
    MarketDetails,
    MarketList,
    MarketSearchParams,
    NavigationNode,
    NavigationNodeList,
)

from .base import BaseService, path_segment


class MarketService(BaseService):
    def categories(self, *, timeout: float | None = None) -> list[NavigationNode]:
        """Top-level nodes of the market navigation tree."""
        return self._authenticated(
            "GET", "/marketnavigation", NavigationNodeList, timeout=timeout
        ).nodes

    def subcategories(
        self,
        node_id: str,
        limit: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[NavigationNode]:
        query = {"limit": str(limit)} if limit else None
        return self._authenticated(
            "GET",
            f"/marketnavigation/{path_segment(node_id)}",
            NavigationNodeList,
            params=query,
            timeout=timeout,
        ).nodes

    def details(
        self,
        params: MarketSearchParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Market]:
        """Search markets by term, or fetch a fixed set of epics."""
        query = (params or MarketSearchParams()).to_query()
        return self._authenticated(
            "GET", "/markets", MarketList, params=query, timeout=timeout
        ).markets

    def detail(self, epic: str, *, timeout: float | None = None) -> MarketDetails:
        return self._authenticated(
            "GET", f"/markets/{path_segment(epic)}", MarketDetails, timeout=timeout
        )


__all__ = ["MarketService"]
