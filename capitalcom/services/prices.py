"""Historical prices."""

from __future__ import annotations

from capitalcom.domain.models import Prices, PricesParams

from .base import BaseService, path_segment


class PriceService(BaseService):
    def history(
        self,
        epic: str,
        params: PricesParams | None = None,
        *,
        timeout: float | None = None,
    ) -> Prices:
        query = (params or PricesParams()).to_query()
        return self._authenticated(
            "GET",
            f"/prices/{path_segment(epic)}",
            Prices,
            params=query,
            timeout=timeout,
        )


__all__ = ["PriceService"]
