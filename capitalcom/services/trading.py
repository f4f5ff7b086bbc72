"""Deal confirmations."""

from __future__ import annotations

from capitalcom.domain.models import DealConfirmation

from .base import BaseService, path_segment


class TradingService(BaseService):
    def confirm(
        self, deal_reference: str, *, timeout: float | None = None
    ) -> DealConfirmation:
        """Look up the outcome of the deal submitted as ``deal_reference``."""
        return self._authenticated(
            "GET",
            f"/confirms/{path_segment(deal_reference)}",
            DealConfirmation,
            timeout=timeout,
        )


__all__ = ["TradingService"]
