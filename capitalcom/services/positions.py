"""Open positions."""

from __future__ import annotations

from capitalcom.domain.models import (
    DealReferenceResponse,
    OpenPositionRequest,
    PositionDetail,
    PositionList,
    UpdatePositionRequest,
)

from .base import BaseService, path_segment


class PositionService(BaseService):
    """List, open, amend and close positions.

    Write operations return the deal reference; pass it to
    :meth:`TradingService.confirm` for the outcome.
    """

    def list(self, *, timeout: float | None = None) -> list[PositionDetail]:
        return self._authenticated(
            "GET", "/positions", PositionList, timeout=timeout
        ).positions

    def open(
        self, request: OpenPositionRequest, *, timeout: float | None = None
    ) -> str:
        return self._authenticated(
            "POST", "/positions", DealReferenceResponse, body=request, timeout=timeout
        ).deal_reference

    def get(self, deal_id: str, *, timeout: float | None = None) -> PositionDetail:
        return self._authenticated(
            "GET", f"/positions/{path_segment(deal_id)}", PositionDetail, timeout=timeout
        )

    def update(
        self,
        deal_id: str,
        request: UpdatePositionRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        return self._authenticated(
            "PUT",
            f"/positions/{path_segment(deal_id)}",
            DealReferenceResponse,
            body=request,
            timeout=timeout,
        ).deal_reference

    def close(self, deal_id: str, *, timeout: float | None = None) -> str:
        return self._authenticated(
            "DELETE",
            f"/positions/{path_segment(deal_id)}",
            DealReferenceResponse,
            timeout=timeout,
        ).deal_reference


__all__ = ["PositionService"]
