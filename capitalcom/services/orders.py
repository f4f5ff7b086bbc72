"""Working orders."""

from __future__ import annotations

from capitalcom.domain.models import (
    CreateOrderRequest,
    DealReferenceResponse,
    UpdateOrderRequest,
    WorkingOrderDetail,
    WorkingOrderList,
)

from .base import BaseService, path_segment


class OrderService(BaseService):
    """List, create, amend and cancel working orders."""

    def list(self, *, timeout: float | None = None) -> list[WorkingOrderDetail]:
        return self._authenticated(
            "GET", "/workingorders", WorkingOrderList, timeout=timeout
        ).working_orders

    def create(
        self, request: CreateOrderRequest, *, timeout: float | None = None
    ) -> str:
        return self._authenticated(
            "POST",
            "/workingorders",
            DealReferenceResponse,
            body=request,
            timeout=timeout,
        ).deal_reference

    def update(
        self,
        deal_id: str,
        request: UpdateOrderRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        return self._authenticated(
            "PUT",
            f"/workingorders/{path_segment(deal_id)}",
            DealReferenceResponse,
            body=request,
            timeout=timeout,
        ).deal_reference

    def delete(self, deal_id: str, *, timeout: float | None = None) -> str:
        return self._authenticated(
            "DELETE",
            f"/workingorders/{path_segment(deal_id)}",
            DealReferenceResponse,
            timeout=timeout,
        ).deal_reference


__all__ = ["OrderService"]
