"""Working order payloads.

``UpdateOrderRequest.good_till_date`` is the only timestamp the client ever
writes: it is omitted from the body when unset and otherwise rendered in the
fixed API format (UTC).
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import ApiModel
from .markets import Market
from .positions import Direction
from .timestamps import ApiTimestamp


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    STOP = "STOP"


class WorkingOrderData(ApiModel):
    deal_id: str = ""
    direction: Direction | None = None
    epic: str = ""
    order_size: float = 0.0
    leverage: float = 0.0
    order_level: float = 0.0
    time_in_force: str = ""
    good_till_date: ApiTimestamp
    good_till_date_utc: ApiTimestamp = Field(alias="goodTillDateUTC")
    created_date: ApiTimestamp
    created_date_utc: ApiTimestamp = Field(alias="createdDateUTC")
    guaranteed_stop: bool = False
    order_type: str = ""
    stop_distance: float = 0.0
    profit_distance: float = 0.0
    trailing_stop: bool = False
    currency_code: str = ""


class WorkingOrderDetail(ApiModel):
    working_order_data: WorkingOrderData
    market_data: Market


class WorkingOrderList(ApiModel):
    working_orders: list[WorkingOrderDetail] = Field(default_factory=list)


class UpdateOrderRequest(ApiModel):
    """Amendable fields of a working order.

    ``level`` is always sent; every other field is left out of the body while
    unset. Stop/limit combinations follow the same rules as positions.
    """

    level: float
    good_till_date: ApiTimestamp | None = None
    guaranteed_stop: bool | None = None
    trailing_stop: bool | None = None
    stop_level: float | None = None
    stop_distance: float | None = None
    stop_amount: float | None = None
    profit_level: float | None = None
    profit_distance: float | None = None
    profit_amount: float | None = None


class CreateOrderRequest(UpdateOrderRequest):
    direction: Direction
    epic: str
    size: float
    type: OrderType


__all__ = [
    "CreateOrderRequest",
    "OrderType",
    "UpdateOrderRequest",
    "WorkingOrderData",
    "WorkingOrderDetail",
    "WorkingOrderList",
]
