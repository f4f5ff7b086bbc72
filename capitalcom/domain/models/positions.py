"""Open position payloads and the requests that open or amend them."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import ApiModel
from .markets import Market
from .timestamps import ApiTimestamp


class Direction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Position(ApiModel):
    contract_size: float = 0.0
    created_date: ApiTimestamp
    created_date_utc: ApiTimestamp = Field(alias="createdDateUTC")
    deal_id: str = ""
    deal_reference: str = ""
    working_order_id: str = ""
    size: float = 0.0
    leverage: float = 0.0
    upl: float = 0.0
    direction: Direction | None = None
    level: float = 0.0
    currency: str = ""
    guaranteed_stop: bool = False


class PositionDetail(ApiModel):
    position: Position
    market: Market


class PositionList(ApiModel):
    positions: list[PositionDetail] = Field(default_factory=list)


class UpdatePositionRequest(ApiModel):
    """Stop/limit settings of a position.

    Unset fields are left out of the request body. The API enforces the
    combinations: a guaranteed stop needs one of ``stop_level``,
    ``stop_distance`` or ``stop_amount`` and excludes a trailing stop (and
    hedging mode); a trailing stop needs ``stop_distance``.
    """

    guaranteed_stop: bool | None = None
    trailing_stop: bool | None = None
    stop_level: float | None = None
    stop_distance: float | None = None
    stop_amount: float | None = None
    profit_level: float | None = None
    profit_distance: float | None = None
    profit_amount: float | None = None


class OpenPositionRequest(UpdatePositionRequest):
    direction: Direction
    epic: str
    size: float


__all__ = [
    "Direction",
    "OpenPositionRequest",
    "Position",
    "PositionDetail",
    "PositionList",
    "UpdatePositionRequest",
]
