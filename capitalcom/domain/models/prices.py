"""Historical price payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import ApiModel
from .timestamps import ApiTimestamp, format_api_timestamp


class Resolution(str, Enum):
    MINUTE = "MINUTE"
    MINUTE_5 = "MINUTE_5"
    MINUTE_15 = "MINUTE_15"
    MINUTE_30 = "MINUTE_30"
    HOUR = "HOUR"
    HOUR_4 = "HOUR_4"
    DAY = "DAY"
    WEEK = "WEEK"


class PriceData(ApiModel):
    bid: float = 0.0
    ask: float = 0.0


class Price(ApiModel):
    snapshot_time: ApiTimestamp
    snapshot_time_utc: ApiTimestamp = Field(alias="snapshotTimeUTC")
    open_price: PriceData = Field(default_factory=PriceData)
    close_price: PriceData = Field(default_factory=PriceData)
    high_price: PriceData = Field(default_factory=PriceData)
    low_price: PriceData = Field(default_factory=PriceData)
    last_traded_volume: int = 0


class Prices(ApiModel):
    prices: list[Price] = Field(default_factory=list)
    instrument_type: str = ""


@dataclass
class PricesParams:
    """Query for ``GET /prices/{epic}``; ``max`` caps the number of bars."""

    resolution: Resolution | None = None
    max: int | None = None
    from_: datetime | None = None
    to: datetime | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.resolution is not None:
            query["resolution"] = Resolution(self.resolution).value
        if self.max:
            query["max"] = str(self.max)
        if self.from_ is not None:
            query["from"] = format_api_timestamp(self.from_)
        if self.to is not None:
            query["to"] = format_api_timestamp(self.to)
        return query


__all__ = ["Price", "PriceData", "Prices", "PricesParams", "Resolution"]
