"""Market navigation, market snapshot and instrument detail payloads."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field

from .base import ApiModel
from .timestamps import ApiTimestamp


class NavigationNode(ApiModel):
    id: str = ""
    name: str = ""


class NavigationNodeList(ApiModel):
    nodes: list[NavigationNode] = Field(default_factory=list)


class Market(ApiModel):
    """Market snapshot embedded in positions, orders and watchlists."""

    instrument_name: str = ""
    expiry: str = ""
    market_status: str = ""
    epic: str = ""
    symbol: str = ""
    instrument_type: str = ""
    lot_size: float = 0.0
    high: float = 0.0
    low: float = 0.0
    percentage_change: float = 0.0
    net_change: float = 0.0
    bid: float = 0.0
    offer: float = 0.0
    update_time: ApiTimestamp
    update_time_utc: ApiTimestamp = Field(alias="updateTimeUTC")
    delay_time: int = 0
    streaming_prices_available: bool = False
    scaling_factor: float = 0.0
    market_modes: list[str] = Field(default_factory=list)


class MarketList(ApiModel):
    markets: list[Market] = Field(default_factory=list)


@dataclass
class MarketSearchParams:
    """Filters for ``GET /markets``: a free-text term and/or explicit epics."""

    search_term: str | None = None
    epics: list[str] = field(default_factory=list)

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.search_term:
            query["searchTerm"] = self.search_term
        if self.epics:
            query["epics"] = ",".join(self.epics)
        return query


# --- Single market details ---


class OpeningHours(ApiModel):
    mon: list[str] = Field(default_factory=list)
    tue: list[str] = Field(default_factory=list)
    wed: list[str] = Field(default_factory=list)
    thu: list[str] = Field(default_factory=list)
    fri: list[str] = Field(default_factory=list)
    sat: list[str] = Field(default_factory=list)
    sun: list[str] = Field(default_factory=list)
    zone: str = ""


class OvernightFee(ApiModel):
    long_rate: float = 0.0
    short_rate: float = 0.0
    swap_charge_timestamp: int = 0
    swap_charge_interval: int = 0


class Instrument(ApiModel):
    epic: str = ""
    symbol: str = ""
    expiry: str = ""
    name: str = ""
    lot_size: float = 0.0
    type: str = ""
    guaranteed_stop_allowed: bool = False
    streaming_prices_available: bool = False
    currency: str = ""
    margin_factor: float = 0.0
    margin_factor_unit: str = ""
    opening_hours: OpeningHours | None = None
    overnight_fee: OvernightFee | None = None


class Rule(ApiModel):
    unit: str = ""
    value: float = 0.0


class DealingRules(ApiModel):
    min_step_distance: Rule = Field(default_factory=Rule)
    min_deal_size: Rule = Field(default_factory=Rule)
    max_deal_size: Rule = Field(default_factory=Rule)
    min_size_increment: Rule = Field(default_factory=Rule)
    min_guaranteed_stop_distance: Rule = Field(default_factory=Rule)
    min_stop_or_profit_distance: Rule = Field(default_factory=Rule)
    max_stop_or_profit_distance: Rule = Field(default_factory=Rule)
    market_order_preference: str = ""
    trailing_stops_preference: str = ""


class Snapshot(ApiModel):
    market_status: str = ""
    net_change: float = 0.0
    percentage_change: float = 0.0
    # Kept as the raw string: this field may carry fractional seconds.
    update_time: str = ""
    delay_time: int = 0
    bid: float = 0.0
    offer: float = 0.0
    high: float = 0.0
    low: float = 0.0
    decimal_places_factor: int = 0
    scaling_factor: int = 0
    market_modes: list[str] = Field(default_factory=list)


class MarketDetails(ApiModel):
    instrument: Instrument = Field(default_factory=Instrument)
    dealing_rules: DealingRules = Field(default_factory=DealingRules)
    snapshot: Snapshot = Field(default_factory=Snapshot)


__all__ = [
    "DealingRules",
    "Instrument",
    "Market",
    "MarketDetails",
    "MarketList",
    "MarketSearchParams",
    "NavigationNode",
    "NavigationNodeList",
    "OpeningHours",
    "OvernightFee",
    "Rule",
    "Snapshot",
]
