"""Deal confirmation payloads."""

from __future__ import annotations

from pydantic import Field

from .base import ApiModel
from .timestamps import ApiTimestamp


class AffectedDeal(ApiModel):
    deal_id: str = ""
    status: str = ""


class DealConfirmation(ApiModel):
    """Outcome of a deal, looked up by the reference returned on submission.

    Unlike most payloads this one carries a single ``date`` (no UTC twin).
    """

    date: ApiTimestamp
    status: str = ""
    deal_status: str = ""
    epic: str = ""
    deal_reference: str = ""
    deal_id: str = ""
    affected_deals: list[AffectedDeal] = Field(default_factory=list)
    level: float = 0.0
    size: float = 0.0
    direction: str = ""
    guaranteed_stop: bool = False
    trailing_stop: bool = False


__all__ = ["AffectedDeal", "DealConfirmation"]
