"""Account, preference and history payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import ApiModel
from .timestamps import ApiTimestamp, format_api_timestamp


class Balance(ApiModel):
    balance: float = 0.0
    deposit: float = 0.0
    profit_loss: float = 0.0
    available: float = 0.0


class Account(ApiModel):
    account_id: str = ""
    account_name: str = ""
    status: str = ""
    account_type: str = ""
    preferred: bool = False
    balance: Balance = Field(default_factory=Balance)
    currency: str = ""
    symbol: str = ""


class AccountList(ApiModel):
    accounts: list[Account] = Field(default_factory=list)


# --- Preferences ---


class Leverage(ApiModel):
    current: int = 0
    available: list[int] = Field(default_factory=list)


class Leverages(ApiModel):
    shares: Leverage = Field(default_factory=Leverage, alias="SHARES")
    currencies: Leverage = Field(default_factory=Leverage, alias="CURRENCIES")
    indices: Leverage = Field(default_factory=Leverage, alias="INDICES")
    cryptocurrencies: Leverage = Field(default_factory=Leverage, alias="CRYPTOCURRENCIES")
    commodities: Leverage = Field(default_factory=Leverage, alias="COMMODITIES")


class Preferences(ApiModel):
    hedging_mode: bool = False
    leverages: Leverages = Field(default_factory=Leverages)


class UpdateLeverages(ApiModel):
    """New leverage per asset class; unset classes are left unchanged."""

    shares: int | None = Field(default=None, alias="SHARES")
    currencies: int | None = Field(default=None, alias="CURRENCIES")
    indices: int | None = Field(default=None, alias="INDICES")
    cryptocurrencies: int | None = Field(default=None, alias="CRYPTOCURRENCIES")
    commodities: int | None = Field(default=None, alias="COMMODITIES")


class UpdatePreferencesRequest(ApiModel):
    leverages: UpdateLeverages | None = None
    hedging_mode: bool = False


# --- Activity history ---


class Activity(ApiModel):
    date: ApiTimestamp
    date_utc: ApiTimestamp = Field(alias="dateUTC")
    epic: str = ""
    deal_id: str = ""
    source: str = ""
    type: str = ""
    status: str = ""


class ActivityList(ApiModel):
    activities: list[Activity] = Field(default_factory=list)


def _period_query(
    from_: datetime | None, to: datetime | None, last_period: int | None
) -> dict[str, str]:
    query: dict[str, str] = {}
    if from_ is not None:
        query["from"] = format_api_timestamp(from_)
    if to is not None:
        query["to"] = format_api_timestamp(to)
    # lastPeriod is only honoured without an explicit range.
    if from_ is None and to is None and last_period:
        query["lastPeriod"] = str(last_period)
    return query


@dataclass
class ActivityParams:
    """Filters for ``GET /history/activity``.

    ``filter`` is a FIQL expression over the ``source``, ``type`` and
    ``status`` fields, e.g. ``source!=DEALER;type!=POSITION``. Values come from
    :class:`ActivitySource`, :class:`ActivityType` and :class:`ActivityStatus`::

        ActivityParams(filter=f"source!={ActivitySource.DEALER.value}")
    """

    from_: datetime | None = None
    to: datetime | None = None
    last_period: int | None = None
    detailed: bool = False
    deal_id: str | None = None
    filter: str | None = None

    def to_query(self) -> dict[str, str]:
        query = _period_query(self.from_, self.to, self.last_period)
        if self.detailed:
            query["detailed"] = "true"
        if self.deal_id:
            query["dealId"] = self.deal_id
        if self.filter:
            query["filter"] = self.filter
        return query


# --- Transaction history ---


class TransactionType(str, Enum):
    INACTIVITY_FEE = "INACTIVITY_FEE"
    RESERVE = "RESERVE"
    VOID = "VOID"
    UNRESERVE = "UNRESERVE"
    WRITE_OFF_OR_CREDIT = "WRITE_OFF_OR_CREDIT"
    CREDIT_FACILITY = "CREDIT_FACILITY"
    FX_COMMISSION = "FX_COMMISSION"
    COMPLAINT_SETTLEMENT = "COMPLAINT_SETTLEMENT"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    REFUND = "REFUND"
    WITHDRAWAL_MONEY_BACK = "WITHDRAWAL_MONEY_BACK"
    TRADE = "TRADE"
    SWAP = "SWAP"
    TRADE_COMMISSION = "TRADE_COMMISSION"
    TRADE_COMMISSION_GSL = "TRADE_COMMISSION_GSL"
    NEGATIVE_BALANCE_PROTECTION = "NEGATIVE_BALANCE_PROTECTION"
    TRADE_CORRECTION = "TRADE_CORRECTION"
    CHARGEBACK = "CHARGEBACK"
    ADJUSTMENT = "ADJUSTMENT"
    BONUS = "BONUS"
    TRANSFER = "TRANSFER"
    CORPORATE_ACTION = "CORPORATE_ACTION"
    CONVERSION = "CONVERSION"
    REBATE = "REBATE"
    TRADE_SLIPPAGE_PROTECTION = "TRADE_SLIPPAGE_PROTECTION"


class Transaction(ApiModel):
    date: ApiTimestamp
    date_utc: ApiTimestamp = Field(alias="dateUTC")
    instrument_name: str = ""
    transaction_type: str = ""
    note: str = ""
    reference: str = ""
    size: str = ""
    currency: str = ""
    status: str = ""


class TransactionList(ApiModel):
    transactions: list[Transaction] = Field(default_factory=list)


@dataclass
class TransactionParams:
    """Filters for ``GET /history/transactions``."""

    from_: datetime | None = None
    to: datetime | None = None
    last_period: int | None = None
    type: TransactionType | None = None

    def to_query(self) -> dict[str, str]:
        query = _period_query(self.from_, self.to, self.last_period)
        if self.type is not None:
            query["type"] = TransactionType(self.type).value
        return query


# --- Demo top-up ---


class TopUpRequest(ApiModel):
    amount: float


class TopUpResponse(ApiModel):
    successful: bool = False


__all__ = [
    "Account",
    "AccountList",
    "Activity",
    "ActivityList",
    "ActivityParams",
    "Balance",
    "Leverage",
    "Leverages",
    "Preferences",
    "TopUpRequest",
    "TopUpResponse",
    "Transaction",
    "TransactionList",
    "TransactionParams",
    "TransactionType",
    "UpdateLeverages",
    "UpdatePreferencesRequest",
]
