"""Typed request and response payloads of the Capital.com API."""

from .accounts import (
    Account,
    AccountList,
    Activity,
    ActivityList,
    ActivityParams,
    Balance,
    Leverage,
    Leverages,
    Preferences,
    TopUpRequest,
    TopUpResponse,
    Transaction,
    TransactionList,
    TransactionParams,
    TransactionType,
    UpdateLeverages,
    UpdatePreferencesRequest,
)
from .activity import ActivitySource, ActivityStatus, ActivityType
from .base import ApiModel, DealReferenceResponse, StatusResponse
from .general import ServerTime
from .markets import (
    DealingRules,
    Instrument,
    Market,
    MarketDetails,
    MarketList,
    MarketSearchParams,
    NavigationNode,
    NavigationNodeList,
    OpeningHours,
    OvernightFee,
    Rule,
    Snapshot,
)
from .orders import (
    CreateOrderRequest,
    OrderType,
    UpdateOrderRequest,
    WorkingOrderData,
    WorkingOrderDetail,
    WorkingOrderList,
)
from .positions import (
    Direction,
    OpenPositionRequest,
    Position,
    PositionDetail,
    PositionList,
    UpdatePositionRequest,
)
from .prices import Price, PriceData, Prices, PricesParams, Resolution
from .sentiment import ClientSentiment, ClientSentimentList
from .session import (
    AccountStatus,
    CreateSessionRequest,
    EncryptionKey,
    SessionAccount,
    SessionData,
    SwitchAccountRequest,
)
from .timestamps import (
    API_TIMESTAMP_FORMAT,
    ApiTimestamp,
    EpochMillis,
    epoch_millis,
    format_api_timestamp,
    from_epoch_millis,
    parse_api_timestamp,
)
from .trading import AffectedDeal, DealConfirmation
from .watchlists import (
    AddMarketRequest,
    CreateWatchlistRequest,
    Watchlist,
    WatchlistList,
    WatchlistResponse,
)

__all__ = [
    "API_TIMESTAMP_FORMAT",
    "Account",
    "AccountList",
    "AccountStatus",
    "Activity",
    "ActivityList",
    "ActivityParams",
    "ActivitySource",
    "ActivityStatus",
    "ActivityType",
    "AddMarketRequest",
    "AffectedDeal",
    "ApiModel",
    "ApiTimestamp",
    "Balance",
    "ClientSentiment",
    "ClientSentimentList",
    "CreateOrderRequest",
    "CreateSessionRequest",
    "CreateWatchlistRequest",
    "DealConfirmation",
    "DealReferenceResponse",
    "DealingRules",
    "Direction",
    "EncryptionKey",
    "EpochMillis",
    "Instrument",
    "Leverage",
    "Leverages",
    "Market",
    "MarketDetails",
    "MarketList",
    "MarketSearchParams",
    "NavigationNode",
    "NavigationNodeList",
    "OpenPositionRequest",
    "OpeningHours",
    "OrderType",
    "OvernightFee",
    "Position",
    "PositionDetail",
    "PositionList",
    "Preferences",
    "Price",
    "PriceData",
    "Prices",
    "PricesParams",
    "Resolution",
    "Rule",
    "ServerTime",
    "SessionAccount",
    "SessionData",
    "Snapshot",
    "StatusResponse",
    "SwitchAccountRequest",
    "TopUpRequest",
    "TopUpResponse",
    "Transaction",
    "TransactionList",
    "TransactionParams",
    "TransactionType",
    "UpdateLeverages",
    "UpdateOrderRequest",
    "UpdatePositionRequest",
    "UpdatePreferencesRequest",
    "Watchlist",
    "WatchlistList",
    "WatchlistResponse",
    "WorkingOrderData",
    "WorkingOrderDetail",
    "WorkingOrderList",
    "epoch_millis",
    "format_api_timestamp",
    "from_epoch_millis",
    "parse_api_timestamp",
]
