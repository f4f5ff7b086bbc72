"""Resource services built on the authenticated request pipeline."""

from .accounts import AccountService
from .base import BaseService, path_segment
from .markets import MarketService
from .orders import OrderService
from .positions import PositionService
from .prices import PriceService
from .sentiment import SentimentService
from .session import SessionService
from .trading import TradingService
from .watchlists import WatchlistService

__all__ = [
    "AccountService",
    "BaseService",
    "MarketService",
    "OrderService",
    "PositionService",
    "PriceService",
    "SentimentService",
    "SessionService",
    "TradingService",
    "WatchlistService",
    "path_segment",
]
