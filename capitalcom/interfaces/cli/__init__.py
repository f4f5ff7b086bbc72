"""CLI interface facades for capitalcom.

This package is the canonical home for all Click commands. Use the
``capitalcom.interfaces.cli`` namespace for imports and module execution.
"""

from .__main__ import cli
from .accounts import accounts
from .general import ping, time_cmd
from .markets import markets, prices, sentiment, watchlists
from .trading import orders, positions

__all__ = [
    "accounts",
    "cli",
    "markets",
    "orders",
    "ping",
    "positions",
    "prices",
    "sentiment",
    "time_cmd",
    "watchlists",
]
