"""
capitalcom package initializer.

This package provides a client for the Capital.com trading REST API: session
handling with rotating security tokens, typed payloads for accounts,
positions, working orders, markets, prices, client sentiment and watchlists,
and a small command-line interface on top.

The package exposes a ``__version__`` attribute indicating the installed
version. The version is read from pyproject.toml via importlib.metadata – this
is the single source of truth.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("capitalcom")
except PackageNotFoundError:
    # Package is not installed (running from source without pip install -e .)
    __version__ = "0.0.0.dev"

from .client import CapitalClient  # noqa: E402

__all__: list[str] = ["CapitalClient", "__version__"]
