"""Interface layer for capitalcom.

Packages under ``capitalcom.interfaces`` expose boundary adapters such as CLI
commands on top of :class:`capitalcom.CapitalClient`.
"""

from . import cli

__all__ = ["cli"]
