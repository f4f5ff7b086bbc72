"""Infrastructure layer for capitalcom.

Holds adapters for HTTP transport, password encryption and observability.
Resource services in :mod:`capitalcom.services` build on these modules.
"""

from . import http, observability, security

__all__ = ["http", "observability", "security"]
