"""Observability and logging facades."""

from .logging import (
    configure_logging,
    get_logger,
    log_context,
    log_exception,
    redact_headers,
)
from .metrics import (
    format_prometheus,
    get_metrics_summary,
    get_registry,
    record_api_request,
    record_login,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
    "log_exception",
    "redact_headers",
    # Metrics
    "format_prometheus",
    "get_metrics_summary",
    "get_registry",
    "record_api_request",
    "record_login",
]
