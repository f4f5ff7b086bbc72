"""In-process request metrics for capitalcom.

Counters and histograms are kept in memory, guarded by locks so that
concurrent requests issued from one client can record safely. The HTTP
executor records every request it sends; applications can export the
numbers with :func:`get_metrics_summary` or :func:`format_prometheus`.
"""

from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Mapping

LabelKey = tuple[tuple[str, str], ...]


def _labels_to_key(labels: Mapping[str, str] | None) -> LabelKey:
    if not labels:
        return ()
    return tuple(sorted(labels.items()))


def _format_labels(key: LabelKey, quoted: bool = False) -> str:
    if quoted:
        return ",".join(f'{k}="{v}"' for k, v in key)
    return ",".join(f"{k}={v}" for k, v in key)


@dataclass
class Counter:
    """A monotonically increasing counter."""

    name: str
    help_text: str = ""
    _values: dict[LabelKey, float] = field(default_factory=lambda: defaultdict(float))
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def inc(self, value: float = 1.0, labels: Mapping[str, str] | None = None) -> None:
        key = _labels_to_key(labels)
        with self._lock:
            self._values[key] += value

    def get(self, labels: Mapping[str, str] | None = None) -> float:
        key = _labels_to_key(labels)
        with self._lock:
            return self._values.get(key, 0.0)

    def items(self) -> list[tuple[LabelKey, float]]:
        with self._lock:
            return list(self._values.items())


@dataclass
class Histogram:
    """Running count/sum/max of observed values per label set.

    Only the three aggregates are kept, never the raw observations.
    """

    name: str
    help_text: str = ""
    _summaries: dict[LabelKey, tuple[int, float, float]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def observe(self, value: float, labels: Mapping[str, str] | None = None) -> None:
        key = _labels_to_key(labels)
        with self._lock:
            count, total, peak = self._summaries.get(key, (0, 0.0, value))
            self._summaries[key] = (count + 1, total + value, max(peak, value))

    def get_stats(self, labels: Mapping[str, str] | None = None) -> dict[str, float]:
        key = _labels_to_key(labels)
        with self._lock:
            summary = self._summaries.get(key)
        if summary is None:
            return {"count": 0, "sum": 0.0, "avg": 0.0, "max": 0.0}
        count, total, peak = summary
        return {"count": count, "sum": total, "avg": total / count, "max": peak}

    def keys(self) -> list[LabelKey]:
        with self._lock:
            return list(self._summaries)


class MetricRegistry:
    """Registry holding every counter and histogram by name."""

    def __init__(self) -> None:
        self._counters: dict[str, Counter] = {}
        self._histograms: dict[str, Histogram] = {}
        self._lock = threading.Lock()

    def counter(self, name: str, help_text: str = "") -> Counter:
        with self._lock:
            if name not in self._counters:
                self._counters[name] = Counter(name=name, help_text=help_text)
            return self._counters[name]

    def histogram(self, name: str, help_text: str = "") -> Histogram:
        with self._lock:
            if name not in self._histograms:
                self._histograms[name] = Histogram(name=name, help_text=help_text)
            return self._histograms[name]

    def all_counters(self) -> dict[str, Counter]:
        with self._lock:
            return dict(self._counters)

    def all_histograms(self) -> dict[str, Histogram]:
        with self._lock:
            return dict(self._histograms)

    def reset(self) -> None:
        """Drop all recorded metrics."""
        with self._lock:
            self._counters.clear()
            self._histograms.clear()


_registry = MetricRegistry()


def get_registry() -> MetricRegistry:
    return _registry


# ---------------------------------------------------------------------------
# Predefined metrics
# ---------------------------------------------------------------------------

API_REQUESTS = "capitalcom_requests_total"
API_REQUEST_DURATION = "capitalcom_request_duration_seconds"
LOGINS = "capitalcom_logins_total"


def record_api_request(
    endpoint: str, method: str, status_code: int, duration: float
) -> None:
    """Record an API request with its outcome and duration.

    ``status_code`` is ``0`` when the request never produced a response.
    """
    _registry.counter(API_REQUESTS, "Total API requests").inc(
        labels={"endpoint": endpoint, "method": method, "status": str(status_code)}
    )
    _registry.histogram(API_REQUEST_DURATION, "API request duration in seconds").observe(
        duration, labels={"endpoint": endpoint, "method": method}
    )


def record_login(outcome: str, encrypted: bool) -> None:
    """Record a login attempt (``outcome`` is 'success' or 'failed')."""
    _registry.counter(LOGINS, "Total session creation attempts").inc(
        labels={"outcome": outcome, "encrypted": str(encrypted).lower()}
    )


# ---------------------------------------------------------------------------
# Export utilities
# ---------------------------------------------------------------------------


def get_metrics_summary() -> dict[str, dict[str, object]]:
    """Return a summary of all metrics for logging or display."""
    counters: dict[str, object] = {}
    for name, counter in _registry.all_counters().items():
        counters[name] = {
            (_format_labels(key) or "default"): value for key, value in counter.items()
        }

    histograms: dict[str, object] = {}
    for name, histogram in _registry.all_histograms().items():
        histograms[name] = {
            (_format_labels(key) or "default"): histogram.get_stats(dict(key))
            for key in histogram.keys()
        }

    return {"counters": counters, "histograms": histograms}


def format_prometheus() -> str:
    """Format metrics in Prometheus text exposition format."""
    lines: list[str] = []

    for name, counter in _registry.all_counters().items():
        if counter.help_text:
            lines.append(f"# HELP {name} {counter.help_text}")
        lines.append(f"# TYPE {name} counter")
        for key, value in counter.items():
            suffix = f"{{{_format_labels(key, quoted=True)}}}" if key else ""
            lines.append(f"{name}{suffix} {value}")

    for name, histogram in _registry.all_histograms().items():
        if histogram.help_text:
            lines.append(f"# HELP {name} {histogram.help_text}")
        lines.append(f"# TYPE {name} summary")
        for key in histogram.keys():
            stats = histogram.get_stats(dict(key))
            suffix = f"{{{_format_labels(key, quoted=True)}}}" if key else ""
            lines.append(f"{name}_count{suffix} {stats['count']}")
            lines.append(f"{name}_sum{suffix} {stats['sum']}")

    return "\n".join(lines)
