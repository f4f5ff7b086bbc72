"""Timestamp codecs for Capital.com payloads.

Most payloads describe one instant twice, as a "local" and a "UTC" string
field (``createdDate``/``createdDateUTC`` and friends). Neither carries an
offset and both use the zero-padded :data:`API_TIMESTAMP_FORMAT`, sometimes
followed by fractional seconds; they are parsed into naive datetimes. Models
declare such fields with the :data:`ApiTimestamp` type; a missing or malformed
value fails the whole payload.

The server clock (``/time``) and the encryption key timestamp are plain epoch
milliseconds instead, handled by :data:`EpochMillis`.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

API_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Zero-padded fields; the server may append fractional seconds.
_API_TIMESTAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.(\d+))?", re.ASCII
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def parse_api_timestamp(value: Any) -> datetime:
    """Parse one ``YYYY-MM-DDTHH:MM:SS[.fff]`` string into a naive datetime.

    Fractional seconds are kept to microsecond precision.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a timestamp string, got {type(value).__name__}")
    match = _API_TIMESTAMP_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"timestamp {value!r} does not match YYYY-MM-DDTHH:MM:SS")
    parsed = datetime.strptime(value[:19], API_TIMESTAMP_FORMAT)
    fraction = match.group(1)
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return parsed


def format_api_timestamp(value: datetime) -> str:
    """Render ``value`` in the API format.

    Aware datetimes are converted to UTC first; fractional seconds are
    dropped.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(API_TIMESTAMP_FORMAT)


def from_epoch_millis(value: Any) -> datetime:
    """Convert epoch milliseconds into an aware UTC datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected epoch milliseconds, got {value!r}")
    try:
        return EPOCH + value * _ONE_MILLISECOND
    except OverflowError as exc:
        raise ValueError(f"epoch milliseconds out of range: {value}") from exc


def epoch_millis(value: datetime) -> int:
    """Exact inverse of :func:`from_epoch_millis`.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MILLISECOND


ApiTimestamp = Annotated[
    datetime,
    BeforeValidator(parse_api_timestamp),
    PlainSerializer(format_api_timestamp, return_type=str, when_used="json"),
]

EpochMillis = Annotated[
    datetime,
    BeforeValidator(from_epoch_millis),
    PlainSerializer(epoch_millis, return_type=int, when_used="json"),
]


__all__ = [
    "API_TIMESTAMP_FORMAT",
    "ApiTimestamp",
    "EpochMillis",
    "epoch_millis",
    "format_api_timestamp",
    "from_epoch_millis",
    "parse_api_timestamp",
]
