"""Rotating session credentials for authenticated Capital.com calls.

Capital.com identifies a session by two opaque values, returned as response
headers on login and on every authenticated call afterwards. They are always
sent and replaced together.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Mapping

from requests.structures import CaseInsensitiveDict

HEADER_API_KEY = "X-CAP-API-KEY"
HEADER_SECURITY_TOKEN = "X-SECURITY-TOKEN"
HEADER_CST = "CST"


@dataclass(frozen=True)
class TokenPair:
    """One ``(security token, CST)`` pair taken from a single response."""

    security_token: str = ""
    cst: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.security_token) and bool(self.cst)


_EMPTY = TokenPair()


class SessionTokens:
    """Thread-safe holder of the current :class:`TokenPair`.

    The pair is swapped as one immutable value, so a reader never sees a new
    security token next to an old CST, even with several requests in flight.
    When responses complete concurrently, the last update wins.
    """

    def __init__(self, pair: TokenPair | None = None) -> None:
        self._pair = pair or _EMPTY
        self._lock = threading.Lock()

    def snapshot(self) -> TokenPair:
        with self._lock:
            return self._pair

    @property
    def is_authenticated(self) -> bool:
        return self.snapshot().is_complete

    def headers(self) -> dict[str, str]:
        """Return the two authentication headers for an outgoing request."""
        pair = self.snapshot()
        return {
            HEADER_SECURITY_TOKEN: pair.security_token,
            HEADER_CST: pair.cst,
        }

    def update(self, response_headers: Mapping[str, str]) -> TokenPair:
        """Replace the stored pair with the values from ``response_headers``.

        The store is overwritten unconditionally. If either header is missing
        or empty the pair is cleared entirely, so a response without the
        headers erases the session credentials.
        """
        lookup = CaseInsensitiveDict(response_headers or {})
        pair = TokenPair(
            security_token=lookup.get(HEADER_SECURITY_TOKEN) or "",
            cst=lookup.get(HEADER_CST) or "",
        )
        if not pair.is_complete:
            pair = _EMPTY
        with self._lock:
            self._pair = pair
        return pair

    def clear(self) -> None:
        with self._lock:
            self._pair = _EMPTY


__all__ = [
    "HEADER_API_KEY",
    "HEADER_CST",
    "HEADER_SECURITY_TOKEN",
    "SessionTokens",
    "TokenPair",
]
