"""Base class for the Capital.com resource services.

Every resource service (accounts, positions, orders, ...) shares one
:class:`CapitalHttpClient` and one :class:`SessionTokens` store owned by the
client facade. Authenticated calls always go through
:meth:`BaseService._authenticated`, which sends the current token pair and
refreshes the store from the response.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

from pydantic import BaseModel

from capitalcom.infrastructure.http import (
    ApiResponse,
    CapitalHttpClient,
    SessionTokens,
)
from capitalcom.infrastructure.http.client import ModelT
from capitalcom.infrastructure.observability import get_logger


def path_segment(value: str) -> str:
    """Escape an opaque identifier for use as one URL path segment."""
    return quote(value, safe="")


class BaseService:
    """Shared plumbing for the resource services.

    Example usage:
        class PingService(BaseService):
            def ping(self) -> str:
                return self._authenticated("GET", "/ping", StatusResponse).status

        # Production usage goes through CapitalClient, which owns the
        # HTTP client and the token store.
        service = PingService(http_client, tokens)
    """

    def __init__(self, http: CapitalHttpClient, tokens: SessionTokens) -> None:
        self._http = http
        self._tokens = tokens
        self._logger = get_logger(self.__class__.__module__)

    def _authenticated(
        self,
        method: str,
        path: str,
        response_model: type[ModelT],
        *,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ModelT:
        """Send an authenticated request and rotate the session tokens.

        The store is only touched after a successful response; on any error
        it keeps its previous pair.
        """
        response: ApiResponse[ModelT] = self._http.execute(
            method,
            path,
            response_model,
            body=body,
            params=params,
            headers=self._tokens.headers(),
            timeout=timeout,
        )
        self._tokens.update(response.headers)
        return response.payload


__all__ = ["BaseService", "path_segment"]
