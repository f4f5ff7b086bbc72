"""Capital.com API client facade.

:class:`CapitalClient` owns the HTTP executor and the session token store and
hands both to one service per API resource::

    client = CapitalClient("my-api-key")
    client.session.login("client@example.com", "password")
    for detail in client.positions.list():
        print(detail.market.epic, detail.position.upl)

Services share the token store, so calls may be issued from several threads
against the same client.
"""

from __future__ import annotations

from datetime import datetime

from requests import Session

from capitalcom.app.config import ClientSettings
from capitalcom.domain.models import ServerTime, SessionAccount, StatusResponse
from capitalcom.infrastructure.http import (
    API_PATH_V1,
    DEFAULT_TIMEOUT_SECONDS,
    HOST_DEMO,
    CapitalHttpClient,
    SessionTokens,
)
from capitalcom.services import (
    AccountService,
    BaseService,
    MarketService,
    OrderService,
    PositionService,
    PriceService,
    SentimentService,
    SessionService,
    TradingService,
    WatchlistService,
)


class _GeneralService(BaseService):
    def time(self, *, timeout: float | None = None) -> datetime:
        return self._http.get("/time", ServerTime, timeout=timeout).payload.server_time

    def ping(self, *, timeout: float | None = None) -> str:
        return self._authenticated("GET", "/ping", StatusResponse, timeout=timeout).status


class CapitalClient:
    """Entry point to every Capital.com resource.

    Args:
        api_key: The ``X-CAP-API-KEY`` used for login.
        identifier: Default login identifier for :meth:`login`.
        password: Default password for :meth:`login`.
        host: API host; :data:`HOST_DEMO` unless trading live.
        api_path: Versioned path prefix.
        timeout: Default per-request timeout in seconds.
        session: Optional pre-configured :class:`requests.Session`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        identifier: str | None = None,
        password: str | None = None,
        host: str = HOST_DEMO,
        api_path: str = API_PATH_V1,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Session | None = None,
    ) -> None:
        self.identifier = identifier
        self._password = password
        self.http = CapitalHttpClient(
            host=host, api_path=api_path, timeout=timeout, session=session
        )
        self.tokens = SessionTokens()

        self.session = SessionService(self.http, self.tokens, api_key)
        self.accounts = AccountService(self.http, self.tokens)
        self.trading = TradingService(self.http, self.tokens)
        self.positions = PositionService(self.http, self.tokens)
        self.orders = OrderService(self.http, self.tokens)
        self.markets = MarketService(self.http, self.tokens)
        self.prices = PriceService(self.http, self.tokens)
        self.sentiment = SentimentService(self.http, self.tokens)
        self.watchlists = WatchlistService(self.http, self.tokens)
        self._general = _GeneralService(self.http, self.tokens)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, *, session: Session | None = None
    ) -> "CapitalClient":
        return cls(
            settings.api_key,
            identifier=settings.identifier,
            password=settings.password,
            host=settings.host,
            api_path=settings.api_path,
            timeout=settings.timeout_seconds,
            session=session,
        )

    def __enter__(self) -> "CapitalClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.http.close()

    def login(
        self, *, encrypt_password: bool = False, timeout: float | None = None
    ) -> SessionAccount:
        """Log in with the identifier and password given at construction."""
        if not self.identifier or not self._password:
            raise ValueError("identifier and password are required to log in")
        if encrypt_password:
            return self.session.login_encrypted(
                self.identifier, self._password, timeout=timeout
            )
        return self.session.login(self.identifier, self._password, timeout=timeout)

    def time(self, *, timeout: float | None = None) -> datetime:
        """Server time as an aware UTC datetime. Needs no session."""
        return self._general.time(timeout=timeout)

    def ping(self, *, timeout: float | None = None) -> str:
        """Keep the session alive; returns the API status (``"OK"``)."""
        return self._general.ping(timeout=timeout)


__all__ = ["CapitalClient"]
