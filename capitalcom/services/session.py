"""Session lifecycle: login, details, account switching and logout."""

from __future__ import annotations

from capitalcom.domain.models import (
    AccountStatus,
    CreateSessionRequest,
    EncryptionKey,
    SessionAccount,
    SessionData,
    StatusResponse,
    SwitchAccountRequest,
)
from capitalcom.infrastructure.http import (
    HEADER_API_KEY,
    CapitalComError,
    CapitalHttpClient,
    SessionTokens,
)
from capitalcom.infrastructure.observability import record_login
from capitalcom.infrastructure.security import encrypt_password

from .base import BaseService


class SessionService(BaseService):
    """Creates and manages the trading session.

    Login and the encryption key request authenticate with the API key;
    everything else uses the rotating session tokens.
    """

    def __init__(
        self, http: CapitalHttpClient, tokens: SessionTokens, api_key: str
    ) -> None:
        super().__init__(http, tokens)
        self._api_key = api_key

    def _api_key_headers(self) -> dict[str, str]:
        return {HEADER_API_KEY: self._api_key}

    def encryption_key(self, *, timeout: float | None = None) -> EncryptionKey:
        """Fetch a fresh key for :func:`encrypt_password`. It is valid briefly."""
        response = self._http.get(
            "/session/encryptionKey",
            EncryptionKey,
            headers=self._api_key_headers(),
            timeout=timeout,
        )
        return response.payload

    def login(
        self,
        identifier: str,
        password: str,
        *,
        encrypted: bool = False,
        timeout: float | None = None,
    ) -> SessionAccount:
        """Create a session and store the tokens it returns.

        Args:
            identifier: Login identifier (e-mail).
            password: Plain password, or an already encrypted one when
                ``encrypted`` is true.
            encrypted: Whether ``password`` was produced by
                :func:`encrypt_password`.
            timeout: Per-call timeout in seconds.
        """
        request = CreateSessionRequest(
            identifier=identifier,
            password=password,
            encrypted_password=True if encrypted else None,
        )
        try:
            response = self._http.post(
                "/session",
                SessionAccount,
                body=request,
                headers=self._api_key_headers(),
                timeout=timeout,
            )
        except CapitalComError:
            record_login("failed", encrypted)
            raise
        record_login("success", encrypted)

        self._tokens.update(response.headers)
        if not self._tokens.is_authenticated:
            self._logger.warning("login response carried no session tokens")
        self._logger.info(
            "logged in to account %s", response.payload.current_account_id
        )
        return response.payload

    def login_encrypted(
        self, identifier: str, password: str, *, timeout: float | None = None
    ) -> SessionAccount:
        """Fetch an encryption key, encrypt ``password`` with it and log in."""
        key = self.encryption_key(timeout=timeout)
        encrypted_password = encrypt_password(password, key)
        return self.login(
            identifier, encrypted_password, encrypted=True, timeout=timeout
        )

    def details(self, *, timeout: float | None = None) -> SessionData:
        return self._authenticated("GET", "/session", SessionData, timeout=timeout)

    def switch_account(
        self, account_id: str, *, timeout: float | None = None
    ) -> AccountStatus:
        """Make ``account_id`` the active account of the session."""
        return self._authenticated(
            "PUT",
            "/session",
            AccountStatus,
            body=SwitchAccountRequest(account_id=account_id),
            timeout=timeout,
        )

    def logout(self, *, timeout: float | None = None) -> str:
        """End the session. The token store is cleared on success."""
        status = self._authenticated(
            "DELETE", "/session", StatusResponse, timeout=timeout
        ).status
        self._tokens.clear()
        self._logger.info("logged out")
        return status


__all__ = ["SessionService"]
