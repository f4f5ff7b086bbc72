"""Accounts, preferences and account history."""

from __future__ import annotations

from capitalcom.domain.models import (
    Account,
    AccountList,
    Activity,
    ActivityList,
    ActivityParams,
    Preferences,
    StatusResponse,
    TopUpRequest,
    TopUpResponse,
    Transaction,
    TransactionList,
    TransactionParams,
    UpdateLeverages,
    UpdatePreferencesRequest,
)

from .base import BaseService


class AccountService(BaseService):
    """Operations on the accounts of the logged-in client."""

    def list(self, *, timeout: float | None = None) -> list[Account]:
        return self._authenticated(
            "GET", "/accounts", AccountList, timeout=timeout
        ).accounts

    def preferences(self, *, timeout: float | None = None) -> Preferences:
        return self._authenticated(
            "GET", "/accounts/preferences", Preferences, timeout=timeout
        )

    def update_preferences(
        self,
        leverages: UpdateLeverages | None = None,
        hedging_mode: bool = False,
        *,
        timeout: float | None = None,
    ) -> str:
        """Change leverages and/or hedging mode; returns the API status."""
        request = UpdatePreferencesRequest(
            leverages=leverages, hedging_mode=hedging_mode
        )
        return self._authenticated(
            "PUT",
            "/accounts/preferences",
            StatusResponse,
            body=request,
            timeout=timeout,
        ).status

    def activity_history(
        self,
        params: ActivityParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Activity]:
        query = (params or ActivityParams()).to_query()
        return self._authenticated(
            "GET", "/history/activity", ActivityList, params=query, timeout=timeout
        ).activities

    def transaction_history(
        self,
        params: TransactionParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Transaction]:
        query = (params or TransactionParams()).to_query()
        return self._authenticated(
            "GET",
            "/history/transactions",
            TransactionList,
            params=query,
            timeout=timeout,
        ).transactions

    def top_up_demo(self, amount: float, *, timeout: float | None = None) -> bool:
        """Adjust the balance of a demo account by ``amount``; True on success."""
        response = self._authenticated(
            "POST",
            "/accounts/topUp",
            TopUpResponse,
            body=TopUpRequest(amount=amount),
            timeout=timeout,
        )
        return response.successful


__all__ = ["AccountService"]
