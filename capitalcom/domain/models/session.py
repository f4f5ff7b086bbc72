"""Session payloads: login, session details, account switching."""

from __future__ import annotations

from pydantic import Field

from .accounts import Account, Balance
from .base import ApiModel
from .timestamps import EpochMillis


class SessionAccount(ApiModel):
    """Account snapshot returned by a successful login."""

    account_type: str = ""
    account_info: Balance = Field(default_factory=Balance)
    currency_iso_code: str = ""
    currency_symbol: str = ""
    current_account_id: str = ""
    streaming_host: str = ""
    accounts: list[Account] = Field(default_factory=list)
    client_id: str = ""
    timezone_offset: int = 0
    has_active_demo_accounts: bool = False
    has_active_live_accounts: bool = False
    trailing_stops_enabled: bool = False


class EncryptionKey(ApiModel):
    """Server-issued RSA key (base64 DER) and the time it was issued."""

    encryption_key: str
    time_stamp: EpochMillis


class SessionData(ApiModel):
    client_id: str = ""
    account_id: str = ""
    timezone_offset: int = 0
    locale: str = ""
    currency: str = ""
    stream_endpoint: str = ""


class AccountStatus(ApiModel):
    trailing_stops_enabled: bool = False
    dealing_enabled: bool = False
    has_active_demo_accounts: bool = False
    has_active_live_accounts: bool = False


class CreateSessionRequest(ApiModel):
    identifier: str
    password: str
    # Omitted from the body unless the password was encrypted.
    encrypted_password: bool | None = None


class SwitchAccountRequest(ApiModel):
    account_id: str


__all__ = [
    "AccountStatus",
    "CreateSessionRequest",
    "EncryptionKey",
    "SessionAccount",
    "SessionData",
    "SwitchAccountRequest",
]
