"""Tests for session lifecycle and token rotation."""

from __future__ import annotations

import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from capitalcom import CapitalClient
from capitalcom.infrastructure.http import APIError, TokenPair
from capitalcom.infrastructure.observability import get_registry
from capitalcom.infrastructure.observability.metrics import LOGINS

TOKEN_HEADERS = {"X-SECURITY-TOKEN": "KeySecurityToken", "CST": "CST"}

SESSION_ACCOUNT = {
    "accountType": "CFD",
    "accountInfo": {"balance": 1000.0, "deposit": 0, "profitLoss": 0, "available": 1000.0},
    "currencyIsoCode": "USD",
    "currentAccountId": "12345678",
    "clientId": "87654321",
    "timezoneOffset": 1,
}


class TestLogin:
    """Tests for creating a session."""

    def test_login_then_ping_with_rotated_tokens(self, client, fake_api) -> None:
        fake_api.add("POST", "/session", SESSION_ACCOUNT, headers=TOKEN_HEADERS)
        fake_api.add(
            "GET",
            "/ping",
            {"status": "OK"},
            headers={"X-SECURITY-TOKEN": "rotated-sec", "CST": "rotated-cst"},
        )

        account = client.login()
        login_request = fake_api.last
        status = client.ping()
        ping_request = fake_api.last

        assert account.current_account_id == "12345678"
        assert account.account_info.available == 1000.0
        assert login_request.headers["X-CAP-API-KEY"] == "apikey"
        assert fake_api.requests[0].body is not None
        assert ping_request.headers["X-SECURITY-TOKEN"] == "KeySecurityToken"
        assert ping_request.headers["CST"] == "CST"
        assert "X-CAP-API-KEY" not in ping_request.headers
        assert status == "OK"
        assert client.tokens.snapshot() == TokenPair("rotated-sec", "rotated-cst")

    def test_login_body_omits_encryption_flag(self, client, fake_api) -> None:
        fake_api.add("POST", "/session", SESSION_ACCOUNT, headers=TOKEN_HEADERS)

        client.session.login("client@example.com", "password")

        assert fake_api.last_json() == {
            "identifier": "client@example.com",
            "password": "password",
        }

    def test_failed_login_keeps_store_empty(self, client, fake_api) -> None:
        fake_api.add(
            "POST", "/session", {"errorCode": "error.invalid.details"}, status=401
        )

        with pytest.raises(APIError) as excinfo:
            client.login()

        assert excinfo.value.error_code == "error.invalid.details"
        assert not client.tokens.is_authenticated
        counter = get_registry().counter(LOGINS)
        assert counter.get({"outcome": "failed", "encrypted": "false"}) == 1

    def test_login_requires_credentials(self, http_session) -> None:
        client = CapitalClient("apikey", session=http_session)

        with pytest.raises(ValueError):
            client.login()

    def test_encrypted_login(self, client, fake_api) -> None:
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        der = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        fake_api.add(
            "GET",
            "/session/encryptionKey",
            {"encryptionKey": base64.b64encode(der).decode(), "timeStamp": 1732881846000},
        )
        fake_api.add("POST", "/session", SESSION_ACCOUNT, headers=TOKEN_HEADERS)

        client.login(encrypt_password=True)

        key_request, login_request = fake_api.requests
        assert key_request.headers["X-CAP-API-KEY"] == "apikey"
        body = fake_api.last_json()
        assert body["encryptedPassword"] is True
        decrypted = private_key.decrypt(
            base64.b64decode(body["password"]), padding.PKCS1v15()
        )
        assert base64.b64decode(decrypted) == b"password|1732881846000"
        assert login_request.headers["X-CAP-API-KEY"] == "apikey"
        counter = get_registry().counter(LOGINS)
        assert counter.get({"outcome": "success", "encrypted": "true"}) == 1


class TestAuthenticatedSession:
    """Tests for calls made with an established session."""

    def test_response_without_tokens_clears_store(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/session", {"clientId": "c", "accountId": "a"})

        details = logged_in.session.details()

        assert details.account_id == "a"
        assert not logged_in.tokens.is_authenticated

    def test_error_response_keeps_tokens(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/ping", {"errorCode": "error.null.client.token"}, status=400)

        with pytest.raises(APIError):
            logged_in.ping()

        assert logged_in.tokens.snapshot() == TokenPair("KeySecurityToken", "CST")

    def test_switch_account(self, logged_in, fake_api) -> None:
        fake_api.add(
            "PUT", "/session", {"dealingEnabled": True}, headers=TOKEN_HEADERS
        )

        status = logged_in.session.switch_account("acc-2")

        assert status.dealing_enabled is True
        assert fake_api.last_json() == {"accountId": "acc-2"}

    def test_logout_clears_tokens(self, logged_in, fake_api) -> None:
        fake_api.add("DELETE", "/session", {"status": "SUCCESS"}, headers=TOKEN_HEADERS)

        assert logged_in.session.logout() == "SUCCESS"
        assert fake_api.last.headers["CST"] == "CST"
        assert not logged_in.tokens.is_authenticated

    def test_time_needs_no_session(self, client, fake_api) -> None:
        fake_api.add("GET", "/time", {"serverTime": 1732881846000})

        server_time = client.time()

        assert server_time.isoformat() == "2024-11-29T12:04:06+00:00"
        assert "X-SECURITY-TOKEN" not in fake_api.last.headers
