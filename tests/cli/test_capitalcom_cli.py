from __future__ import annotations

import pytest
from click.testing import CliRunner

import capitalcom.interfaces.cli.__main__ as cli_main
from capitalcom import CapitalClient
from capitalcom.interfaces.cli import cli

TOKEN_HEADERS = {"X-SECURITY-TOKEN": "KeySecurityToken", "CST": "CST"}

ENV = {
    "CAPITALCOM_API_KEY": "apikey",
    "CAPITALCOM_IDENTIFIER": "client@example.com",
    "CAPITALCOM_PASSWORD": "password",
    "CAPITALCOM_LIVE": "",
    "CAPITALCOM_HOST": "",
    "CAPITALCOM_ENCRYPT_PASSWORD": "",
}


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(cli_main, "configure_logging", lambda *args, **kwargs: None)


@pytest.fixture
def invoke(http_session):
    created: list[CapitalClient] = []

    def factory(settings):
        client = CapitalClient.from_settings(settings, session=http_session)
        created.append(client)
        return client

    def run(*args: str, env: dict[str, str] | None = None):
        runner = CliRunner()
        result = runner.invoke(
            cli, list(args), obj={"client_factory": factory}, env=env or ENV
        )
        return result, created

    return run


def test_time_does_not_log_in(invoke, fake_api) -> None:
    fake_api.add("GET", "/time", {"serverTime": 1732881846000})

    result, _ = invoke("time")

    assert result.exit_code == 0
    assert "2024-11-29T12:04:06+00:00" in result.output
    assert [r.method for r in fake_api.requests] == ["GET"]


def test_ping_logs_in_first(invoke, fake_api) -> None:
    fake_api.add("POST", "/session", {"currentAccountId": "acc-1"}, headers=TOKEN_HEADERS)
    fake_api.add("GET", "/ping", {"status": "OK"}, headers=TOKEN_HEADERS)

    result, _ = invoke("ping")

    assert result.exit_code == 0
    assert "OK" in result.output
    assert fake_api.requests[-1].headers["CST"] == "CST"


def test_live_flag_uses_live_host(invoke, fake_api) -> None:
    fake_api.add("GET", "/time", {"serverTime": 0})

    result, created = invoke("--live", "time")

    assert result.exit_code == 0
    assert created[0].http.host == "https://api-capital.backend-capital.com"


def test_positions_table(invoke, fake_api) -> None:
    fake_api.add("POST", "/session", {}, headers=TOKEN_HEADERS)
    fake_api.add(
        "GET",
        "/positions",
        {
            "positions": [
                {
                    "position": {
                        "createdDate": "2024-11-29T13:04:06",
                        "createdDateUTC": "2024-11-29T12:04:06",
                        "dealId": "deal-1",
                        "size": 1,
                        "direction": "BUY",
                        "level": 30.1,
                        "upl": 0.5,
                    },
                    "market": {
                        "epic": "SILVER",
                        "updateTime": "2024-11-29T13:04:06",
                        "updateTimeUTC": "2024-11-29T12:04:06",
                    },
                }
            ]
        },
        headers=TOKEN_HEADERS,
    )

    result, _ = invoke("positions")

    assert result.exit_code == 0
    assert "deal-1" in result.output
    assert "SILVER" in result.output


def test_empty_watchlists(invoke, fake_api) -> None:
    fake_api.add("POST", "/session", {}, headers=TOKEN_HEADERS)
    fake_api.add("GET", "/watchlists", {"watchlists": []}, headers=TOKEN_HEADERS)

    result, _ = invoke("watchlists")

    assert result.exit_code == 0
    assert "No watchlists found" in result.output


def test_api_error_exits_with_code_1(invoke, fake_api) -> None:
    fake_api.add("POST", "/session", {"errorCode": "error.invalid.details"}, status=401)

    result, created = invoke("accounts")

    assert result.exit_code == 1
    assert "Error: API returned an error" in result.output
    assert len(created) == 1


def test_missing_api_key(invoke) -> None:
    result, _ = invoke("time", env={**ENV, "CAPITALCOM_API_KEY": ""})

    assert result.exit_code == 1
    assert "Missing API key" in result.output


def test_missing_password(invoke) -> None:
    result, _ = invoke("ping", env={**ENV, "CAPITALCOM_PASSWORD": ""})

    assert result.exit_code == 1
    assert "identifier and password" in result.output
