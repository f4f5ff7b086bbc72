"""Tests for market data, prices, sentiment, watchlists and accounts."""

from __future__ import annotations

from datetime import datetime

from capitalcom.domain.models import (
    ActivityParams,
    ActivitySource,
    ActivityStatus,
    ActivityType,
    MarketSearchParams,
    PricesParams,
    Resolution,
    TransactionParams,
    TransactionType,
    UpdateLeverages,
)

ROTATED = {"X-SECURITY-TOKEN": "sec-2", "CST": "cst-2"}

MARKET = {
    "epic": "SILVER",
    "instrumentName": "Silver",
    "instrumentType": "COMMODITIES",
    "marketStatus": "TRADEABLE",
    "bid": 30.1,
    "offer": 30.2,
    "updateTime": "2024-11-29T13:04:06",
    "updateTimeUTC": "2024-11-29T12:04:06",
}


class TestMarketService:
    """Tests for /marketnavigation and /markets."""

    def test_categories(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET", "/marketnavigation", {"nodes": [{"id": "hierarchy_v1.commodities", "name": "Commodities"}]},
            headers=ROTATED,
        )

        nodes = logged_in.markets.categories()

        assert [node.name for node in nodes] == ["Commodities"]

    def test_subcategories_with_limit(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/marketnavigation/hierarchy_v1.commodities", {"nodes": []})

        logged_in.markets.subcategories("hierarchy_v1.commodities", limit=50)

        assert fake_api.last_query() == {"limit": ["50"]}

    def test_search_by_epics(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/markets", {"markets": [MARKET]}, headers=ROTATED)

        markets = logged_in.markets.details(MarketSearchParams(epics=["SILVER", "GOLD"]))

        assert markets[0].bid == 30.1
        assert fake_api.last_query() == {"epics": ["SILVER,GOLD"]}
        assert "%2C" in fake_api.last.url
        assert "%252C" not in fake_api.last.url

    def test_detail(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/markets/SILVER",
            {
                "instrument": {"epic": "SILVER", "name": "Silver", "lotSize": 1},
                "dealingRules": {"minDealSize": {"unit": "POINTS", "value": 0.01}},
                "snapshot": {"marketStatus": "TRADEABLE", "updateTime": "2024/11/29 13:04:06"},
            },
        )

        details = logged_in.markets.detail("SILVER")

        assert details.instrument.name == "Silver"
        assert details.dealing_rules.min_deal_size.value == 0.01
        assert details.snapshot.update_time == "2024/11/29 13:04:06"


class TestPriceService:
    """Tests for /prices."""

    def test_history(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/prices/SILVER",
            {
                "prices": [
                    {
                        "snapshotTime": "2024-11-29T13:00:00",
                        "snapshotTimeUTC": "2024-11-29T12:00:00",
                        "openPrice": {"bid": 30.0, "ask": 30.1},
                        "closePrice": {"bid": 30.2, "ask": 30.3},
                        "highPrice": {"bid": 30.4, "ask": 30.5},
                        "lowPrice": {"bid": 29.9, "ask": 30.0},
                        "lastTradedVolume": 120,
                    }
                ],
                "instrumentType": "COMMODITIES",
            },
            headers=ROTATED,
        )

        history = logged_in.prices.history(
            "SILVER",
            PricesParams(resolution=Resolution.HOUR, max=1, from_=datetime(2024, 11, 29, 12)),
        )

        assert history.prices[0].close_price.bid == 30.2
        assert history.prices[0].snapshot_time_utc == datetime(2024, 11, 29, 12)
        assert fake_api.last_query() == {
            "resolution": ["HOUR"],
            "max": ["1"],
            "from": ["2024-11-29T12:00:00"],
        }


class TestSentimentService:
    """Tests for /clientsentiment."""

    def test_list_joins_market_ids(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/clientsentiment",
            {
                "clientSentiments": [
                    {"marketId": "SILVER", "longPositionPercentage": 60, "shortPositionPercentage": 40},
                    {"marketId": "GOLD", "longPositionPercentage": 55, "shortPositionPercentage": 45},
                ]
            },
        )

        sentiments = logged_in.sentiment.list(["SILVER", "GOLD"])

        assert [s.market_id for s in sentiments] == ["SILVER", "GOLD"]
        assert fake_api.last_query() == {"marketIds": ["SILVER,GOLD"]}

    def test_get(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/clientsentiment/SILVER",
            {"marketId": "SILVER", "longPositionPercentage": 60, "shortPositionPercentage": 40},
        )

        assert logged_in.sentiment.get("SILVER").long_position_percentage == 60


class TestWatchlistService:
    """Tests for /watchlists."""

    def test_create(self, logged_in, fake_api) -> None:
        fake_api.add(
            "POST", "/watchlists", {"watchlistId": "w1", "status": "SUCCESS"}, headers=ROTATED
        )

        response = logged_in.watchlists.create("Metals", ["SILVER"])

        assert response.watchlist_id == "w1"
        assert fake_api.last_json() == {"name": "Metals", "epics": ["SILVER"]}

    def test_get_returns_markets(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/watchlists/w1", {"markets": [MARKET]})

        (market,) = logged_in.watchlists.get("w1")

        assert market.epic == "SILVER"

    def test_add_and_remove_market(self, logged_in, fake_api) -> None:
        fake_api.add("PUT", "/watchlists/w1", {"status": "SUCCESS"}, headers=ROTATED)
        fake_api.add("DELETE", "/watchlists/w1/SILVER", {"status": "SUCCESS"}, headers=ROTATED)

        assert logged_in.watchlists.add_market("w1", "SILVER") == "SUCCESS"
        assert fake_api.last_json() == {"epic": "SILVER"}
        assert logged_in.watchlists.remove_market("w1", "SILVER") == "SUCCESS"
        assert fake_api.last.method == "DELETE"


class TestAccountService:
    """Tests for /accounts and /history."""

    def test_list(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/accounts",
            {
                "accounts": [
                    {
                        "accountId": "acc-1",
                        "accountName": "USD",
                        "preferred": True,
                        "accountType": "CFD",
                        "balance": {"balance": 1000, "deposit": 1000, "profitLoss": 0, "available": 900},
                        "currency": "USD",
                    }
                ]
            },
            headers=ROTATED,
        )

        (account,) = logged_in.accounts.list()

        assert account.preferred is True
        assert account.balance.available == 900

    def test_update_preferences(self, logged_in, fake_api) -> None:
        fake_api.add("PUT", "/accounts/preferences", {"status": "SUCCESS"}, headers=ROTATED)

        status = logged_in.accounts.update_preferences(UpdateLeverages(indices=20))

        assert status == "SUCCESS"
        assert fake_api.last_json() == {"leverages": {"INDICES": 20}, "hedgingMode": False}

    def test_activity_history(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/history/activity",
            {
                "activities": [
                    {
                        "date": "2024-11-29T13:04:06",
                        "dateUTC": "2024-11-29T12:04:06",
                        "epic": "SILVER",
                        "dealId": "deal-1",
                        "source": "USER",
                        "type": "POSITION",
                        "status": "ACCEPTED",
                    }
                ]
            },
        )

        (activity,) = logged_in.accounts.activity_history(
            ActivityParams(last_period=600, detailed=True)
        )

        assert activity.date_utc == datetime(2024, 11, 29, 12, 4, 6)
        assert activity.source == ActivitySource.USER
        assert activity.type == ActivityType.POSITION
        assert fake_api.last_query() == {"lastPeriod": ["600"], "detailed": ["true"]}

    def test_top_up_demo(self, logged_in, fake_api) -> None:
        fake_api.add("POST", "/accounts/topUp", {"successful": True})

        assert logged_in.accounts.top_up_demo(1000) is True
        assert fake_api.last_json() == {"amount": 1000}

    def test_top_up_demo_reports_failure(self, logged_in, fake_api) -> None:
        fake_api.add("POST", "/accounts/topUp", {"successful": False})

        assert logged_in.accounts.top_up_demo(-5) is False

    def test_activity_filter_from_enum_values(self, logged_in, fake_api) -> None:
        fake_api.add("GET", "/history/activity", {"activities": []})
        expression = (
            f"source!={ActivitySource.DEALER.value};"
            f"type=={ActivityType.POSITION.value};"
            f"status=={ActivityStatus.ACCEPTED.value}"
        )

        assert logged_in.accounts.activity_history(ActivityParams(filter=expression)) == []
        assert fake_api.last_query() == {
            "filter": ["source!=DEALER;type==POSITION;status==ACCEPTED"]
        }


class TestRemainingEndpoints:
    """Paths and decoding for the less common endpoints."""

    def test_watchlist_list_and_delete(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/watchlists",
            {"watchlists": [{"id": "w1", "name": "Metals", "editable": True}]},
            headers=ROTATED,
        )
        fake_api.add("DELETE", "/watchlists/w1", {"status": "SUCCESS"}, headers=ROTATED)

        (watchlist,) = logged_in.watchlists.list()

        assert watchlist.editable is True
        assert logged_in.watchlists.delete(watchlist.id) == "SUCCESS"

    def test_preferences(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/accounts/preferences",
            {
                "hedgingMode": True,
                "leverages": {"SHARES": {"current": 5, "available": [1, 2, 5]}},
            },
        )

        preferences = logged_in.accounts.preferences()

        assert preferences.hedging_mode is True
        assert preferences.leverages.shares.available == [1, 2, 5]

    def test_transaction_history(self, logged_in, fake_api) -> None:
        fake_api.add(
            "GET",
            "/history/transactions",
            {
                "transactions": [
                    {
                        "date": "2024-11-29T13:04:06",
                        "dateUTC": "2024-11-29T12:04:06",
                        "instrumentName": "Silver",
                        "transactionType": "TRADE",
                        "reference": "ref-1",
                        "size": "-1.25",
                        "currency": "USD",
                        "status": "PROCESSED",
                    }
                ]
            },
        )

        (transaction,) = logged_in.accounts.transaction_history(
            TransactionParams(from_=datetime(2024, 11, 29), type=TransactionType.TRADE)
        )

        assert transaction.size == "-1.25"
        assert fake_api.last_query() == {"from": ["2024-11-29T00:00:00"], "type": ["TRADE"]}

    def test_encryption_key_uses_api_key(self, client, fake_api) -> None:
        fake_api.add("GET", "/session/encryptionKey", {"encryptionKey": "abc", "timeStamp": 0})

        key = client.session.encryption_key()

        assert key.encryption_key == "abc"
        assert fake_api.last.headers["X-CAP-API-KEY"] == "apikey"
