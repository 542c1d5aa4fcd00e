"""Tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from signal_core.models import Candle
from trading_app.config import Settings
from trading_app.errors import UpstreamFetchError
from trading_app.api.routes import parse_limit
from trading_app.main import create_app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_candles(n: int = 60) -> list[Candle]:
    return [
        Candle(
            timestamp=1_700_000_000_000 + i * 3_600_000,
            open=100.0 + i,
            high=101.0 + i,
            low=99.0 + i,
            close=100.0 + i,
            volume=1.0,
        )
        for i in range(n)
    ]


class FakeVenue:
    """In-memory venue recording requests."""

    def __init__(self, candles=None, has_credentials=False, balance=None, error=None):
        self.candles = _make_candles() if candles is None else candles
        self.has_credentials = has_credentials
        self.balance = balance or {}
        self.error = error
        self.requests: list[tuple[str, str, int]] = []
        self.orders: list = []

    async def fetch_candles(self, symbol, timeframe, limit):
        self.requests.append((symbol, timeframe, limit))
        if self.error:
            raise self.error
        return self.candles

    async def fetch_balance(self):
        return self.balance

    async def submit_order(self, symbol, order):
        self.orders.append((symbol, order))
        return {"id": f"order-{len(self.orders)}", "status": "closed"}


def _client(venue: FakeVenue, **settings_kwargs) -> TestClient:
    settings = Settings(_env_file=None, **settings_kwargs)
    return TestClient(create_app(settings=settings, venue=venue))


STRATEGY_PAYLOAD = {
    "symbol": "BTC/USDT",
    "timeframe": "1h",
    "fastLength": 5,
    "slowLength": 20,
    "capital": 1000,
    "riskPercent": 2,
}


# ---------------------------------------------------------------------------
# /api/strategy
# ---------------------------------------------------------------------------

class TestStrategyRoute:
    def test_paper_evaluation(self):
        venue = FakeVenue()
        with _client(venue) as client:
            response = client.post("/api/strategy", json=STRATEGY_PAYLOAD)

        assert response.status_code == 200
        data = response.json()
        assert data["strategy"]["action"] == "buy"
        assert data["strategy"]["latestPrice"] == 159.0
        assert len(data["strategy"]["fastMA"]) == 60
        assert data["suggestion"]["side"] == "buy"
        assert data["execution"] is None
        assert data["meta"]["candlesUsed"] == 60
        assert data["meta"]["liveTrading"] is False
        assert venue.requests == [("BTC/USDT", "1h", 200)]
        assert venue.orders == []

    def test_numeric_strings_are_coerced(self):
        payload = dict(STRATEGY_PAYLOAD, fastLength="5", capital="1000")
        with _client(FakeVenue()) as client:
            response = client.post("/api/strategy", json=payload)

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "field,value",
        [
            ("fastLength", 2),
            ("fastLength", 201),
            ("slowLength", 4),
            ("capital", 5),
            ("riskPercent", 0.05),
            ("riskPercent", 101),
            ("symbol", ""),
            ("mode", "yolo"),
        ],
    )
    def test_out_of_bounds_payload(self, field, value):
        payload = dict(STRATEGY_PAYLOAD, **{field: value})
        with _client(FakeVenue()) as client:
            response = client.post("/api/strategy", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request payload"
        assert response.json()["issues"]

    def test_malformed_json(self):
        with _client(FakeVenue()) as client:
            response = client.post(
                "/api/strategy",
                content="{not json",
                headers={"Content-Type": "application/json"},
            )

        assert response.status_code == 400
        assert response.json() == {"error": "Malformed JSON payload supplied."}

    def test_no_data(self):
        with _client(FakeVenue(candles=[])) as client:
            response = client.post("/api/strategy", json=STRATEGY_PAYLOAD)

        assert response.status_code == 422
        assert "No OHLCV data" in response.json()["error"]

    def test_upstream_failure(self):
        venue = FakeVenue(error=UpstreamFetchError("Failed to fetch market data: down"))
        with _client(venue) as client:
            response = client.post("/api/strategy", json=STRATEGY_PAYLOAD)

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to fetch market data: down"}

    def test_live_request_skipped_by_default(self):
        venue = FakeVenue(has_credentials=True)
        with _client(venue) as client:
            response = client.post(
                "/api/strategy", json=dict(STRATEGY_PAYLOAD, mode="live")
            )

        data = response.json()
        assert data["execution"]["status"] == "skipped"
        assert data["meta"]["liveTrading"] is True
        assert venue.orders == []

    def test_live_request_submitted_when_enabled(self):
        venue = FakeVenue(has_credentials=True)
        with _client(venue, trading_mode="live", enable_live_trading=True) as client:
            response = client.post(
                "/api/strategy", json=dict(STRATEGY_PAYLOAD, mode="live")
            )

        data = response.json()
        assert data["execution"]["status"] == "submitted"
        assert data["execution"]["orderId"] == "order-1"
        assert len(venue.orders) == 1

    def test_live_without_credentials_fails_startup(self):
        app = create_app(
            settings=Settings(_env_file=None, trading_mode="live", enable_live_trading=True),
            venue=FakeVenue(has_credentials=False),
        )
        with pytest.raises(Exception, match="CRYPTO_API_KEY"):
            with TestClient(app):
                pass


# ---------------------------------------------------------------------------
# /api/market-data
# ---------------------------------------------------------------------------

class TestMarketDataRoute:
    def test_defaults(self):
        venue = FakeVenue(candles=_make_candles(3))
        with _client(venue) as client:
            response = client.get("/api/market-data")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 3
        assert response.json()["data"][0] == {
            "timestamp": 1_700_000_000_000,
            "open": 100.0,
            "high": 101.0,
            "low": 99.0,
            "close": 100.0,
            "volume": 1.0,
        }
        assert venue.requests == [("BTC/USDT", "1h", 200)]

    def test_explicit_params(self):
        venue = FakeVenue()
        with _client(venue) as client:
            client.get("/api/market-data", params={"symbol": "ETH/USDT", "timeframe": "5m", "limit": "120"})

        assert venue.requests == [("ETH/USDT", "5m", 120)]

    def test_unparsable_limit_uses_default(self):
        venue = FakeVenue()
        with _client(venue) as client:
            response = client.get("/api/market-data", params={"limit": "lots"})

        assert response.status_code == 200
        assert venue.requests[0][2] == 200

    def test_trailing_garbage_after_limit_is_ignored(self):
        venue = FakeVenue()
        with _client(venue) as client:
            response = client.get("/api/market-data", params={"limit": "120abc"})

        assert response.status_code == 200
        assert venue.requests[0][2] == 120

    @pytest.mark.parametrize("limit", ["10", "49", "501", "3.5"])
    def test_out_of_range_limit(self, limit):
        venue = FakeVenue()
        with _client(venue) as client:
            response = client.get("/api/market-data", params={"limit": limit})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid query parameters."}
        assert venue.requests == []


class TestParseLimit:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, 200),
            ("", 200),
            ("lots", 200),
            ("120", 120),
            (" 75 ", 75),
            ("120abc", 120),
            ("3.5", 3),
            ("-60", -60),
        ],
    )
    def test_leading_integer(self, value, expected):
        assert parse_limit(value, 200) == expected


# ---------------------------------------------------------------------------
# /api/account and /api/status
# ---------------------------------------------------------------------------

class TestAccountRoute:
    def test_without_credentials(self):
        with _client(FakeVenue()) as client:
            response = client.get("/api/account")

        data = response.json()
        assert data["authenticated"] is False
        assert data["balances"] == []
        assert "not configured" in data["message"]

    def test_with_credentials(self):
        venue = FakeVenue(
            has_credentials=True,
            balance={"total": {"BTC": 1.0, "ETH": 0}, "free": {"BTC": 0.5}, "used": {"BTC": 0.5}},
        )
        with _client(venue) as client:
            response = client.get("/api/account")

        assert response.json() == {
            "authenticated": True,
            "balances": [{"asset": "BTC", "total": 1.0, "free": 0.5, "used": 0.5}],
        }


class TestStatusRoute:
    def test_status(self):
        with _client(FakeVenue()) as client:
            response = client.get("/api/status")

        data = response.json()
        assert data["status"] == "running"
        assert data["trading_mode"] == "paper"
        assert data["live_trading_enabled"] is False
        assert data["auto"] == {"enabled": False}
        assert data["strategy"] == {"name": "sma_crossover", "version": "1.0.0"}

    def test_status_with_auto_evaluation(self):
        with _client(FakeVenue(), auto_evaluate=True, auto_interval_minutes=60) as client:
            response = client.get("/api/status")

        auto = response.json()["auto"]
        assert auto["enabled"] is True
        assert auto["interval_seconds"] == 3600

    def test_health(self):
        with _client(FakeVenue()) as client:
            assert client.get("/health").json() == {"status": "healthy"}


# ---------------------------------------------------------------------------
# Application module
# ---------------------------------------------------------------------------

class TestAppModule:
    def test_import_does_not_read_environment(self, monkeypatch):
        import importlib

        import trading_app.main as main_module

        monkeypatch.setenv("TRADING_MODE", "not-a-mode")
        reloaded = importlib.reload(main_module)

        assert not hasattr(reloaded, "app")
        assert callable(reloaded.create_app)

    def test_main_runs_app_factory(self, monkeypatch):
        import uvicorn

        import trading_app.main as main_module

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
        monkeypatch.setattr(
            main_module, "get_settings", lambda: Settings(_env_file=None, port=9001)
        )

        main_module.main()

        target, kwargs = calls[0]
        assert target == "trading_app.main:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9001
