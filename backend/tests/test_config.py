"""Tests for application settings."""

from signal_core.models import StrategyMode
from trading_app.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CRYPTO_EXCHANGE", "CRYPTO_API_KEY", "CRYPTO_API_SECRET",
                     "EXCHANGE", "API_KEY", "API_SECRET",
                     "TRADING_MODE", "ENABLE_LIVE_TRADING"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.exchange == "binance"
        assert settings.has_credentials is False
        assert settings.trading_mode == StrategyMode.PAPER
        assert settings.enable_live_trading is False
        assert settings.default_symbol == "BTC/USDT"
        assert settings.default_timeframe == "1h"
        assert settings.auto_evaluate is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CRYPTO_EXCHANGE", "kraken")
        monkeypatch.setenv("CRYPTO_API_KEY", "key")
        monkeypatch.setenv("CRYPTO_API_SECRET", "secret")
        monkeypatch.setenv("CRYPTO_SANDBOX", "true")
        monkeypatch.setenv("TRADING_MODE", "live")
        monkeypatch.setenv("ENABLE_LIVE_TRADING", "true")

        settings = Settings(_env_file=None)

        assert settings.exchange == "kraken"
        assert settings.has_credentials is True
        assert settings.sandbox is True
        assert settings.trading_mode == StrategyMode.LIVE
        assert settings.enable_live_trading is True

    def test_auto_strategy_config(self):
        settings = Settings(
            _env_file=None,
            default_symbol="SOL/USDT",
            default_timeframe="4h",
            auto_fast_length=9,
            auto_slow_length=21,
            auto_risk_percent=1.0,
        )

        config = settings.auto_strategy_config()

        assert config.symbol == "SOL/USDT"
        assert config.timeframe == "4h"
        assert config.fast_length == 9
        assert config.slow_length == 21
        assert config.capital == 1000.0
        assert config.risk_percent == 1.0
        assert config.mode == StrategyMode.PAPER

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
