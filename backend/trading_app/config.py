"""Application configuration."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from signal_core.models import StrategyConfig, StrategyMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Exchange (ccxt)
    exchange: str = Field(
        "binance", validation_alias=AliasChoices("CRYPTO_EXCHANGE", "exchange")
    )
    api_key: str = Field(
        "", validation_alias=AliasChoices("CRYPTO_API_KEY", "api_key")
    )
    api_secret: str = Field(
        "", validation_alias=AliasChoices("CRYPTO_API_SECRET", "api_secret")
    )
    api_password: str = Field(
        "", validation_alias=AliasChoices("CRYPTO_API_PASSWORD", "api_password")
    )
    sandbox: bool = Field(
        False, validation_alias=AliasChoices("CRYPTO_SANDBOX", "sandbox")
    )

    # Execution gate: both must allow live before an order is transmitted
    trading_mode: StrategyMode = StrategyMode.PAPER
    enable_live_trading: bool = False

    # Market data
    default_symbol: str = "BTC/USDT"
    default_timeframe: str = "1h"
    market_data_limit: int = 200

    # Periodic re-evaluation
    auto_evaluate: bool = False
    auto_interval_minutes: float = 5.0
    auto_fast_length: int = 21
    auto_slow_length: int = 55
    auto_capital: float = 1000.0
    auto_risk_percent: float = 2.0
    auto_mode: StrategyMode = StrategyMode.PAPER

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def auto_strategy_config(self) -> StrategyConfig:
        """Strategy parameters for the periodic evaluator."""
        return StrategyConfig(
            symbol=self.default_symbol,
            timeframe=self.default_timeframe,
            fast_length=self.auto_fast_length,
            slow_length=self.auto_slow_length,
            capital=self.auto_capital,
            risk_percent=self.auto_risk_percent,
            mode=self.auto_mode,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
