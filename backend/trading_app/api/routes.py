"""REST API routes."""

import logging
import re
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from signal_core.models import StrategyConfig, StrategyMode
from signal_core.strategy import MarketDataSource
from trading_app.api.dependencies import (
    get_account_service,
    get_app_settings,
    get_auto_evaluator,
    get_data_source,
    get_strategy_service,
)
from trading_app.config import Settings
from trading_app.services import AccountService, AutoEvaluator, StrategyService

logger = logging.getLogger(__name__)

router = APIRouter()

MIN_MARKET_DATA_LIMIT = 50
MAX_MARKET_DATA_LIMIT = 500

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# Request models
class StrategyRequest(BaseModel):
    """Strategy evaluation request. Numeric strings are coerced."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str = Field(min_length=1)
    timeframe: str = Field(min_length=1)
    fast_length: int = Field(alias="fastLength", ge=3, le=200)
    slow_length: int = Field(alias="slowLength", ge=5, le=400)
    capital: float = Field(ge=10)
    risk_percent: float = Field(alias="riskPercent", ge=0.1, le=100)
    mode: StrategyMode = StrategyMode.PAPER

    def to_config(self) -> StrategyConfig:
        return StrategyConfig(
            symbol=self.symbol,
            timeframe=self.timeframe,
            fast_length=self.fast_length,
            slow_length=self.slow_length,
            capital=self.capital,
            risk_percent=self.risk_percent,
            mode=self.mode,
        )


def parse_limit(value: Optional[str], default: int) -> int:
    """Parse the leading integer of the limit query value.

    "120abc" gives 120 and "3.5" gives 3; a value with no leading digits
    falls back to default.
    """
    match = _LEADING_INT.match(value or "")
    if match is None:
        return default
    return int(match.group(1))


@router.get("/market-data")
async def get_market_data(
    symbol: Optional[str] = Query(None, description="Unified symbol, e.g. BTC/USDT"),
    timeframe: Optional[str] = Query(None, description="Candle interval, e.g. 1h"),
    limit: Optional[str] = Query(None, description="Candles to return (50-500)"),
    settings: Settings = Depends(get_app_settings),
    data_source: MarketDataSource = Depends(get_data_source),
):
    """Get recent candles for a symbol."""
    parsed_limit = parse_limit(limit, settings.market_data_limit)
    if not MIN_MARKET_DATA_LIMIT <= parsed_limit <= MAX_MARKET_DATA_LIMIT:
        return JSONResponse(
            status_code=400, content={"error": "Invalid query parameters."}
        )

    candles = await data_source.fetch_candles(
        symbol or settings.default_symbol,
        timeframe or settings.default_timeframe,
        parsed_limit,
    )
    return {"data": [c.model_dump() for c in candles]}


@router.post("/strategy")
async def run_strategy(
    request: StrategyRequest,
    service: StrategyService = Depends(get_strategy_service),
) -> dict[str, Any]:
    """Evaluate the strategy and gate the resulting order."""
    record = await service.evaluate(request.to_config())
    return record.to_dict()


@router.get("/account")
async def get_account(
    service: AccountService = Depends(get_account_service),
) -> dict[str, Any]:
    """Get non-zero account balances."""
    overview = await service.overview()
    return overview.model_dump(mode="json", exclude_none=True)


@router.get("/status")
async def get_status(
    settings: Settings = Depends(get_app_settings),
    service: StrategyService = Depends(get_strategy_service),
    auto_evaluator: AutoEvaluator | None = Depends(get_auto_evaluator),
) -> dict[str, Any]:
    """Get system status."""
    auto: dict[str, Any] = {"enabled": auto_evaluator is not None}
    if auto_evaluator is not None:
        last = auto_evaluator.last_record
        auto.update(
            running=auto_evaluator.is_running,
            cycles=auto_evaluator.cycles,
            interval_seconds=auto_evaluator.interval_seconds,
            last_action=last.strategy.action.value if last else None,
            last_error=auto_evaluator.last_error,
        )

    return {
        "status": "running",
        "version": "0.1.0",
        "exchange": settings.exchange,
        "strategy": {
            "name": service.strategy_cls.name,
            "version": service.strategy_cls.version,
        },
        "authenticated": settings.has_credentials,
        "trading_mode": settings.trading_mode.value,
        "live_trading_enabled": settings.enable_live_trading,
        "auto": auto,
    }
