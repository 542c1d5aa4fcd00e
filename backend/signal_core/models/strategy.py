"""Strategy configuration, computation and order intent models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StrategyMode(str, Enum):
    """Whether an evaluation may lead to a transmitted order."""

    PAPER = "paper"
    LIVE = "live"


class Action(str, Enum):
    """Trading decision produced by the signal evaluator."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class StrategyConfig(BaseModel):
    """Tunable parameters for one evaluation.

    Bounds (fast 3-200, slow 5-400, capital >= 10, risk 0.1-100) are
    enforced by callers; the pipeline only guards against values that
    break the arithmetic.
    """

    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    timeframe: str
    fast_length: int = Field(alias="fastLength")
    slow_length: int = Field(alias="slowLength")
    capital: float
    risk_percent: float = Field(alias="riskPercent")
    mode: StrategyMode = StrategyMode.PAPER


class StrategyComputation(BaseModel):
    """Result of a single strategy evaluation.

    fast_ma and slow_ma are aligned 1:1 with the input candles; entries
    before the window is full are None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action: Action
    reason: str
    latest_price: float = Field(alias="latestPrice")
    position_size: float = Field(alias="positionSize")
    stop_loss: float | None = Field(default=None, alias="stopLoss")
    take_profit: float | None = Field(default=None, alias="takeProfit")
    fast_ma: list[float | None] = Field(default_factory=list, alias="fastMA")
    slow_ma: list[float | None] = Field(default_factory=list, alias="slowMA")


class OrderIntent(BaseModel):
    """Candidate market order derived from a StrategyComputation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    side: Literal["buy", "sell"]
    type: Literal["market"] = "market"
    size: float
    price: float
    stop_loss: float | None = Field(default=None, alias="stopLoss")
    take_profit: float | None = Field(default=None, alias="takeProfit")
