"""Response and record models for the trading app."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from signal_core.models import OrderIntent, StrategyComputation, StrategyMode


class ExecutionResult(BaseModel):
    """What the execution gate did with an order intent."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["submitted", "skipped"]
    order_id: Optional[str] = Field(default=None, alias="orderId")
    raw: Optional[dict[str, Any]] = None
    reason: Optional[str] = None


class EvaluationMeta(BaseModel):
    """Metadata attached to every evaluation record."""

    model_config = ConfigDict(populate_by_name=True)

    evaluated_at: int = Field(alias="evaluatedAt")  # ms epoch
    symbol: str
    timeframe: str
    candles_used: int = Field(alias="candlesUsed")
    mode: StrategyMode
    live_trading: bool = Field(alias="liveTrading")


class EvaluationRecord(BaseModel):
    """Flat, serializable result of one evaluation cycle."""

    strategy: StrategyComputation
    suggestion: Optional[OrderIntent] = None
    execution: Optional[ExecutionResult] = None
    meta: EvaluationMeta

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class BalanceSummary(BaseModel):
    """One asset's balance."""

    asset: str
    total: float
    free: float = 0.0
    used: float = 0.0


class AccountOverview(BaseModel):
    """Balances shown to the user, or why none are shown."""

    authenticated: bool
    balances: list[BalanceSummary] = Field(default_factory=list)
    message: Optional[str] = None
