"""SMA Crossover strategy constants and intermediate results."""

from dataclasses import dataclass

from signal_core.models import Action

SMA_CROSSOVER_STRATEGY_NAME = "sma_crossover"

# Stop/take multipliers applied to recent extremes and the latest close
BUY_STOP_MULT = 0.99
BUY_TAKE_MULT = 1.03
SELL_STOP_MULT = 1.01
SELL_TAKE_MULT = 0.97

SIZE_DECIMALS = 6
PRICE_DECIMALS = 2


@dataclass(frozen=True)
class Signal:
    """Decision taken at the last candle.

    Attributes:
        action: buy, sell or hold.
        reason: Human-readable rationale.
        crossover: True when the decision comes from a fresh crossover
            rather than a continuation.
    """

    action: Action
    reason: str
    crossover: bool = False


@dataclass(frozen=True)
class RiskAssessment:
    """Position size and protective levels for one decision."""

    position_size: float
    stop_loss: float | None = None
    take_profit: float | None = None
