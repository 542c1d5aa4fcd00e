"""SMA Crossover strategy package."""

from signal_core.strategy.sma_crossover.generator import (
    SmaCrossoverStrategy,
    evaluate_strategy,
)
from signal_core.strategy.sma_crossover.models import (
    RiskAssessment,
    Signal,
    SMA_CROSSOVER_STRATEGY_NAME,
)
from signal_core.strategy.sma_crossover.order import build_order
from signal_core.strategy.sma_crossover.risk import (
    position_size,
    risk_fraction,
    size_position,
)
from signal_core.strategy.sma_crossover.signal import evaluate_signal

__all__ = [
    "SmaCrossoverStrategy",
    "evaluate_strategy",
    "evaluate_signal",
    "size_position",
    "position_size",
    "risk_fraction",
    "build_order",
    "RiskAssessment",
    "Signal",
    "SMA_CROSSOVER_STRATEGY_NAME",
]
