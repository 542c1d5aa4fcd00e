"""Data models shared by the strategy pipeline and the trading app."""

from signal_core.models.candle import Candle
from signal_core.models.strategy import (
    Action,
    OrderIntent,
    StrategyComputation,
    StrategyConfig,
    StrategyMode,
)

__all__ = [
    "Action",
    "Candle",
    "OrderIntent",
    "StrategyComputation",
    "StrategyConfig",
    "StrategyMode",
]
