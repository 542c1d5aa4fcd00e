"""Strategy interfaces and the built-in SMA crossover strategy.

Public API:
- Strategy: Protocol that strategies implement
- MarketDataSource / OrderSink / BalanceSource: venue capabilities
- SmaCrossoverStrategy, evaluate_strategy, build_order: the pipeline
"""

from signal_core.strategy.protocol import Strategy
from signal_core.strategy.venue_protocol import (
    BalanceSource,
    MarketDataSource,
    OrderSink,
)
from signal_core.strategy.sma_crossover import (
    SmaCrossoverStrategy,
    build_order,
    evaluate_strategy,
)

__all__ = [
    "Strategy",
    "MarketDataSource",
    "OrderSink",
    "BalanceSource",
    "SmaCrossoverStrategy",
    "build_order",
    "evaluate_strategy",
]
