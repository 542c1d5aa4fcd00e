"""Strategy protocol defining the interface strategies implement.

Strategies are stateless: every call to evaluate() works only on the
candles it is given, so one instance can serve concurrent callers.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from signal_core.models import Candle, OrderIntent, StrategyComputation


@runtime_checkable
class Strategy(Protocol):
    """Protocol that trading strategies must implement."""

    # Identifier and version reported by the status endpoint
    name: str
    version: str

    def evaluate(self, candles: Sequence[Candle]) -> StrategyComputation:
        """Evaluate the strategy over an ordered candle sequence.

        Raises:
            NoDataError: If candles is empty.
            InvalidPeriodError: If a configured period is not positive.
        """
        ...

    def build_order(self, computation: StrategyComputation) -> OrderIntent | None:
        """Turn a computation into an order intent, or None for no order."""
        ...
