"""SMA Crossover strategy implementation.

Simple trend-following strategy over close prices:
- Fast SMA crosses above Slow SMA -> BUY
- Fast SMA crosses below Slow SMA -> SELL
- No fresh cross: follow the side the fast SMA is on

Each evaluation is a single pass over the candles it is given:
candles -> SMA(fast), SMA(slow) -> signal -> sizing -> computation.
Nothing is carried between calls.

This module is pure business logic with no I/O dependencies.
"""

import logging
from typing import Sequence

from signal_core.errors import NoDataError
from signal_core.indicators import sma
from signal_core.models import (
    Candle,
    OrderIntent,
    StrategyComputation,
    StrategyConfig,
)
from signal_core.strategy.sma_crossover.models import SMA_CROSSOVER_STRATEGY_NAME
from signal_core.strategy.sma_crossover.order import build_order
from signal_core.strategy.sma_crossover.risk import size_position
from signal_core.strategy.sma_crossover.signal import evaluate_signal

logger = logging.getLogger(__name__)


def evaluate_strategy(
    candles: Sequence[Candle],
    config: StrategyConfig,
) -> StrategyComputation:
    """Run the full pipeline over an ordered candle sequence.

    Args:
        candles: Candles in ascending timestamp order
        config: Strategy parameters

    Returns:
        StrategyComputation for the last candle

    Raises:
        NoDataError: If candles is empty
        InvalidPeriodError: If fast_length or slow_length <= 0
    """
    if len(candles) == 0:
        raise NoDataError()

    closes = [c.close for c in candles]
    fast_ma = sma(closes, config.fast_length)
    slow_ma = sma(closes, config.slow_length)

    signal = evaluate_signal(fast_ma, slow_ma)
    latest_price = closes[-1]

    risk = size_position(
        signal.action,
        config.capital,
        config.risk_percent,
        latest_price,
        candles,
        config.slow_length,
    )

    logger.info(
        f"SMA {config.symbol} {config.timeframe}: {signal.action.value.upper()} "
        f"@ {latest_price} size={risk.position_size} ({signal.reason})"
    )

    return StrategyComputation(
        action=signal.action,
        reason=signal.reason,
        latest_price=latest_price,
        position_size=risk.position_size,
        stop_loss=risk.stop_loss,
        take_profit=risk.take_profit,
        fast_ma=fast_ma,
        slow_ma=slow_ma,
    )


class SmaCrossoverStrategy:
    """SMA Crossover trend-following strategy bound to one configuration.

    Signal Logic:
    - BUY: Fast SMA crosses above Slow SMA, or stays above it
    - SELL: Fast SMA crosses below Slow SMA, or stays below it

    Sizing:
    - size = capital * risk% / price
    - SL/TP from recent extremes and the latest close
    """

    name = SMA_CROSSOVER_STRATEGY_NAME
    version = "1.0.0"

    def __init__(self, config: StrategyConfig):
        self.config = config

    def evaluate(self, candles: Sequence[Candle]) -> StrategyComputation:
        return evaluate_strategy(candles, self.config)

    def build_order(self, computation: StrategyComputation) -> OrderIntent | None:
        return build_order(computation)
