"""Crossover/continuation classification of fast vs slow SMA.

Decision at the last index, in priority order:
- Bullish crossover: prev fast <= prev slow and fast > slow -> BUY
- Bearish crossover: prev fast >= prev slow and fast < slow -> SELL
- Continuation: fast > slow -> BUY, fast < slow -> SELL
- Otherwise (undefined or equal) -> HOLD

Continuation keeps emitting BUY/SELL on every evaluation for as long as
the trend lasts.
"""

import logging
from typing import Sequence

from signal_core.indicators import last_pair
from signal_core.models import Action
from signal_core.numeric import format_price
from signal_core.strategy.sma_crossover.models import Signal

logger = logging.getLogger(__name__)

HOLD_REASON = "No actionable crossover detected."
BULLISH_CONTINUATION_REASON = (
    "Fast MA remains above slow MA (trend-following continuation)."
)
BEARISH_CONTINUATION_REASON = (
    "Fast MA remains below slow MA (trend-following continuation)."
)


def evaluate_signal(
    fast_ma: Sequence[float | None],
    slow_ma: Sequence[float | None],
) -> Signal:
    """Classify the last index of aligned fast/slow SMA series.

    Args:
        fast_ma: Fast SMA series aligned with the candles
        slow_ma: Slow SMA series aligned with the candles

    Returns:
        Signal with action and reason
    """
    fast, prev_fast = last_pair(fast_ma)
    slow, prev_slow = last_pair(slow_ma)

    if fast is None or slow is None:
        return Signal(Action.HOLD, HOLD_REASON)

    has_previous = prev_fast is not None and prev_slow is not None

    if has_previous and prev_fast <= prev_slow and fast > slow:
        signal = Signal(
            Action.BUY,
            f"Bullish crossover detected (fast MA {format_price(fast)} "
            f"> slow MA {format_price(slow)}).",
            crossover=True,
        )
    elif has_previous and prev_fast >= prev_slow and fast < slow:
        signal = Signal(
            Action.SELL,
            f"Bearish crossover detected (fast MA {format_price(fast)} "
            f"< slow MA {format_price(slow)}).",
            crossover=True,
        )
    elif fast > slow:
        signal = Signal(Action.BUY, BULLISH_CONTINUATION_REASON)
    elif fast < slow:
        signal = Signal(Action.SELL, BEARISH_CONTINUATION_REASON)
    else:
        signal = Signal(Action.HOLD, HOLD_REASON)

    logger.debug(
        f"SMA signal: {signal.action.value} fast={fast} slow={slow} "
        f"prev_fast={prev_fast} prev_slow={prev_slow}"
    )
    return signal
