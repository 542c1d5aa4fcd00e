"""Position sizing and stop-loss/take-profit levels.

Size = capital * clamp(risk% / 100, 0, 1) / latest price, 6 decimals.
Stops and targets come from the trailing slow-length window:
- BUY:  SL = lowest low * 0.99,   TP = price * 1.03
- SELL: SL = highest high * 1.01, TP = price * 0.97

A non-positive price yields size 0 with no stop/take. Non-finite levels
are dropped instead of returned.
"""

import logging
import math
from typing import Sequence

from signal_core.indicators import highest, lowest
from signal_core.models import Action, Candle
from signal_core.numeric import finite_or_none, round_half_up
from signal_core.strategy.sma_crossover.models import (
    BUY_STOP_MULT,
    BUY_TAKE_MULT,
    PRICE_DECIMALS,
    SELL_STOP_MULT,
    SELL_TAKE_MULT,
    SIZE_DECIMALS,
    RiskAssessment,
)

logger = logging.getLogger(__name__)


def risk_fraction(risk_percent: float) -> float:
    """Convert a risk percentage to a fraction clamped to [0, 1]."""
    return max(min(risk_percent / 100, 1.0), 0.0)


def position_size(capital: float, risk_percent: float, latest_price: float) -> float:
    """Units to buy/sell with the capital at risk, 0 when price <= 0."""
    if not latest_price > 0:
        return 0.0
    size = round_half_up(capital * risk_fraction(risk_percent) / latest_price, SIZE_DECIMALS)
    if not math.isfinite(size):
        return 0.0
    return size


def recent_window(candles: Sequence[Candle], slow_length: int) -> Sequence[Candle]:
    """Trailing slow_length candles, or all of them if fewer exist."""
    return candles[-slow_length:]


def size_position(
    action: Action,
    capital: float,
    risk_percent: float,
    latest_price: float,
    candles: Sequence[Candle],
    slow_length: int,
) -> RiskAssessment:
    """
    Size a position and derive protective levels for an action.

    Args:
        action: Decision from the signal evaluator
        capital: Account capital available to the strategy
        risk_percent: Percent of capital to commit (clamped to 0-100)
        latest_price: Last close
        candles: Candles the decision was made on
        slow_length: Slow SMA period, also the stop lookback

    Returns:
        RiskAssessment with size and optional stop/take
    """
    size = position_size(capital, risk_percent, latest_price)

    if not latest_price > 0:
        logger.warning(
            f"Non-positive latest price {latest_price}: position size forced to 0"
        )
        return RiskAssessment(position_size=0.0)

    if action == Action.HOLD:
        return RiskAssessment(position_size=size)

    window = recent_window(candles, slow_length)

    if action == Action.BUY:
        stop_loss = lowest([c.low for c in window]) * BUY_STOP_MULT
        take_profit = latest_price * BUY_TAKE_MULT
    else:
        stop_loss = highest([c.high for c in window]) * SELL_STOP_MULT
        take_profit = latest_price * SELL_TAKE_MULT

    return RiskAssessment(
        position_size=size,
        stop_loss=finite_or_none(round_half_up(stop_loss, PRICE_DECIMALS)),
        take_profit=finite_or_none(round_half_up(take_profit, PRICE_DECIMALS)),
    )
