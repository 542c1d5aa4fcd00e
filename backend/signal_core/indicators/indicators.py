"""Technical indicators for signal generation (pure math, no I/O).

SMA values are summed left to right over each window so that results are
reproducible bit for bit against the naive reference summation. Window
extremes use NumPy.
"""

from typing import Sequence

import numpy as np

from signal_core.errors import InvalidPeriodError


def sma(values: Sequence[float], period: int) -> list[float | None]:
    """
    Calculate Simple Moving Average.

    Args:
        values: Sequence of price values
        period: SMA period

    Returns:
        List of SMA values, same length as input. Entries before the first
        full window are None.

    Raises:
        InvalidPeriodError: If period <= 0
    """
    if period <= 0:
        raise InvalidPeriodError(period)

    result: list[float | None] = []
    for i in range(len(values)):
        if i + 1 < period:
            result.append(None)
            continue
        window = values[i + 1 - period : i + 1]
        total = 0.0
        for value in window:
            total += value
        result.append(total / period)
    return result


def highest(values: Sequence[float]) -> float:
    """Highest value in the window, NaN for an empty window."""
    if len(values) == 0:
        return float("nan")
    return float(np.max(np.asarray(values, dtype=np.float64)))


def lowest(values: Sequence[float]) -> float:
    """Lowest value in the window, NaN for an empty window."""
    if len(values) == 0:
        return float("nan")
    return float(np.min(np.asarray(values, dtype=np.float64)))


def last_pair(series: Sequence[float | None]) -> tuple[float | None, float | None]:
    """Return (current, previous) from an indicator series.

    Missing positions (short series) come back as None.
    """
    current = series[-1] if len(series) >= 1 else None
    previous = series[-2] if len(series) >= 2 else None
    return current, previous
