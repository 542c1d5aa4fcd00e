"""Numeric helpers for prices and sizes."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Enough digits to quantize any finite double to a few decimal places
_QUANTIZE_PRECISION = 400


def round_half_up(value: float, places: int) -> float:
    """Round to a fixed number of decimal places, ties away from zero.

    Works on the exact binary value of the float, so the result matches
    fixed-point formatting (e.g. 1.005 -> 1.0 because 1.005 is stored as
    1.00499999...). Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        quantum = Decimal(1).scaleb(-places)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def finite_or_none(value: float | None) -> float | None:
    """Drop NaN/Infinity so they never leave the pipeline."""
    if value is None or not math.isfinite(value):
        return None
    return value


def format_price(value: float) -> str:
    """Format a value with two decimals for human-readable reasons."""
    return f"{round_half_up(value, 2):.2f}"
