"""Technical indicators (pure math, no I/O)."""

from signal_core.indicators.indicators import (
    sma,
    highest,
    lowest,
    last_pair,
)

__all__ = [
    "sma",
    "highest",
    "lowest",
    "last_pair",
]
