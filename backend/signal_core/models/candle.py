"""Candle (OHLCV bar) data model."""

from typing import Sequence

from pydantic import BaseModel, ConfigDict


class Candle(BaseModel):
    """One OHLCV price bar. Timestamp is milliseconds since the epoch."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def from_ohlcv(cls, row: Sequence) -> "Candle":
        """Build a candle from an exchange OHLCV row [ts, o, h, l, c, v]."""
        timestamp, open_, high, low, close, volume = row[:6]
        return cls(
            timestamp=int(timestamp),
            open=float(open_),
            high=float(high),
            low=float(low),
            close=float(close),
            volume=float(volume or 0),
        )
