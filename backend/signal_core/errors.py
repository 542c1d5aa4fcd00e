"""Errors raised by the strategy pipeline.

Structural problems (bad period, no data) abort an evaluation. Numeric
edge cases such as a non-positive price are absorbed by the pipeline and
never raised.
"""


class StrategyError(Exception):
    """Base class for errors that abort a strategy evaluation."""


class InvalidPeriodError(StrategyError, ValueError):
    """A moving average period was zero or negative."""

    def __init__(self, period: int):
        self.period = period
        super().__init__(f"SMA period must be greater than zero, got {period}")


class NoDataError(StrategyError, ValueError):
    """The candle sequence handed to the pipeline was empty."""

    def __init__(self, message: str = "No OHLCV data available for strategy evaluation."):
        super().__init__(message)
