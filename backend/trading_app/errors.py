"""Errors raised at the app boundary (venue access and execution)."""


class TradingAppError(Exception):
    """Base class for app-level failures."""


class UnsupportedVenueError(TradingAppError, ValueError):
    """The configured exchange is not in the supported venue table."""

    def __init__(self, exchange: str, supported: list[str]):
        self.exchange = exchange
        super().__init__(
            f"Exchange '{exchange}' is not supported. "
            f"Available: {', '.join(supported)}. Check CRYPTO_EXCHANGE."
        )


class UpstreamFetchError(TradingAppError):
    """Fetching market data or balances from the venue failed."""


class OrderSubmissionError(TradingAppError):
    """The venue rejected or failed to accept an order."""


class LiveTradingNotConfiguredError(TradingAppError):
    """Live trading was enabled but the venue has no credentials."""

    def __init__(self):
        super().__init__(
            "Live trading requires CRYPTO_API_KEY and CRYPTO_API_SECRET to be set."
        )
