"""Interfaces the trading app implements per venue.

A venue supplies candles and accepts orders. Each capability is a separate
protocol so a read-only data source can be used without an order sink.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from signal_core.models import Candle, OrderIntent


@runtime_checkable
class MarketDataSource(Protocol):
    """Supplies ordered candles for a (symbol, timeframe, limit) request."""

    async def fetch_candles(
        self, symbol: str, timeframe: str, limit: int
    ) -> list[Candle]:
        """Fetch candles in ascending timestamp order."""
        ...


@runtime_checkable
class OrderSink(Protocol):
    """Accepts order intents for transmission to a venue."""

    @property
    def has_credentials(self) -> bool:
        """Whether the sink is able to sign orders."""
        ...

    async def submit_order(self, symbol: str, order: OrderIntent) -> dict[str, Any]:
        """Transmit an order and return the raw venue response."""
        ...


@runtime_checkable
class BalanceSource(Protocol):
    """Supplies account balances in the ccxt balance layout."""

    async def fetch_balance(self) -> dict[str, Any]:
        """Return a dict with 'total', 'free' and 'used' per asset."""
        ...
