"""Exchange access through ccxt: candles, balances and market orders.

The venue class is chosen from SUPPORTED_EXCHANGES by the configured
exchange id. Adding a venue means adding it to that table.
"""

import logging
from typing import Any

import ccxt.async_support as ccxt

from signal_core.models import Candle, OrderIntent
from trading_app.config import Settings
from trading_app.errors import (
    LiveTradingNotConfiguredError,
    OrderSubmissionError,
    UnsupportedVenueError,
    UpstreamFetchError,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXCHANGES: dict[str, type] = {
    "binance": ccxt.binance,
    "binanceusdm": ccxt.binanceusdm,
    "bybit": ccxt.bybit,
    "coinbase": ccxt.coinbase,
    "kraken": ccxt.kraken,
    "kucoin": ccxt.kucoin,
    "okx": ccxt.okx,
}


def get_exchange_class(exchange_id: str) -> type:
    """Look up a supported ccxt exchange class.

    Raises:
        UnsupportedVenueError: If exchange_id is not in SUPPORTED_EXCHANGES.
    """
    cls = SUPPORTED_EXCHANGES.get(exchange_id)
    if cls is None:
        raise UnsupportedVenueError(exchange_id, sorted(SUPPORTED_EXCHANGES))
    return cls


class CcxtVenue:
    """
    Market data source, order sink and balance source backed by one ccxt
    exchange instance.

    The ccxt client is created lazily on first use and reused until close().
    """

    def __init__(
        self,
        exchange_id: str,
        api_key: str = "",
        api_secret: str = "",
        api_password: str = "",
        sandbox: bool = False,
        exchange: Any | None = None,
    ):
        """
        Initialize venue.

        Args:
            exchange_id: Key into SUPPORTED_EXCHANGES
            api_key: Exchange API key ("" for public data only)
            api_secret: Exchange API secret
            api_password: Passphrase for exchanges that need one
            sandbox: Switch the exchange to its sandbox if it has one
            exchange: Pre-built ccxt exchange (tests)
        """
        self._exchange_class = get_exchange_class(exchange_id)
        self.exchange_id = exchange_id
        self._api_key = api_key
        self._api_secret = api_secret
        self._api_password = api_password
        self._sandbox = sandbox
        self._exchange = exchange

    @classmethod
    def from_settings(cls, settings: Settings) -> "CcxtVenue":
        return cls(
            exchange_id=settings.exchange,
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            api_password=settings.api_password,
            sandbox=settings.sandbox,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key and self._api_secret)

    def _get_exchange(self) -> Any:
        """Get or create the ccxt exchange client."""
        if self._exchange is None:
            config: dict[str, Any] = {"enableRateLimit": True}
            if self._api_key:
                config["apiKey"] = self._api_key
            if self._api_secret:
                config["secret"] = self._api_secret
            if self._api_password:
                config["password"] = self._api_password

            self._exchange = self._exchange_class(config)
            if self._sandbox:
                self._exchange.set_sandbox_mode(True)
                logger.info(f"{self.exchange_id}: sandbox mode enabled")
        return self._exchange

    async def close(self) -> None:
        """Close exchange connection."""
        if self._exchange is not None:
            await self._exchange.close()
            self._exchange = None

    async def fetch_candles(
        self, symbol: str, timeframe: str, limit: int
    ) -> list[Candle]:
        """
        Fetch OHLCV candles.

        Args:
            symbol: Unified symbol (e.g., "BTC/USDT")
            timeframe: Candle interval (e.g., "1h")
            limit: Maximum number of candles

        Returns:
            Candles in ascending timestamp order

        Raises:
            UpstreamFetchError: If the exchange call fails
        """
        exchange = self._get_exchange()
        try:
            raw = await exchange.fetch_ohlcv(symbol, timeframe, None, limit)
        except ccxt.BaseError as e:
            logger.error(f"OHLCV fetch failed for {symbol} {timeframe}: {e}")
            raise UpstreamFetchError(f"Failed to fetch market data: {e}") from e

        candles = [Candle.from_ohlcv(row) for row in raw]
        logger.debug(f"Fetched {len(candles)} candles for {symbol} {timeframe}")
        return candles

    async def fetch_balance(self) -> dict[str, Any]:
        """Fetch the account balance in ccxt layout."""
        exchange = self._get_exchange()
        try:
            return await exchange.fetch_balance()
        except ccxt.BaseError as e:
            logger.error(f"Balance fetch failed on {self.exchange_id}: {e}")
            raise UpstreamFetchError(f"Failed to load balances: {e}") from e

    async def submit_order(self, symbol: str, order: OrderIntent) -> dict[str, Any]:
        """
        Place a market order for an order intent.

        Stop-loss/take-profit levels on the intent are informational and
        are not sent.

        Raises:
            LiveTradingNotConfiguredError: If no credentials are configured
            OrderSubmissionError: If the exchange rejects the order
        """
        if not self.has_credentials:
            raise LiveTradingNotConfiguredError()

        exchange = self._get_exchange()
        logger.info(f"Placing {order.side} market order: {symbol} qty={order.size}")
        try:
            result = await exchange.create_order(
                symbol=symbol,
                type=order.type,
                side=order.side,
                amount=order.size,
            )
        except ccxt.BaseError as e:
            logger.error(f"Order placement failed for {symbol}: {e}")
            raise OrderSubmissionError(f"Order failed: {e}") from e

        logger.info(f"Order placed: {result.get('id')} status={result.get('status')}")
        return result


def create_venue(settings: Settings) -> CcxtVenue:
    """Build the venue named by settings.exchange."""
    venue = CcxtVenue.from_settings(settings)
    logger.info(
        f"Venue {settings.exchange} ready "
        f"(credentials={venue.has_credentials}, sandbox={settings.sandbox})"
    )
    return venue
