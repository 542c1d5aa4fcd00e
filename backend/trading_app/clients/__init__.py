"""Exchange clients."""

from trading_app.clients.ccxt_venue import (
    SUPPORTED_EXCHANGES,
    CcxtVenue,
    create_venue,
    get_exchange_class,
)

__all__ = [
    "SUPPORTED_EXCHANGES",
    "CcxtVenue",
    "create_venue",
    "get_exchange_class",
]
