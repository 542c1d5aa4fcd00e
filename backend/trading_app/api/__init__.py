"""API endpoints."""

from trading_app.api.routes import StrategyRequest, router

__all__ = [
    "router",
    "StrategyRequest",
]
