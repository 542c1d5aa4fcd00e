"""Main application entry point."""

import logging
from contextlib import asynccontextmanager

# Configure logging FIRST, before any other imports
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)

# Reduce noise from third-party libraries (must be set before importing them)
logging.getLogger("ccxt").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.WARNING)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from signal_core.errors import StrategyError
from trading_app.api import router
from trading_app.clients import CcxtVenue, create_venue
from trading_app.config import Settings, get_settings
from trading_app.errors import (
    LiveTradingNotConfiguredError,
    OrderSubmissionError,
    UpstreamFetchError,
)
from trading_app.services import (
    AccountService,
    AutoEvaluator,
    ExecutionGate,
    ExecutionPolicy,
    StrategyService,
)

logger = logging.getLogger(__name__)

APP_NAME = "SMA Crossover Trader"
APP_VERSION = "0.1.0"


def create_app(settings: Settings | None = None, venue=None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings: Settings to use (cached environment settings if None)
        venue: Venue implementing MarketDataSource, OrderSink and
            BalanceSource (built from settings if None)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire services at startup, tear them down at shutdown."""
        active_venue = venue if venue is not None else create_venue(settings)

        # Validates the live-trading gate once, before serving requests
        gate = ExecutionGate(active_venue, ExecutionPolicy.from_settings(settings))
        strategy_service = StrategyService(active_venue, gate)

        app.state.settings = settings
        app.state.venue = active_venue
        app.state.strategy_service = strategy_service
        app.state.account_service = AccountService(
            active_venue, authenticated=active_venue.has_credentials
        )
        app.state.auto_evaluator = None

        if settings.auto_evaluate:
            auto_evaluator = AutoEvaluator(
                strategy_service,
                settings.auto_strategy_config(),
                interval_seconds=settings.auto_interval_minutes * 60,
            )
            auto_evaluator.start()
            app.state.auto_evaluator = auto_evaluator

        logger.info(
            f"{APP_NAME} started: exchange={settings.exchange} "
            f"trading_mode={settings.trading_mode.value} "
            f"live_confirmed={settings.enable_live_trading}"
        )

        yield

        # Shutdown
        logger.info("Shutting down...")
        if app.state.auto_evaluator is not None:
            await app.state.auto_evaluator.stop()
            app.state.auto_evaluator = None

        if isinstance(active_venue, CcxtVenue):
            try:
                await active_venue.close()
            except Exception as e:
                logger.warning(f"Error closing exchange connection: {e}")

        logger.info("Shutdown complete")

    app = FastAPI(
        title=APP_NAME,
        description="Moving-average crossover signals for crypto markets",
        version=APP_VERSION,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"name": APP_NAME, "version": APP_VERSION, "docs": "/docs"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map pipeline and venue errors to single JSON error responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(err.get("type") == "json_invalid" for err in errors):
            return ORJSONResponse(
                status_code=400,
                content={"error": "Malformed JSON payload supplied."},
            )
        return ORJSONResponse(
            status_code=400,
            content={
                "error": "Invalid request payload",
                "issues": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                    for err in errors
                ],
            },
        )

    @app.exception_handler(StrategyError)
    async def strategy_error(request: Request, exc: StrategyError):
        logger.error(f"Strategy evaluation failed: {exc}")
        return ORJSONResponse(status_code=422, content={"error": str(exc)})

    @app.exception_handler(UpstreamFetchError)
    async def upstream_error(request: Request, exc: UpstreamFetchError):
        return ORJSONResponse(status_code=502, content={"error": str(exc)})

    @app.exception_handler(OrderSubmissionError)
    async def order_error(request: Request, exc: OrderSubmissionError):
        return ORJSONResponse(status_code=502, content={"error": str(exc)})

    @app.exception_handler(LiveTradingNotConfiguredError)
    async def live_not_configured(request: Request, exc: LiveTradingNotConfiguredError):
        logger.error(str(exc))
        return ORJSONResponse(status_code=503, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return ORJSONResponse(
            status_code=500,
            content={"error": str(exc) or "Strategy evaluation failed."},
        )


def main():
    """Run the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "trading_app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
