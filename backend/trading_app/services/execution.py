"""Execution gate between order intents and the venue.

An order is transmitted only when all three hold:
1. the evaluation was requested in live mode,
2. the server's trading mode is live,
3. live trading has been explicitly confirmed (ENABLE_LIVE_TRADING).
Otherwise the order is recorded as skipped with the reason.
"""

import logging
from dataclasses import dataclass

from signal_core.models import OrderIntent, StrategyMode
from signal_core.strategy import OrderSink
from trading_app.config import Settings
from trading_app.errors import LiveTradingNotConfiguredError
from trading_app.models import ExecutionResult

logger = logging.getLogger(__name__)

PAPER_MODE_REASON = "TRADING_MODE is paper. Order not transmitted."
NOT_CONFIRMED_REASON = "ENABLE_LIVE_TRADING is not set to true. Order not transmitted."


@dataclass(frozen=True)
class ExecutionPolicy:
    """Server-side trading mode plus the explicit live confirmation."""

    mode: StrategyMode = StrategyMode.PAPER
    live_trading_confirmed: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExecutionPolicy":
        return cls(
            mode=settings.trading_mode,
            live_trading_confirmed=settings.enable_live_trading,
        )

    @property
    def allows_live(self) -> bool:
        return self.mode == StrategyMode.LIVE and self.live_trading_confirmed


class ExecutionGate:
    """Decides whether an order intent is transmitted to the order sink."""

    def __init__(self, sink: OrderSink, policy: ExecutionPolicy):
        """
        Initialize and validate the gate.

        Raises:
            LiveTradingNotConfiguredError: If the policy allows live trading
                but the sink has no credentials
        """
        self._sink = sink
        self.policy = policy

        if policy.allows_live:
            if not sink.has_credentials:
                raise LiveTradingNotConfiguredError()
            logger.warning("Live trading ENABLED - orders will be transmitted")
        elif policy.mode == StrategyMode.LIVE:
            logger.warning(
                "TRADING_MODE is live but ENABLE_LIVE_TRADING is not set; "
                "orders will be skipped"
            )
        else:
            logger.info("Execution gate in paper mode - no orders will be transmitted")

    async def execute(
        self,
        symbol: str,
        order: OrderIntent | None,
        mode: StrategyMode,
    ) -> ExecutionResult | None:
        """
        Transmit or skip an order intent.

        Args:
            symbol: Unified symbol the order is for
            order: Order intent from the strategy, or None
            mode: Mode the evaluation was requested in

        Returns:
            ExecutionResult for live requests with an order, None otherwise
        """
        if order is None or mode != StrategyMode.LIVE:
            return None

        if self.policy.mode != StrategyMode.LIVE:
            logger.info(f"Skipping {order.side} {symbol}: {PAPER_MODE_REASON}")
            return ExecutionResult(status="skipped", reason=PAPER_MODE_REASON)

        if not self.policy.live_trading_confirmed:
            logger.info(f"Skipping {order.side} {symbol}: {NOT_CONFIRMED_REASON}")
            return ExecutionResult(status="skipped", reason=NOT_CONFIRMED_REASON)

        raw = await self._sink.submit_order(symbol, order)
        order_id = raw.get("id")
        return ExecutionResult(
            status="submitted",
            order_id=order_id if isinstance(order_id, str) else None,
            raw=raw,
        )
