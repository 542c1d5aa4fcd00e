"""Periodic re-evaluation of one strategy configuration."""

import asyncio
import logging

from signal_core.models import StrategyConfig
from trading_app.models import EvaluationRecord
from trading_app.services.strategy_service import StrategyService

logger = logging.getLogger(__name__)


class AutoEvaluator:
    """Runs an evaluation now and then every interval in a background task.

    Cycles never overlap: the next sleep starts only after the previous
    evaluation finished. A failed cycle is logged and the loop continues.
    """

    def __init__(
        self,
        service: StrategyService,
        config: StrategyConfig,
        interval_seconds: float,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._service = service
        self.config = config
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None
        self.last_record: EvaluationRecord | None = None
        self.last_error: str | None = None
        self.cycles = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> EvaluationRecord | None:
        """Run a single cycle, recording the outcome."""
        self.cycles += 1
        try:
            record = await self._service.evaluate(self.config)
        except Exception as e:
            self.last_error = str(e)
            logger.error(
                f"Auto evaluation failed for {self.config.symbol} "
                f"{self.config.timeframe}: {e}"
            )
            return None

        self.last_record = record
        self.last_error = None
        return record

    async def _loop(self) -> None:
        while True:
            await self.run_once()
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        """Start the background loop (no-op if already running)."""
        if self.is_running:
            return
        logger.info(
            f"Auto evaluation started: {self.config.symbol} {self.config.timeframe} "
            f"every {self.interval_seconds:.0f}s (mode={self.config.mode.value})"
        )
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        """Stop the background loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Auto evaluation stopped")
