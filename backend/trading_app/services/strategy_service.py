"""Evaluation cycle: fetch candles, run the strategy, gate the order."""

import logging
import time

from signal_core.models import StrategyConfig, StrategyMode
from signal_core.strategy import MarketDataSource, SmaCrossoverStrategy, Strategy
from trading_app.models import EvaluationMeta, EvaluationRecord
from trading_app.services.execution import ExecutionGate

logger = logging.getLogger(__name__)

MIN_CANDLE_LIMIT = 200
SLOW_LENGTH_LOOKBACK_MULT = 4


def candle_limit(slow_length: int) -> int:
    """Candles to request so the slow SMA has plenty of history."""
    return max(slow_length * SLOW_LENGTH_LOOKBACK_MULT, MIN_CANDLE_LIMIT)


class StrategyService:
    """Runs one self-contained evaluation per call."""

    def __init__(
        self,
        data_source: MarketDataSource,
        gate: ExecutionGate,
        strategy_cls: type[Strategy] = SmaCrossoverStrategy,
    ):
        self._data_source = data_source
        self._gate = gate
        self.strategy_cls = strategy_cls

    async def evaluate(self, config: StrategyConfig) -> EvaluationRecord:
        """
        Evaluate a configuration against fresh market data.

        Raises:
            UpstreamFetchError: If candles could not be fetched
            StrategyError: If the pipeline rejects the input
            OrderSubmissionError: If a live order was rejected
        """
        candles = await self._data_source.fetch_candles(
            config.symbol, config.timeframe, candle_limit(config.slow_length)
        )

        strategy = self.strategy_cls(config)
        computation = strategy.evaluate(candles)
        suggestion = strategy.build_order(computation)
        execution = await self._gate.execute(config.symbol, suggestion, config.mode)

        if execution is not None:
            logger.info(
                f"Execution {config.symbol}: {execution.status}"
                + (f" ({execution.reason})" if execution.reason else "")
            )

        return EvaluationRecord(
            strategy=computation,
            suggestion=suggestion,
            execution=execution,
            meta=EvaluationMeta(
                evaluated_at=int(time.time() * 1000),
                symbol=config.symbol,
                timeframe=config.timeframe,
                candles_used=len(candles),
                mode=config.mode,
                live_trading=config.mode == StrategyMode.LIVE,
            ),
        )
