"""Business services."""

from trading_app.services.account_service import AccountService, summarize_balances
from trading_app.services.auto_evaluator import AutoEvaluator
from trading_app.services.execution import ExecutionGate, ExecutionPolicy
from trading_app.services.strategy_service import StrategyService, candle_limit

__all__ = [
    "AccountService",
    "summarize_balances",
    "AutoEvaluator",
    "ExecutionGate",
    "ExecutionPolicy",
    "StrategyService",
    "candle_limit",
]
