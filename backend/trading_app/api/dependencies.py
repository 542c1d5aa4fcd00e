"""FastAPI dependencies resolving services from application state."""

from fastapi import Request

from signal_core.strategy import MarketDataSource
from trading_app.config import Settings
from trading_app.services import AccountService, AutoEvaluator, StrategyService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_data_source(request: Request) -> MarketDataSource:
    return request.app.state.venue


def get_strategy_service(request: Request) -> StrategyService:
    return request.app.state.strategy_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_auto_evaluator(request: Request) -> AutoEvaluator | None:
    return getattr(request.app.state, "auto_evaluator", None)
