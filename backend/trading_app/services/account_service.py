"""Account balance summary."""

import logging
from typing import Any

from signal_core.strategy import BalanceSource
from trading_app.models import AccountOverview, BalanceSummary

logger = logging.getLogger(__name__)

NO_CREDENTIALS_MESSAGE = "API credentials not configured. Showing empty balances."


def summarize_balances(balance: dict[str, Any]) -> list[BalanceSummary]:
    """Keep assets with a positive numeric total."""
    totals = balance.get("total") or {}
    free = balance.get("free") or {}
    used = balance.get("used") or {}

    summary = []
    for asset, total in totals.items():
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            continue
        if total <= 0:
            continue
        summary.append(
            BalanceSummary(
                asset=asset,
                total=total,
                free=free.get(asset) or 0,
                used=used.get(asset) or 0,
            )
        )
    return summary


class AccountService:
    """Reads balances from the venue when credentials are configured."""

    def __init__(self, balance_source: BalanceSource, authenticated: bool):
        self._balance_source = balance_source
        self._authenticated = authenticated

    async def overview(self) -> AccountOverview:
        if not self._authenticated:
            return AccountOverview(
                authenticated=False, balances=[], message=NO_CREDENTIALS_MESSAGE
            )

        balance = await self._balance_source.fetch_balance()
        balances = summarize_balances(balance)
        logger.debug(f"Loaded {len(balances)} non-zero balances")
        return AccountOverview(authenticated=True, balances=balances)
