"""Order intent construction from a strategy computation."""

from signal_core.models import Action, OrderIntent, StrategyComputation


def build_order(computation: StrategyComputation) -> OrderIntent | None:
    """Return a market order intent, or None for HOLD or a zero size.

    Transmission and paper/live gating happen outside the core.
    """
    if computation.action == Action.HOLD or computation.position_size <= 0:
        return None

    return OrderIntent(
        side=computation.action.value,
        type="market",
        size=computation.position_size,
        price=computation.latest_price,
        stop_loss=computation.stop_loss,
        take_profit=computation.take_profit,
    )
