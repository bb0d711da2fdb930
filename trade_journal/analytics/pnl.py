"""
Realized PnL for a single trade.
LONG: (exit - entry) * qty. SHORT: (entry - exit) * qty.
"""

from __future__ import annotations
from typing import Optional

from trade_journal.core.types import Trade, TradeType


def compute_realized_pnl(
    trade_type: TradeType,
    entry_price: Optional[float],
    exit_price: Optional[float],
    quantity: float,
) -> float:
    """Signed PnL. Returns 0.0 if either price is missing or zero (trade not closed / no data)."""
    if not entry_price or not exit_price:
        return 0.0
    if trade_type == TradeType.LONG:
        return (exit_price - entry_price) * quantity
    return (entry_price - exit_price) * quantity


def resolve_pnl(
    trade_type: TradeType,
    entry_price: Optional[float],
    exit_price: Optional[float],
    quantity: float,
    pnl: Optional[float] = None,
) -> float:
    """Explicit non-zero pnl wins; otherwise computed from prices."""
    if pnl:
        return float(pnl)
    return compute_realized_pnl(trade_type, entry_price, exit_price, quantity)


def trade_return_pct(trade: Trade) -> float:
    """PnL as percent of entry notional. 0 if entry notional is 0."""
    entry_total = trade.entry_price * trade.quantity
    if entry_total <= 0:
        return 0.0
    return (trade.pnl or 0.0) / entry_total * 100.0
