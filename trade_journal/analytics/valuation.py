"""Live account balance: starting capital plus the month's net PnL."""

from __future__ import annotations

from trade_journal.core.types import Account


def current_balance(account: Account, monthly_net_pnl: float) -> float:
    """Additive only; no compounding or ledger replay."""
    return account.balance + monthly_net_pnl
