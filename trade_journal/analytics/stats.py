"""
Monthly and all-time (dashboard) stats from the trade log.
All divisions guarded: empty denominator gives 0, never NaN.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

from trade_journal.core.types import DashboardStats, MonthlyStats, Trade, TradeStatus


def _pnl(t: Trade) -> float:
    return t.pnl or 0.0


def _pct(count: int, total: int) -> float:
    return count / total * 100.0 if total else 0.0


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def filter_month(trades: Iterable[Trade], year: int, month: int) -> List[Trade]:
    """Trades whose entry_date falls in year/month (1-12). Order preserved."""
    prefix = f"{year:04d}-{month:02d}-"
    return [t for t in trades if t.entry_date.startswith(prefix)]


def monthly_stats(trades: Iterable[Trade], year: int, month: int) -> MonthlyStats:
    """Net PnL, win rate (% of trades with pnl > 0) and trade count for one month."""
    month_trades = filter_month(trades, year, month)
    wins = sum(1 for t in month_trades if _pnl(t) > 0)
    return MonthlyStats(
        net_pnl=sum(_pnl(t) for t in month_trades),
        win_rate=_pct(wins, len(month_trades)),
        trade_count=len(month_trades),
    )


def dashboard_stats(trades: Iterable[Trade]) -> DashboardStats:
    """
    Whole-history stats. Only CLOSED trades are classified:
    win = pnl > 0, loss = pnl <= 0 (a flat closed trade is a loss).
    """
    trades = list(trades)
    closed = [t for t in trades if t.status == TradeStatus.CLOSED]
    wins = [_pnl(t) for t in closed if _pnl(t) > 0]
    losses = [_pnl(t) for t in closed if _pnl(t) <= 0]
    return DashboardStats(
        wins_count=len(wins),
        losses_count=len(losses),
        win_rate=_pct(len(wins), len(closed)),
        loss_rate=_pct(len(losses), len(closed)),
        avg_win=_mean(wins),
        avg_loss=_mean(losses),
        total_pnl=sum(_pnl(t) for t in closed),
        open_count=sum(1 for t in trades if t.status == TradeStatus.OPEN),
        closed_count=len(closed),
    )
