"""
Performance metrics over closed trades: profit factor, expectancy, max drawdown,
largest win/loss. Trades are taken in log order to build the equity curve.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from trade_journal.core.types import Trade, TradeStatus


@dataclass
class PerformanceMetrics:
    """Aggregate performance metrics."""
    total_trades: int
    profit_factor: float
    expectancy: float
    largest_win: float
    largest_loss: float
    max_drawdown_pct: float
    return_pct: float


def profit_factor(pnls: List[float]) -> float:
    """Gross profit / gross loss. inf if wins and no losses, 0 if neither."""
    wins = sum(p for p in pnls if p > 0)
    losses = sum(-p for p in pnls if p < 0)
    if losses <= 0:
        return float("inf") if wins > 0 else 0.0
    return wins / losses


def expectancy(pnls: List[float]) -> float:
    """Average PnL per trade."""
    if not pnls:
        return 0.0
    return sum(pnls) / len(pnls)


def max_drawdown(equity: List[float]) -> float:
    """Max drawdown in percent (e.g. -15.0 = 15% below the running peak)."""
    if not equity:
        return 0.0
    arr = np.array(equity, dtype=float)
    peak = np.maximum.accumulate(arr)
    dd = (arr - peak) / np.where(peak != 0, peak, 1)
    return float(np.min(dd)) * 100.0


def equity_curve(pnls: List[float], starting_balance: float) -> List[float]:
    """Starting balance followed by the balance after each trade."""
    return np.concatenate(([starting_balance], starting_balance + np.cumsum(pnls))).tolist()


def compute_metrics(trades: Iterable[Trade], starting_balance: float = 0.0) -> PerformanceMetrics:
    """Metrics over CLOSED trades; missing pnl counts as 0."""
    pnls = [t.pnl or 0.0 for t in trades if t.status == TradeStatus.CLOSED]
    if not pnls:
        return PerformanceMetrics(
            total_trades=0, profit_factor=0.0, expectancy=0.0,
            largest_win=0.0, largest_loss=0.0, max_drawdown_pct=0.0, return_pct=0.0,
        )
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    return PerformanceMetrics(
        total_trades=len(pnls),
        profit_factor=profit_factor(pnls),
        expectancy=expectancy(pnls),
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
        # no positive capital base: percentages are undefined
        max_drawdown_pct=max_drawdown(equity_curve(pnls, starting_balance)) if starting_balance > 0 else 0.0,
        return_pct=sum(pnls) / starting_balance * 100.0 if starting_balance > 0 else 0.0,
    )
