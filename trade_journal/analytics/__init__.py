"""Analytics: PnL, month grid, monthly/dashboard stats, balance, performance metrics."""

from trade_journal.analytics.pnl import compute_realized_pnl, resolve_pnl, trade_return_pct
from trade_journal.analytics.month_grid import build_month_grid, grid_weeks
from trade_journal.analytics.stats import filter_month, monthly_stats, dashboard_stats
from trade_journal.analytics.valuation import current_balance
from trade_journal.analytics.metrics import (
    compute_metrics,
    PerformanceMetrics,
    profit_factor,
    expectancy,
    max_drawdown,
)

__all__ = [
    "compute_realized_pnl",
    "resolve_pnl",
    "trade_return_pct",
    "build_month_grid",
    "grid_weeks",
    "filter_month",
    "monthly_stats",
    "dashboard_stats",
    "current_balance",
    "compute_metrics",
    "PerformanceMetrics",
    "profit_factor",
    "expectancy",
    "max_drawdown",
]
