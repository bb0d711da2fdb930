"""Core: config, types, logging."""

from trade_journal.core.config import load_config, Config
from trade_journal.core.types import (
    Trade,
    TradeType,
    TradeStatus,
    Account,
    CalendarDay,
    MonthlyStats,
    DashboardStats,
)
from trade_journal.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "Trade",
    "TradeType",
    "TradeStatus",
    "Account",
    "CalendarDay",
    "MonthlyStats",
    "DashboardStats",
    "setup_logging",
]
