"""
Month grid: 6 weeks x 7 days, Sunday first, annotated with daily PnL.
Trades are matched to days by exact entry_date string (YYYY-MM-DD); no timezone handling.
"""

from __future__ import annotations
import calendar
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List

from trade_journal.core.types import CalendarDay, Trade

GRID_CELLS = 42  # 6 rows x 7 cols, fixed even for 5-week months


def starting_day_index(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday."""
    # calendar.weekday is Monday = 0
    return (calendar.weekday(year, month, 1) + 1) % 7


def build_month_grid(trades: Iterable[Trade], year: int, month: int) -> List[CalendarDay]:
    """
    Project trades onto the grid for year/month (month 1-12).
    Leading cells come from the previous month, trailing cells from the next;
    padding cells carry no trades and daily_pnl 0.
    """
    by_date: Dict[str, List[Trade]] = defaultdict(list)
    for t in trades:
        by_date[t.entry_date].append(t)

    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    lead = starting_day_index(year, month)

    days: List[CalendarDay] = []
    for i in range(lead, 0, -1):
        days.append(CalendarDay(date=first - timedelta(days=i), is_current_month=False))

    for d in range(1, days_in_month + 1):
        day = date(year, month, d)
        day_trades = tuple(by_date.get(day.isoformat(), ()))
        days.append(CalendarDay(
            date=day,
            is_current_month=True,
            trades=day_trades,
            daily_pnl=sum(t.pnl or 0.0 for t in day_trades),
        ))

    next_first = first + timedelta(days=days_in_month)
    for i in range(GRID_CELLS - len(days)):
        days.append(CalendarDay(date=next_first + timedelta(days=i), is_current_month=False))

    return days


def grid_weeks(days: List[CalendarDay]) -> List[List[CalendarDay]]:
    """Split a grid into rows of 7."""
    return [days[i:i + 7] for i in range(0, len(days), 7)]
