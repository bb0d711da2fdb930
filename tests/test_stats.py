"""Unit tests for analytics.stats and analytics.valuation."""

import pytest
from trade_journal.analytics.stats import dashboard_stats, filter_month, monthly_stats
from trade_journal.analytics.valuation import current_balance
from trade_journal.core.types import Account, DashboardStats, MonthlyStats, Trade, TradeStatus, TradeType


def _trade(id, entry_date, pnl, status=TradeStatus.CLOSED, ticker="AAPL", trade_type=TradeType.LONG):
    return Trade(id=id, ticker=ticker, entry_date=entry_date, type=trade_type, status=status,
                 quantity=1, entry_price=1, pnl=pnl)


def test_monthly_stats_example():
    trades = [
        _trade("1", "2024-03-05", 150),
        _trade("2", "2024-03-05", -50, ticker="TSLA", trade_type=TradeType.SHORT),
        _trade("3", "2024-04-01", 200, ticker="MSFT"),
    ]
    assert monthly_stats(trades, 2024, 3) == MonthlyStats(net_pnl=100, win_rate=50, trade_count=2)


def test_monthly_stats_empty():
    assert monthly_stats([], 2024, 3) == MonthlyStats(net_pnl=0, win_rate=0, trade_count=0)


def test_monthly_stats_counts_open_trades_and_missing_pnl():
    trades = [_trade("1", "2024-03-02", None, TradeStatus.OPEN), _trade("2", "2024-03-03", 30)]
    m = monthly_stats(trades, 2024, 3)
    assert m.trade_count == 2
    assert m.net_pnl == 30
    assert m.win_rate == 50


def test_filter_month_keeps_order_and_year():
    trades = [_trade("1", "2023-03-10", 1), _trade("2", "2024-03-10", 2), _trade("3", "2024-03-01", 3)]
    assert [t.id for t in filter_month(trades, 2024, 3)] == ["2", "3"]
    assert filter_month(trades, 2024, 1) == []


def test_dashboard_stats_empty():
    assert dashboard_stats([]) == DashboardStats()


def test_dashboard_zero_pnl_closed_is_loss():
    s = dashboard_stats([_trade("1", "2024-03-05", 0)])
    assert s.losses_count == 1
    assert s.wins_count == 0
    assert s.loss_rate == 100
    assert s.avg_loss == 0


def test_dashboard_stats():
    trades = [
        _trade("1", "2024-03-01", 100),
        _trade("2", "2024-03-02", 50),
        _trade("3", "2024-03-03", -30),
        _trade("4", "2024-03-04", None),
        _trade("5", "2024-03-05", 999, TradeStatus.OPEN),
        _trade("6", "2024-03-06", -999, TradeStatus.PENDING),
    ]
    s = dashboard_stats(trades)
    assert s.closed_count == 4
    assert s.wins_count == 2
    assert s.losses_count == 2
    assert s.wins_count + s.losses_count == s.closed_count
    assert s.win_rate == 50
    assert s.loss_rate == 50
    assert s.avg_win == pytest.approx(75)
    assert s.avg_loss == pytest.approx(-15)
    assert s.total_pnl == pytest.approx(120)
    assert s.open_count == 1


def test_dashboard_only_open_trades():
    s = dashboard_stats([_trade("1", "2024-03-05", None, TradeStatus.OPEN)])
    assert s.closed_count == 0
    assert s.win_rate == 0 and s.loss_rate == 0
    assert s.open_count == 1


def test_current_balance():
    assert current_balance(Account(balance=20000), -500) == 19500
    assert current_balance(Account(balance=1000.5), 0) == 1000.5
