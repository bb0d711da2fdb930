"""Unit tests for analytics.pnl."""

import pytest
from trade_journal.analytics.pnl import compute_realized_pnl, resolve_pnl, trade_return_pct
from trade_journal.core.types import Trade, TradeStatus, TradeType


def test_long_pnl():
    assert compute_realized_pnl(TradeType.LONG, 100, 110, 10) == 100


def test_short_pnl():
    assert compute_realized_pnl(TradeType.SHORT, 100, 110, 10) == -100
    assert compute_realized_pnl(TradeType.SHORT, 110, 100, 2) == 20


def test_missing_price_is_zero():
    assert compute_realized_pnl(TradeType.LONG, 100, None, 10) == 0.0
    assert compute_realized_pnl(TradeType.LONG, 0, 110, 10) == 0.0
    assert compute_realized_pnl(TradeType.SHORT, None, None, 10) == 0.0


def test_explicit_pnl_overrides():
    assert resolve_pnl(TradeType.LONG, 100, 110, 10, pnl=42.5) == 42.5
    assert resolve_pnl(TradeType.LONG, 100, 110, 10, pnl=-7) == -7


def test_zero_or_missing_pnl_is_computed():
    assert resolve_pnl(TradeType.LONG, 100, 110, 10, pnl=0) == 100
    assert resolve_pnl(TradeType.SHORT, 100, 110, 10) == -100
    assert resolve_pnl(TradeType.LONG, 100, None, 10) == 0.0


def test_trade_return_pct():
    t = Trade(id="a", ticker="AAPL", entry_date="2024-03-05", type=TradeType.LONG,
              status=TradeStatus.CLOSED, quantity=10, entry_price=100, exit_price=110, pnl=100)
    assert trade_return_pct(t) == pytest.approx(10.0)
    flat = Trade(id="b", ticker="X", entry_date="2024-03-05", type=TradeType.LONG,
                 status=TradeStatus.OPEN, quantity=0, entry_price=0)
    assert trade_return_pct(flat) == 0.0
