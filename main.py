#!/usr/bin/env python3
"""
Trade Journal CLI: add | calendar | month | dashboard | account | analyze | export
Usage:
  python main.py add AAPL --date 2024-03-05 --type LONG --qty 10 --entry 100 --exit 115
  python main.py calendar [--year 2024 --month 3]
  python main.py dashboard
"""

from __future__ import annotations
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trade_journal.analytics import (
    build_month_grid,
    compute_metrics,
    current_balance,
    dashboard_stats,
    grid_weeks,
    monthly_stats,
    trade_return_pct,
)
from trade_journal.coach.session import CoachSession
from trade_journal.core.config import Config, load_config
from trade_journal.core.logger import setup_logging
from trade_journal.core.types import Account, TradeStatus, TradeType
from trade_journal.store import AccountStore, TradeStore
from trade_journal.utils.formatting import format_money, format_signed_money, month_label

logger = logging.getLogger("trade_journal")

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _stores(config: Config) -> tuple[AccountStore, TradeStore]:
    account_store = AccountStore(
        config.account_file,
        Account(name=config.default_account_name, balance=config.default_balance, currency=config.default_currency),
    )
    if config.trades_file is None:
        logger.warning("storage.trades_file not set: trades are kept for this run only")
    trade_store = TradeStore(config.trades_file)
    trade_store.load()
    return account_store, trade_store


def _year_month(args: argparse.Namespace) -> tuple[int, int]:
    today = date.today()
    return args.year or today.year, args.month or today.month


def run_add(config: Config, args: argparse.Namespace) -> int:
    _, trades = _stores(config)
    trade = trades.create(
        ticker=args.ticker,
        entry_date=args.date,
        trade_type=TradeType(args.type.upper()),
        status=TradeStatus(args.status.upper()),
        quantity=args.qty,
        entry_price=args.entry,
        exit_price=args.exit,
        pnl=args.pnl,
        notes=args.notes,
        setup=args.setup,
    )
    trades.save()
    print(f"Logged {trade.type.value} {trade.ticker} on {trade.entry_date} (id {trade.id}) pnl={trade.pnl:.2f}")
    return 0


def run_calendar(config: Config, args: argparse.Namespace) -> int:
    _, trades = _stores(config)
    year, month = _year_month(args)
    grid = build_month_grid(trades.trades, year, month)
    print(f"\n{month_label(year, month)}")
    print(" ".join(f"{d:>10}" for d in WEEKDAYS))
    for week in grid_weeks(grid):
        # padding days in parentheses
        print(" ".join(f"{c.date.day if c.is_current_month else f'({c.date.day})':>10}" for c in week))
        print(" ".join(f"{_pnl_cell(c.daily_pnl, len(c.trades)):>10}" for c in week))
    return 0


def _pnl_cell(pnl: float, n_trades: int) -> str:
    if not pnl:
        return ""
    return f"{pnl:+.2f}/{n_trades}"


def run_month(config: Config, args: argparse.Namespace) -> int:
    account_store, trades = _stores(config)
    account = account_store.load()
    year, month = _year_month(args)
    m = monthly_stats(trades.trades, year, month)
    print(f"\n--- {month_label(year, month)} ---")
    print(f"Account: {account.name}")
    print(f"Balance: {format_money(current_balance(account, m.net_pnl), account.currency)}")
    print(f"Net P&L: {format_signed_money(m.net_pnl, account.currency)}")
    print(f"Win rate: {m.win_rate:.0f}%")
    print(f"Trades: {m.trade_count}")
    return 0


def run_dashboard(config: Config, args: argparse.Namespace) -> int:
    account_store, trades = _stores(config)
    account = account_store.load()
    s = dashboard_stats(trades.trades)
    p = compute_metrics(trades.trades, account.balance)
    print("\n--- Dashboard ---")
    print(f"Wins: {s.wins_count} ({s.win_rate:.0f}%)  Losses: {s.losses_count} ({s.loss_rate:.0f}%)  Open: {s.open_count}")
    print(f"Avg win: {format_money(s.avg_win, account.currency)}  Avg loss: {format_money(abs(s.avg_loss), account.currency)}")
    print(f"Total P&L: {format_money(s.total_pnl, account.currency)}")
    print(f"Profit factor: {p.profit_factor:.2f}  Expectancy: {p.expectancy:.2f}/trade")
    print(f"Max drawdown: {p.max_drawdown_pct:.2f}%  Return: {p.return_pct:.2f}%")
    if not len(trades):
        print("\nNo trades logged yet. Start with: python main.py add TICKER ...")
        return 0
    print(f"\n{'Date':<11}{'Symbol':<8}{'Status':<8}{'Side':<6}{'Qty':>8}{'Entry':>10}{'Exit':>10}{'Return':>11}{'Ret %':>8}")
    for t in trades.trades:
        exit_str = f"{t.exit_price:.2f}" if t.exit_price else "-"
        ret = f"{t.pnl:.2f}" if t.pnl else "-"
        pct = trade_return_pct(t)
        pct_str = f"{pct:.2f}%" if pct else "-"
        print(f"{t.entry_date:<11}{t.ticker:<8}{t.status.value:<8}{t.type.value:<6}{t.quantity:>8g}"
              f"{t.entry_price:>10.2f}{exit_str:>10}{ret:>11}{pct_str:>8}")
    return 0


def run_account(config: Config, args: argparse.Namespace) -> int:
    account_store, _ = _stores(config)
    account = account_store.load()
    if args.name is not None or args.balance is not None or args.currency is not None:
        account = Account(
            id=account.id,
            name=args.name if args.name is not None else account.name,
            balance=args.balance if args.balance is not None else account.balance,
            currency=(args.currency or account.currency).upper(),
        )
        account_store.save(account)
    print(f"{account.name}: {format_money(account.balance, account.currency)} ({account.currency})")
    return 0


def run_analyze(config: Config, args: argparse.Namespace) -> int:
    _, trades = _stores(config)
    year, month = _year_month(args)
    coach = CoachSession(config.gemini_api_key, config.gemini_model, config.coach_timeout)
    print(coach.analyze_month(trades.trades, year, month))
    return 0


def run_export(config: Config, args: argparse.Namespace) -> int:
    _, trades = _stores(config)
    n = trades.export_csv(args.path)
    print(f"Exported {n} trades to {args.path}")
    return 0


def _add_month_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, default=None)
    p.add_argument("--month", type=int, default=None, choices=range(1, 13), metavar="1-12")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trade Journal CLI")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="mode", required=True)

    p = sub.add_parser("add", help="Log a trade")
    p.add_argument("ticker")
    p.add_argument("--date", default=None, help="Entry date YYYY-MM-DD (default today)")
    p.add_argument("--type", default="LONG", choices=["LONG", "SHORT", "long", "short"])
    p.add_argument("--status", default="CLOSED", choices=[s.value for s in TradeStatus] + [s.value.lower() for s in TradeStatus])
    p.add_argument("--qty", type=float, default=0.0)
    p.add_argument("--entry", type=float, default=0.0)
    p.add_argument("--exit", type=float, default=None)
    p.add_argument("--pnl", type=float, default=None, help="Explicit P&L (overrides computed)")
    p.add_argument("--setup", default="")
    p.add_argument("--notes", default="")

    _add_month_args(sub.add_parser("calendar", help="Month grid with daily P&L"))
    _add_month_args(sub.add_parser("month", help="Monthly summary and balance"))
    sub.add_parser("dashboard", help="All-time stats and trade log")

    p = sub.add_parser("account", help="Show or update the account")
    p.add_argument("--name", default=None)
    p.add_argument("--balance", type=float, default=None)
    p.add_argument("--currency", default=None)

    _add_month_args(sub.add_parser("analyze", help="AI coach review of a month"))

    p = sub.add_parser("export", help="Export trades to CSV")
    p.add_argument("path", type=Path)
    return parser


COMMANDS = {
    "add": run_add,
    "calendar": run_calendar,
    "month": run_month,
    "dashboard": run_dashboard,
    "account": run_account,
    "analyze": run_analyze,
    "export": run_export,
}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file)
    return COMMANDS[args.mode](config, args)


if __name__ == "__main__":
    exit(main())
