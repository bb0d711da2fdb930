"""Stores: account record and append-only trade log."""

from trade_journal.store.account_store import AccountStore
from trade_journal.store.trade_store import TradeStore

__all__ = ["AccountStore", "TradeStore"]
