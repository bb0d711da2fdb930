"""
Append-only trade log. No delete, no reorder, no edit.
File persistence is optional: without a path the log lives for the session only.
"""

from __future__ import annotations
import json
import logging
import uuid
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from trade_journal.analytics.pnl import resolve_pnl
from trade_journal.core.types import Trade, TradeStatus, TradeType

logger = logging.getLogger("trade_journal.store.trades")

CSV_COLUMNS = [
    "id", "entryDate", "ticker", "type", "status", "quantity",
    "entryPrice", "exitPrice", "pnl", "setup", "notes",
]


def new_trade_id() -> str:
    return uuid.uuid4().hex[:9]


class TradeStore:
    """Ordered, append-only collection of Trade."""

    def __init__(self, path: Optional[Path] = None, trades: Iterable[Trade] = ()):
        self.path = Path(path) if path else None
        self._trades: List[Trade] = list(trades)

    @property
    def trades(self) -> Tuple[Trade, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._trades)

    def __len__(self) -> int:
        return len(self._trades)

    def add(self, trade: Trade) -> Trade:
        if any(t.id == trade.id for t in self._trades):
            raise ValueError(f"duplicate trade id {trade.id}")
        self._trades.append(trade)
        logger.info("Trade %s %s %s on %s pnl=%.2f", trade.id, trade.type.value, trade.ticker,
                    trade.entry_date, trade.pnl or 0.0)
        return trade

    def create(
        self,
        ticker: str,
        entry_date: Optional[str] = None,
        trade_type: TradeType = TradeType.LONG,
        status: TradeStatus = TradeStatus.CLOSED,
        quantity: float = 0.0,
        entry_price: float = 0.0,
        exit_price: Optional[float] = None,
        pnl: Optional[float] = None,
        notes: str = "",
        setup: str = "",
    ) -> Trade:
        """
        Build a trade from form-style input and append it.
        Blank ticker -> "UNK", blank date -> today. PnL auto-computed unless an explicit non-zero value is given.
        """
        trade = Trade(
            id=new_trade_id(),
            ticker=(ticker or "").strip().upper() or "UNK",
            entry_date=entry_date or date.today().isoformat(),
            type=trade_type,
            status=status,
            quantity=quantity or 0.0,
            entry_price=entry_price or 0.0,
            exit_price=exit_price,
            pnl=resolve_pnl(trade_type, entry_price, exit_price, quantity or 0.0, pnl),
            notes=notes,
            setup=setup,
        )
        return self.add(trade)

    # ---------- persistence ----------
    def load(self) -> None:
        """Replace in-memory log with the file contents (no-op without a path)."""
        if self.path is None:
            logger.debug("Trade log has no file; session only")
            return
        if not self.path.exists():
            logger.info("No trade file at %s, starting empty", self.path)
            self._trades = []
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            self._trades = [Trade.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            # keep the bad file out of the way so save() cannot overwrite it
            backup = self.path.with_name(self.path.name + ".bad")
            logger.warning("Could not read trade file %s (%s), moved to %s; starting empty", self.path, e, backup)
            self.path.replace(backup)
            self._trades = []
            return
        logger.info("Loaded %d trades from %s", len(self._trades), self.path)

    def save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([t.to_dict() for t in self._trades], f, indent=2)

    # ---------- export ----------
    def to_frame(self) -> pd.DataFrame:
        """Trade log as a DataFrame (one row per trade, log order)."""
        rows = [t.to_dict() for t in self._trades]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def export_csv(self, path: Path) -> int:
        """Write the log to CSV. Returns number of rows written."""
        df = self.to_frame()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
        logger.info("Exported %d trades to %s", len(df), path)
        return len(df)
