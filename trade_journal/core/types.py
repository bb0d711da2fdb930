"""
Core data types for trades, the account, and derived calendar/stats values.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from datetime import date
from enum import Enum
from typing import Any, Optional, Tuple


class TradeType(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class TradeStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    PENDING = "PENDING"


@dataclass(frozen=True)
class Trade:
    """Journal entry. Immutable once created; entry_date is YYYY-MM-DD."""
    id: str
    ticker: str
    entry_date: str
    type: TradeType
    status: TradeStatus
    quantity: float
    entry_price: float
    exit_price: Optional[float] = None
    pnl: Optional[float] = None
    notes: str = ""
    setup: str = ""
    exit_date: Optional[str] = None
    screenshot_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON shape of the trade log (camelCase keys)."""
        return {
            "id": self.id,
            "ticker": self.ticker,
            "entryDate": self.entry_date,
            "exitDate": self.exit_date,
            "entryPrice": self.entry_price,
            "exitPrice": self.exit_price,
            "quantity": self.quantity,
            "type": self.type.value,
            "status": self.status.value,
            "pnl": self.pnl,
            "notes": self.notes,
            "setup": self.setup,
            "screenshotUrl": self.screenshot_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Trade":
        exit_price = data.get("exitPrice")
        pnl = data.get("pnl")
        return cls(
            id=str(data["id"]),
            ticker=str(data["ticker"]).upper(),
            entry_date=str(data["entryDate"]),
            type=TradeType(data.get("type", TradeType.LONG.value)),
            status=TradeStatus(data.get("status", TradeStatus.CLOSED.value)),
            quantity=float(data.get("quantity", 0) or 0),
            entry_price=float(data.get("entryPrice", 0) or 0),
            exit_price=float(exit_price) if exit_price is not None else None,
            pnl=float(pnl) if pnl is not None else None,
            notes=data.get("notes") or "",
            setup=data.get("setup") or "",
            exit_date=data.get("exitDate"),
            screenshot_url=data.get("screenshotUrl"),
        )


@dataclass
class Account:
    """Trading account. Currency is a display label only."""
    id: str = "1"
    name: str = "FundedNext"
    balance: float = 20000.0
    currency: str = "USD"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        default = cls()
        return cls(
            id=str(data.get("id", default.id)),
            name=str(data.get("name", default.name)),
            balance=float(data.get("balance", default.balance)),
            currency=str(data.get("currency", default.currency)),
        )


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""
    date: date
    is_current_month: bool
    trades: Tuple[Trade, ...] = field(default_factory=tuple)
    daily_pnl: float = 0.0


@dataclass(frozen=True)
class MonthlyStats:
    net_pnl: float = 0.0
    win_rate: float = 0.0
    trade_count: int = 0


@dataclass(frozen=True)
class DashboardStats:
    """All-time stats. Win/loss classification counts CLOSED trades only."""
    wins_count: int = 0
    losses_count: int = 0
    win_rate: float = 0.0
    loss_rate: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    total_pnl: float = 0.0
    open_count: int = 0
    closed_count: int = 0
