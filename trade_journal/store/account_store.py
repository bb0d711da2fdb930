"""
Account persistence: one JSON record, restored verbatim on startup and
replaced wholesale on every edit.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Optional

from trade_journal.core.types import Account

logger = logging.getLogger("trade_journal.store.account")


class AccountStore:
    """Load/save the account record. Missing or unreadable file -> default account."""

    def __init__(self, path: Path, default: Optional[Account] = None):
        self.path = Path(path)
        self.default = default or Account()

    def load(self) -> Account:
        if not self.path.exists():
            logger.info("No account file at %s, using defaults", self.path)
            return Account(**self.default.to_dict())
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return Account.from_dict(json.load(f))
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not read account file %s (%s), using defaults", self.path, e)
            return Account(**self.default.to_dict())

    def save(self, account: Account) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(account.to_dict(), f, indent=2)
        logger.debug("Account saved to %s", self.path)
