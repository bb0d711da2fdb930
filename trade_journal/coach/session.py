"""Single-flight wrapper around the coach: at most one analysis request outstanding."""

from __future__ import annotations
import logging
import threading
from typing import Callable, Optional, Sequence

from trade_journal.analytics.stats import filter_month
from trade_journal.coach.gemini import DEFAULT_MODEL, analyze_trading_performance
from trade_journal.core.types import Trade
from trade_journal.utils.formatting import month_label

logger = logging.getLogger("trade_journal.coach.session")

BUSY_MESSAGE = "An analysis is already in progress. Please wait for it to finish."


class CoachSession:
    """
    Holds the coach settings and a busy flag. A call made while another is in
    flight returns BUSY_MESSAGE instead of sending a second request.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        analyzer: Optional[Callable[..., str]] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._analyzer = analyzer or analyze_trading_performance
        self._lock = threading.Lock()
        self.last_analysis: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    def analyze(self, trades: Sequence[Trade], label: str) -> str:
        if not self._lock.acquire(blocking=False):
            logger.info("Analysis requested while another is running")
            return BUSY_MESSAGE
        try:
            self.last_analysis = None
            result = self._analyzer(
                list(trades), label, api_key=self.api_key, model=self.model, timeout=self.timeout,
            )
            self.last_analysis = result
            return result
        finally:
            self._lock.release()

    def analyze_month(self, trades: Sequence[Trade], year: int, month: int) -> str:
        """Filter the log to year/month and analyze it."""
        return self.analyze(filter_month(trades, year, month), month_label(year, month))

    def clear(self) -> None:
        self.last_analysis = None
