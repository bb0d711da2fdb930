"""Coach: AI monthly review (Gemini) with a single-request guard."""

from trade_journal.coach.gemini import analyze_trading_performance, build_prompt
from trade_journal.coach.session import CoachSession

__all__ = ["analyze_trading_performance", "build_prompt", "CoachSession"]
