"""
AI coach: monthly trade review via the Gemini REST API.
Never raises; every failure becomes a fixed message. Never log the API key.
"""

from __future__ import annotations
import logging
from typing import Sequence

import requests

from trade_journal.core.types import Trade, TradeStatus

logger = logging.getLogger("trade_journal.coach.gemini")

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_MODEL = "gemini-2.5-flash"

KEY_MISSING_MESSAGE = "API Key is missing. Please configure your environment variables."
NO_TRADES_MESSAGE = "No trades found for this period to analyze."
EMPTY_RESPONSE_MESSAGE = "Could not generate analysis."
FAILURE_MESSAGE = "An error occurred while connecting to the AI service."

PROMPT_TEMPLATE = """You are an expert trading psychologist and risk manager.
Analyze the following trading journal entries for the month of {month}.

Trades:
{trades}

Please provide:
1. A brief summary of performance.
2. Identify any potential behavioral patterns (e.g., revenge trading, overtrading, good discipline).
3. Three actionable tips for the next month.

Keep the tone professional, encouraging, but direct. Format with Markdown.
"""


def summarize_trade(trade: Trade) -> str:
    """One prompt line: side, ticker, PnL if closed else OPEN, setup, notes."""
    if trade.status == TradeStatus.CLOSED:
        result = f"P&L ${trade.pnl or 0.0:.2f}"
    else:
        result = "OPEN"
    return (
        f"- {trade.type.value} {trade.ticker}: {result}. "
        f"Setup: {trade.setup or 'N/A'}. Notes: {trade.notes or 'None'}"
    )


def build_prompt(trades: Sequence[Trade], month_label: str) -> str:
    return PROMPT_TEMPLATE.format(
        month=month_label,
        trades="\n".join(summarize_trade(t) for t in trades),
    )


def _response_text(payload: dict) -> str:
    parts = []
    for candidate in payload.get("candidates") or []:
        for part in (candidate.get("content") or {}).get("parts") or []:
            if part.get("text"):
                parts.append(part["text"])
        if parts:
            break
    return "".join(parts)


def analyze_trading_performance(
    trades: Sequence[Trade],
    month_label: str,
    api_key: str = "",
    model: str = DEFAULT_MODEL,
    timeout: float = 30.0,
) -> str:
    """Return free-form markdown feedback for the month's trades, or a fixed fallback message."""
    if not api_key:
        logger.debug("Gemini key not configured, skipping analysis")
        return KEY_MISSING_MESSAGE
    if not trades:
        return NO_TRADES_MESSAGE
    prompt = build_prompt(trades, month_label)
    try:
        r = requests.post(
            GEMINI_URL.format(model=model),
            # header, not query string: request URLs end up in exception messages
            headers={"x-goog-api-key": api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=timeout,
        )
        if r.status_code != 200:
            logger.warning("Gemini request failed: %s %s", r.status_code, r.text[:200])
            return FAILURE_MESSAGE
        text = _response_text(r.json())
        return text or EMPTY_RESPONSE_MESSAGE
    except Exception as e:
        logger.exception("Gemini error: %s", e)
        return FAILURE_MESSAGE
