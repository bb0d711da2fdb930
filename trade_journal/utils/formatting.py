"""Display helpers: currency label, money with 2 decimals, month names."""

from __future__ import annotations
import calendar


def currency_symbol(currency: str) -> str:
    """'$' for USD, otherwise the code itself (no FX, label only)."""
    return "$" if currency.upper() == "USD" else currency.upper()


def format_money(amount: float, currency: str = "USD") -> str:
    """e.g. 19500 -> '$19,500.00', -50 -> '-$50.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(amount):,.2f}"


def format_signed_money(amount: float, currency: str = "USD") -> str:
    """Like format_money but positive and zero values get a '+'."""
    return ("+" if amount >= 0 else "") + format_money(amount, currency)


def month_label(year: int, month: int) -> str:
    """e.g. (2024, 3) -> 'March 2024'."""
    return f"{calendar.month_name[month]} {year}"
