"""Utils: display formatting."""

from trade_journal.utils.formatting import currency_symbol, format_money, format_signed_money, month_label

__all__ = ["currency_symbol", "format_money", "format_signed_money", "month_label"]
