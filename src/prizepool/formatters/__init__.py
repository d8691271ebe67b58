"""Display formatting for prize pool amounts."""

from .amount_formatter import AmountFormatter, format_amount

__all__ = ["AmountFormatter", "format_amount"]
