"""Prize pool normalization: parse, format and aggregate free-text prize pools."""

from .models import (
    AggregationEntry,
    Amount,
    CurrencyGroup,
    CurrencyTag,
    Summary,
    UNRECOGNIZED_AMOUNT,
)
from .normalizers import AmountParser, CurrencyRegistry, get_default_registry, parse
from .formatters import AmountFormatter, format_amount
from .core import merge_summaries, summarize, summarize_partitioned
from .loaders import EntryLoader, entries_from_records

__all__ = [
    "AggregationEntry",
    "Amount",
    "CurrencyGroup",
    "CurrencyTag",
    "Summary",
    "UNRECOGNIZED_AMOUNT",
    "AmountParser",
    "CurrencyRegistry",
    "get_default_registry",
    "parse",
    "AmountFormatter",
    "format_amount",
    "merge_summaries",
    "summarize",
    "summarize_partitioned",
    "EntryLoader",
    "entries_from_records",
]
