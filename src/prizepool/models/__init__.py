"""Prize pool normalization data models."""

from .currency import CurrencyTag
from .amount import Amount, UNRECOGNIZED_AMOUNT, group_digits
from .aggregation import AggregationEntry, CurrencyGroup, Summary

__all__ = [
    "CurrencyTag",
    "Amount",
    "UNRECOGNIZED_AMOUNT",
    "group_digits",
    "AggregationEntry",
    "CurrencyGroup",
    "Summary",
]
