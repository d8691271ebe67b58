"""Core aggregation components for prize pool reporting."""

from .aggregator import merge_summaries, summarize, summarize_partitioned

__all__ = [
    "merge_summaries",
    "summarize",
    "summarize_partitioned",
]
