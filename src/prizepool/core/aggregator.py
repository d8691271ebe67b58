"""Grouping and ranking of parsed prize pools by currency."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from ..models import AggregationEntry, CurrencyGroup, CurrencyTag, Summary

logger = logging.getLogger(__name__)


def _build_group(
    tag: CurrencyTag,
    entries: list[AggregationEntry],
    first_index: int,
) -> CurrencyGroup:
    """Sort one currency's entries and compute its statistics.

    Python's sort is stable, so entries with equal amounts keep their
    input order.
    """
    ranked = sorted(entries, key=lambda entry: entry.major_units, reverse=True)
    count = len(ranked)
    total = sum(entry.major_units for entry in ranked)
    return CurrencyGroup(
        tag=tag,
        entries=tuple(ranked),
        count=count,
        total_value=total,
        average_value=_average(total, count),
        max_value=ranked[0].major_units,
        min_value=ranked[-1].major_units,
        first_index=first_index,
    )


def _average(total: int, count: int) -> float:
    try:
        return total / count
    except OverflowError:
        return float("inf")


def _rank_groups(groups: Iterable[CurrencyGroup]) -> tuple[CurrencyGroup, ...]:
    """Order groups by total, largest first, ties by first appearance."""
    return tuple(sorted(groups, key=lambda group: (-group.total_value, group.first_index)))


def summarize(entries: Iterable[AggregationEntry]) -> Summary:
    """Group entries by currency and rank the groups.

    Unrecognized amounts ("TBD", empty, garbage) are left out of every group;
    how many were left out is reported as ``unrecognized_count``.

    Args:
        entries: Entries in input order

    Returns:
        Summary with groups sorted by total value, largest first
    """
    buckets: dict[CurrencyTag, list[AggregationEntry]] = {}
    first_seen: dict[CurrencyTag, int] = {}
    total_entries = 0
    unrecognized = 0

    for index, entry in enumerate(entries):
        total_entries += 1
        if not entry.amount.recognized:
            unrecognized += 1
            continue
        tag = entry.amount.tag
        if tag not in buckets:
            buckets[tag] = []
            first_seen[tag] = index
        buckets[tag].append(entry)

    groups = _rank_groups(
        _build_group(tag, bucket, first_seen[tag]) for tag, bucket in buckets.items()
    )

    logger.debug(
        f"Summarized {total_entries} entries into {len(groups)} currency groups "
        f"({unrecognized} unrecognized)"
    )
    return Summary(
        groups=groups,
        total_entries=total_entries,
        unrecognized_count=unrecognized,
    )


def merge_summaries(partials: Sequence[Summary]) -> Summary:
    """Merge summaries of consecutive partitions of one input list.

    Partitions must be given in input order. Counts and totals are summed,
    extremes and averages recomputed, and ordering re-derived so that the
    result equals ``summarize`` over the whole input.

    Args:
        partials: Per-partition summaries, in input order

    Returns:
        Merged Summary
    """
    merged: dict[CurrencyTag, dict] = {}
    offset = 0
    total_entries = 0
    unrecognized = 0

    for partial in partials:
        for group in partial.groups:
            state = merged.get(group.tag)
            if state is None:
                state = {
                    "entries": [],
                    "count": 0,
                    "total": 0,
                    "max": group.max_value,
                    "min": group.min_value,
                    "first_index": offset + group.first_index,
                }
                merged[group.tag] = state
            state["entries"].extend(group.entries)
            state["count"] += group.count
            state["total"] += group.total_value
            state["max"] = max(state["max"], group.max_value)
            state["min"] = min(state["min"], group.min_value)
        offset += partial.total_entries
        total_entries += partial.total_entries
        unrecognized += partial.unrecognized_count

    groups = []
    for tag, state in merged.items():
        groups.append(
            CurrencyGroup(
                tag=tag,
                # Each partition is already ranked; a stable re-sort keeps
                # equal amounts in partition order, i.e. input order.
                entries=tuple(
                    sorted(state["entries"], key=lambda entry: entry.major_units, reverse=True)
                ),
                count=state["count"],
                total_value=state["total"],
                average_value=_average(state["total"], state["count"]),
                max_value=state["max"],
                min_value=state["min"],
                first_index=state["first_index"],
            )
        )

    return Summary(
        groups=_rank_groups(groups),
        total_entries=total_entries,
        unrecognized_count=unrecognized,
    )


def summarize_partitioned(
    entries: Sequence[AggregationEntry],
    partitions: int = 2,
    max_workers: Optional[int] = None,
) -> Summary:
    """Summarize contiguous partitions in a thread pool and merge the results.

    Args:
        entries: Entries in input order
        partitions: Number of partitions to split the input into
        max_workers: Thread pool size (defaults to the partition count)

    Returns:
        Summary identical to ``summarize(entries)``
    """
    if partitions < 1:
        raise ValueError(f"partitions must be at least 1, got {partitions}")

    entries = list(entries)
    if partitions == 1 or len(entries) <= 1:
        return summarize(entries)

    size = -(-len(entries) // partitions)
    chunks = [entries[start:start + size] for start in range(0, len(entries), size)]

    with ThreadPoolExecutor(max_workers=max_workers or len(chunks)) as executor:
        # map() yields results in submission order, which merging relies on
        partials = list(executor.map(summarize, chunks))

    logger.debug(f"Merged {len(partials)} partition summaries over {len(entries)} entries")
    return merge_summaries(partials)
