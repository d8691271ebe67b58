"""Aggregation data models for grouping prize pools by currency."""

from typing import Any, Callable, Optional
from pydantic import BaseModel, Field, ConfigDict

from .amount import Amount, group_digits
from .currency import CurrencyTag


class AggregationEntry(BaseModel):
    """A single upstream record (e.g. a tournament) with its parsed prize pool.

    ``entry_id``, ``name`` and ``metadata`` belong to the caller and are
    carried through aggregation untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    entry_id: Any = Field(..., description="Caller-supplied identity")
    name: str = Field(default="", description="Display name")
    raw: str = Field(default="", description="Original prize pool text")
    amount: Amount = Field(..., description="Amount derived from raw")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Opaque passthrough fields"
    )

    @classmethod
    def from_raw(
        cls,
        entry_id: Any,
        name: str,
        raw: Optional[str],
        metadata: Optional[dict[str, Any]] = None,
        parser: Optional[Callable[[Optional[str]], Amount]] = None,
    ) -> "AggregationEntry":
        """Create an entry by parsing its raw prize pool text.

        Args:
            entry_id: Caller identity (tournament id, row number...)
            name: Display name
            raw: Raw prize pool text, None is treated as empty
            metadata: Extra fields to pass through
            parser: Parse function, defaults to the shared parser

        Returns:
            New AggregationEntry
        """
        if parser is None:
            from ..normalizers.amount_parser import parse as parser

        return cls(
            entry_id=entry_id,
            name=name or "",
            raw=raw or "",
            amount=parser(raw),
            metadata=dict(metadata or {}),
        )

    @property
    def major_units(self) -> int:
        return self.amount.major_units

    @property
    def tag(self) -> CurrencyTag:
        return self.amount.tag

    def __str__(self) -> str:
        return f"AggregationEntry({self.entry_id}: {self.name!r} {self.raw!r} -> {self.amount})"


class CurrencyGroup(BaseModel):
    """All recognized entries for one currency, with summary statistics."""

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    tag: CurrencyTag = Field(..., description="Currency shared by every entry")
    entries: tuple[AggregationEntry, ...] = Field(
        ..., description="Entries sorted by major units, largest first"
    )
    count: int = Field(..., ge=1)
    total_value: int = Field(..., ge=0)
    average_value: float = Field(..., ge=0)
    max_value: int = Field(..., ge=0)
    min_value: int = Field(..., ge=0)
    first_index: int = Field(
        default=0, ge=0, description="Input position of the group's first entry"
    )

    @property
    def summary_line(self) -> str:
        """One-line summary for logs and display."""
        return (
            f"{self.tag.value}: {self.count} entries | total {group_digits(self.total_value)} | "
            f"max {group_digits(self.max_value)} | min {group_digits(self.min_value)}"
        )


class Summary(BaseModel):
    """Ranked per-currency groups for a batch of entries."""

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    groups: tuple[CurrencyGroup, ...] = Field(
        default=(), description="Groups sorted by total value, largest first"
    )
    total_entries: int = Field(default=0, ge=0, description="Entries examined")
    unrecognized_count: int = Field(
        default=0, ge=0, description="Entries excluded because their amount was unrecognized"
    )

    @property
    def recognized_count(self) -> int:
        return self.total_entries - self.unrecognized_count

    @property
    def currencies_found(self) -> int:
        return len(self.groups)

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def get_group(self, tag: CurrencyTag) -> Optional[CurrencyGroup]:
        """Get the group for a currency, or None if it has no entries."""
        for group in self.groups:
            if group.tag == tag:
                return group
        return None
