"""Canonical amount model produced by the prize pool parser."""

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .currency import CurrencyTag


def group_digits(value: int) -> str:
    """Render an integer with comma thousands grouping.

    Goes through Decimal so that very long values do not hit the
    interpreter's int-to-str digit limit.
    """
    return f"{Decimal(value):,}"


class Amount(BaseModel):
    """A prize pool expressed in whole units of a single currency.

    ``recognized=False`` marks input that carried no usable number
    (placeholders such as "TBD", empty strings, garbage). Such an amount is
    never a real zero-value prize pool and always has ``major_units == 0``.
    """

    model_config = ConfigDict(
        frozen=True,  # Value object, shared freely between callers
        validate_assignment=True,
    )

    tag: CurrencyTag = Field(..., description="Canonical currency tag")
    major_units: int = Field(..., ge=0, description="Amount in whole currency units")
    recognized: bool = Field(..., description="False for placeholder or unparseable input")

    @model_validator(mode="after")
    def _unrecognized_has_no_units(self) -> "Amount":
        if not self.recognized and self.major_units != 0:
            raise ValueError("Unrecognized amounts must have zero major units")
        return self

    @classmethod
    def of(cls, tag: CurrencyTag, major_units: int) -> "Amount":
        """Build a recognized amount."""
        return cls(tag=tag, major_units=major_units, recognized=True)

    def __str__(self) -> str:
        if not self.recognized:
            return "Amount(unrecognized)"
        return f"Amount({self.tag.value} {group_digits(self.major_units)})"


UNRECOGNIZED_AMOUNT = Amount(tag=CurrencyTag.USD, major_units=0, recognized=False)
