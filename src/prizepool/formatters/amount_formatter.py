"""Compact display formatting for canonical amounts."""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from ..config import PrizepoolSettings
from ..models import Amount, CurrencyTag, Summary, group_digits
from ..normalizers import CurrencyRegistry, get_default_registry

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal("0.1")

# (threshold, suffix), largest first
AMOUNT_SCALES = (
    (10 ** 6, "M"),
    (10 ** 3, "K"),
)
TOTAL_SCALES = ((10 ** 9, "B"),) + AMOUNT_SCALES


class AmountFormatter:
    """Renders amounts as short strings such as "$1.5M" or "€500.0K".

    The currency symbol always comes from the registry, the same one the
    parser uses for detection. Formatting is lossy: K/M values keep one
    decimal, so parsing a formatted value is not a round trip.
    """

    def __init__(
        self,
        registry: Optional[CurrencyRegistry] = None,
        settings: Optional[PrizepoolSettings] = None,
    ):
        """Initialize formatter.

        Args:
            registry: Currency registry. Uses the default registry if None.
            settings: Display settings. Uses the registry's config settings if None.
        """
        self.registry = registry or get_default_registry()
        self.settings = settings or self.registry.config_manager.settings

    @property
    def placeholder(self) -> str:
        return self.settings.unrecognized_placeholder

    def format(self, amount: Amount) -> str:
        """Format a single amount.

        Args:
            amount: Parsed amount

        Returns:
            "TBD" for unrecognized amounts, otherwise symbol plus scaled value
            (e.g. "$1.5M", "€500.0K", "£750")
        """
        if not amount.recognized:
            return self.placeholder
        return self._render(amount.major_units, amount.tag, AMOUNT_SCALES)

    def format_total(self, major_units: int, tag: CurrencyTag) -> str:
        """Format an aggregated total, adding a billions tier.

        Args:
            major_units: Total in whole currency units
            tag: Currency of the total

        Returns:
            Display string such as "₩1.2B"
        """
        return self._render(major_units, tag, TOTAL_SCALES)

    def format_summary(self, summary: Summary, top: Optional[int] = None) -> str:
        """Format the largest currency totals of a summary on one line.

        Args:
            summary: Aggregated summary
            top: Number of currencies to include (defaults to settings.top_currencies)

        Returns:
            "TBD" for an empty summary, otherwise totals joined with " + "
            (e.g. "$2.5M + €800.0K")
        """
        if summary.is_empty:
            return self.placeholder
        limit = top if top is not None else self.settings.top_currencies
        return " + ".join(
            self.format_total(group.total_value, group.tag)
            for group in summary.groups[:limit]
        )

    def _render(self, major_units: int, tag: CurrencyTag, scales: tuple) -> str:
        symbol = self.registry.symbol_for(tag)
        for threshold, suffix in scales:
            if major_units >= threshold:
                return f"{symbol}{self._scale(major_units, threshold)}{suffix}"
        return f"{symbol}{group_digits(major_units)}"

    @staticmethod
    def _scale(major_units: int, threshold: int) -> str:
        value = Decimal(major_units)
        with localcontext() as ctx:
            # Enough precision for the full integer part plus one decimal
            ctx.prec = max(ctx.prec, value.adjusted() + 3)
            scaled = (value / threshold).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
        return f"{scaled:f}"


def format_amount(amount: Amount) -> str:
    """Format an amount with the default registry."""
    return AmountFormatter().format(amount)
