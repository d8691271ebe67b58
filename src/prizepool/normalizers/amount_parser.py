"""Prize pool text parser producing canonical amounts."""

import logging
import re
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_EVEN
from functools import lru_cache
from typing import Optional

from ..config import PrizepoolConfigManager
from ..models import Amount, UNRECOGNIZED_AMOUNT
from .currency_registry import CurrencyRegistry, get_default_registry
from .multiplier_resolver import MultiplierResolver
from .separator_disambiguator import normalize_separators

logger = logging.getLogger(__name__)

NON_NUMERIC = re.compile(r"[^0-9.]")
# Leading number, read the way parseFloat reads a prefix: "1.2.3" -> "1.2"
LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class AmountParser:
    """Turns free-text prize pools into canonical amounts.

    Handles currency symbols, names and ISO codes, K/M/B suffixes, and
    European or US separator conventions. Parsing never raises: anything
    without a usable positive number becomes the unrecognized sentinel.
    """

    def __init__(
        self,
        config_manager: Optional[PrizepoolConfigManager] = None,
        registry: Optional[CurrencyRegistry] = None,
    ):
        """Initialize parser.

        Args:
            config_manager: Optional config manager. Creates default if None.
            registry: Optional currency registry. Built from config_manager if None.
        """
        self.config_manager = config_manager or PrizepoolConfigManager()
        self.registry = registry or CurrencyRegistry(self.config_manager)
        self.multiplier_resolver = MultiplierResolver(self.config_manager)
        self.placeholders = self.config_manager.get_placeholders()

    def is_placeholder(self, raw: Optional[str]) -> bool:
        """Check whether the text is empty or a known placeholder such as "TBD"."""
        if raw is None:
            return True
        value = raw.strip().lower()
        return not value or value in self.placeholders

    def parse(self, raw: Optional[str]) -> Amount:
        """Parse a raw prize pool string.

        Args:
            raw: Text as emitted by the data provider (e.g. "$1,000,000",
                "€2.5M", "1.000.000 EUR", "TBD")

        Returns:
            Recognized Amount in whole units, or UNRECOGNIZED_AMOUNT
        """
        if not isinstance(raw, str) or self.is_placeholder(raw):
            return UNRECOGNIZED_AMOUNT

        tag = self.registry.detect(raw)

        working = self.registry.strip(raw)
        multiplier, working = self.multiplier_resolver.resolve(working)
        working = normalize_separators(working)
        working = NON_NUMERIC.sub("", working)

        value = self._read_number(working)
        if value is None or value <= 0:
            logger.debug(f"No usable number in prize pool '{raw}'")
            return UNRECOGNIZED_AMOUNT

        try:
            major_units = int((value * multiplier).to_integral_value(rounding=ROUND_HALF_EVEN))
        except (DecimalException, OverflowError) as e:
            logger.warning(f"Unable to scale prize pool '{raw}': {e}")
            return UNRECOGNIZED_AMOUNT

        amount = Amount.of(tag, major_units)
        logger.debug(f"Parsed prize pool '{raw}' -> {amount}")
        return amount

    @staticmethod
    def _read_number(text: str) -> Optional[Decimal]:
        match = LEADING_NUMBER.match(text)
        if not match:
            return None
        try:
            return Decimal(match.group(0))
        except InvalidOperation:
            return None


@lru_cache(maxsize=1)
def get_default_parser() -> AmountParser:
    """Get the process-wide parser sharing the default registry."""
    registry = get_default_registry()
    return AmountParser(registry.config_manager, registry)


def parse(raw: Optional[str]) -> Amount:
    """Parse a raw prize pool string with the default parser."""
    return get_default_parser().parse(raw)
