"""Currency registry: ordered alias table shared by the parser and formatter."""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Optional, Pattern

from common.validation import ConfigValidationError
from ..config import PrizepoolConfigManager
from ..models import CurrencyTag

logger = logging.getLogger(__name__)


class AliasKind(str, Enum):
    """How an alias is matched against raw text."""
    SYMBOL = "symbol"  # Single glyph, matched anywhere
    NAME = "name"  # Whole-word phrase, case-insensitive
    CODE = "code"  # Whole-word ISO code, case-insensitive
    STRIP = "strip"  # Whole-word, removed from the text but never picks a tag


@dataclass(frozen=True)
class CurrencyAlias:
    """One row of the registry table."""

    alias: str
    tag: CurrencyTag
    kind: AliasKind
    pattern: Pattern[str] = field(compare=False, repr=False)

    @classmethod
    def build(cls, alias: str, tag: CurrencyTag, kind: AliasKind) -> "CurrencyAlias":
        if kind == AliasKind.SYMBOL:
            pattern = re.compile(re.escape(alias))
        else:
            pattern = re.compile(rf"\b{re.escape(alias)}\b", re.IGNORECASE)
        return cls(alias=alias, tag=tag, kind=kind, pattern=pattern)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class CurrencyRegistry:
    """Maps currency symbols, names and ISO codes to canonical tags.

    The alias table is built once and matched strictly in order: symbols in
    configured order, then names longest first, then codes longest first.
    Strip-only aliases (common English words such as "real" or "won", and
    letter glyphs such as "RM") come last; they are removed before number
    extraction but never decide the currency.
    When nothing matches, the configured default currency (USD) is returned.
    """

    def __init__(self, config_manager: PrizepoolConfigManager):
        """Build the registry table from configuration.

        Args:
            config_manager: Configuration manager with currency definitions

        Raises:
            ConfigValidationError: If an alias maps to more than one tag
        """
        self.config_manager = config_manager
        self.default_tag = config_manager.get_default_currency()

        definitions = config_manager.get_currency_definitions()
        self._symbols: dict[CurrencyTag, str] = {
            tag: definition["symbol"] for tag, definition in definitions.items()
        }

        symbols = [
            CurrencyAlias.build(glyph, tag, AliasKind.SYMBOL)
            for glyph, tag in config_manager.get_symbol_mappings()
        ]
        names = self._build_word_aliases(definitions, "names", AliasKind.NAME)
        codes = self._build_word_aliases(definitions, "codes", AliasKind.CODE)
        strip_only = self._build_word_aliases(definitions, "strip_only", AliasKind.STRIP)

        self.aliases: tuple[CurrencyAlias, ...] = tuple(symbols + names + codes + strip_only)
        self._check_unambiguous()

        logger.info(
            f"Initialized currency registry with {len(symbols)} symbols, "
            f"{len(names)} names, {len(codes)} codes, {len(strip_only)} strip-only aliases"
        )

    @staticmethod
    def _build_word_aliases(
        definitions: dict[CurrencyTag, dict], section: str, kind: AliasKind
    ) -> list[CurrencyAlias]:
        """Flatten one alias section, longest alias first (stable on ties)."""
        aliases = [
            CurrencyAlias.build(alias.strip().lower(), tag, kind)
            for tag, definition in definitions.items()
            for alias in definition.get(section, [])
        ]
        return sorted(aliases, key=lambda a: len(a.alias), reverse=True)

    def _check_unambiguous(self) -> None:
        seen: dict[tuple[AliasKind, str], CurrencyTag] = {}
        for entry in self.aliases:
            if entry.kind == AliasKind.STRIP:
                continue
            key = (entry.kind, entry.alias)
            if key in seen and seen[key] != entry.tag:
                raise ConfigValidationError(
                    f"Alias '{entry.alias}' maps to both {seen[key].value} and {entry.tag.value}",
                    field=entry.kind.value,
                    value=entry.alias,
                )
            seen[key] = entry.tag

    def match(self, raw: Optional[str]) -> Optional[CurrencyAlias]:
        """Find the first detecting alias in table order that occurs in the text.

        Args:
            raw: Raw prize pool text

        Returns:
            Matching alias, or None if nothing in the table occurs
        """
        if not raw:
            return None
        for entry in self.aliases:
            if entry.kind != AliasKind.STRIP and entry.matches(raw):
                return entry
        return None

    def detect(self, raw: Optional[str]) -> CurrencyTag:
        """Detect the currency of a raw prize pool string.

        Args:
            raw: Raw prize pool text

        Returns:
            Matching tag, or the default currency if nothing matches
        """
        entry = self.match(raw)
        if entry is None:
            logger.debug(f"No currency alias in '{raw}', defaulting to {self.default_tag.value}")
            return self.default_tag
        logger.debug(f"Detected currency {entry.tag.value} in '{raw}' via {entry.kind.value} '{entry.alias}'")
        return entry.tag

    def strip(self, raw: str) -> str:
        """Remove every known symbol, name and code from the text.

        Args:
            raw: Raw prize pool text

        Returns:
            Text with currency aliases, strip-only ones included, removed and
            surrounding whitespace trimmed
        """
        stripped = raw
        for entry in self.aliases:
            stripped = entry.pattern.sub("", stripped)
        return stripped.strip()

    def symbol_for(self, tag: CurrencyTag) -> str:
        """Get the display symbol for a currency tag."""
        return self._symbols[tag]

    def aliases_for(self, tag: CurrencyTag) -> list[CurrencyAlias]:
        """Get all aliases resolving to a tag, in matching order."""
        return [entry for entry in self.aliases if entry.tag == tag]


@lru_cache(maxsize=1)
def get_default_registry() -> CurrencyRegistry:
    """Get the process-wide registry built from the bundled configuration."""
    return CurrencyRegistry(PrizepoolConfigManager())
