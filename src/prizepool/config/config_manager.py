"""Configuration manager for the prize pool normalization engine."""

import json
import logging
from pathlib import Path
from typing import Any, Optional
from pydantic import BaseModel, Field, ConfigDict

from common.validation import ConfigValidationError
from ..models import CurrencyTag

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("default_currency", "placeholders", "multipliers", "symbols", "currencies")


class PrizepoolSettings(BaseModel):
    """Runtime settings for parsing, display and aggregation.

    Unlike the normalizer tables these are not loaded from JSON; they are
    plain defaults that callers may override when building an engine.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,  # Immutable configuration
    )

    unrecognized_placeholder: str = Field(
        default="TBD", description="Display text for unrecognized amounts"
    )
    top_currencies: int = Field(
        default=2, ge=1, description="Currencies shown in a combined summary line"
    )
    display_limit: int = Field(
        default=20, ge=1, description="Maximum rows shown per table"
    )
    partition_count: int = Field(
        default=1, ge=1, description="Partitions used when summarizing large batches"
    )


class PrizepoolConfigManager:
    """Manages configuration for prize pool normalization.

    Loads the normalizer tables (placeholders, multiplier suffixes, currency
    symbols, names and codes) from JSON and provides validated accessors.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        settings: Optional[PrizepoolSettings] = None,
    ):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config directory. Defaults to this module's dir.
            settings: Optional runtime settings. Defaults are used if None.
        """
        if config_path is None:
            config_path = Path(__file__).parent

        self.config_path = config_path
        self.normalizer_config_path = config_path / "normalizer_config.json"

        self._load_normalizer_config()
        self.settings = settings or PrizepoolSettings()

    def _load_normalizer_config(self) -> None:
        """Load and validate normalizer configuration from JSON file."""
        try:
            with open(self.normalizer_config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Normalizer config not found at {self.normalizer_config_path}"
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in normalizer config: {e}") from e

        self._validate(data)
        self.normalizer_config: dict[str, Any] = data

        logger.info(
            f"Loaded {len(data['currencies'])} currencies, {len(data['symbols'])} symbols, "
            f"{len(data['multipliers'])} multiplier suffixes from {self.normalizer_config_path}"
        )

    @staticmethod
    def _validate(data: Any) -> None:
        """Check the structure of the normalizer config.

        Raises:
            ConfigValidationError: If a section is missing or inconsistent
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Normalizer config must be a dictionary")

        missing = [section for section in REQUIRED_SECTIONS if section not in data]
        if missing:
            raise ConfigValidationError(
                f"Normalizer config is missing sections: {', '.join(missing)}"
            )

        known_codes = {tag.value for tag in CurrencyTag}

        if data["default_currency"] not in known_codes:
            raise ConfigValidationError(
                "Unknown default currency",
                json_path="default_currency",
                value=data["default_currency"],
            )

        for suffix, factor in data["multipliers"].items():
            if not isinstance(factor, int) or isinstance(factor, bool) or factor <= 0:
                raise ConfigValidationError(
                    "Multiplier must be a positive integer",
                    json_path=f"multipliers.{suffix}",
                    value=factor,
                )

        for position, symbol in enumerate(data["symbols"]):
            glyph = symbol.get("glyph", "")
            if len(glyph) != 1:
                raise ConfigValidationError(
                    "Symbol glyph must be a single character",
                    json_path=f"symbols[{position}].glyph",
                    value=glyph,
                )
            if symbol.get("currency") not in known_codes:
                raise ConfigValidationError(
                    "Unknown currency for symbol",
                    json_path=f"symbols[{position}].currency",
                    value=symbol.get("currency"),
                )

        currencies = data["currencies"]
        unknown = sorted(set(currencies) - known_codes)
        if unknown:
            raise ConfigValidationError(
                "Unknown currency codes in config",
                json_path="currencies",
                value=unknown,
            )
        undefined = sorted(known_codes - set(currencies))
        if undefined:
            raise ConfigValidationError(
                "Currency tags without a definition",
                json_path="currencies",
                value=undefined,
            )
        for code, definition in currencies.items():
            if not definition.get("symbol"):
                raise ConfigValidationError(
                    "Currency needs a display symbol",
                    json_path=f"currencies.{code}.symbol",
                )

    def get_placeholders(self) -> frozenset[str]:
        """Get lower-case placeholder values meaning "no amount".

        Returns:
            Frozen set of placeholder strings
        """
        return frozenset(p.strip().lower() for p in self.normalizer_config["placeholders"])

    def get_multipliers(self) -> dict[str, int]:
        """Get magnitude suffix mappings from config.

        Returns:
            dict mapping lower-case suffixes to integer multipliers
        """
        return {
            suffix.lower(): factor
            for suffix, factor in self.normalizer_config["multipliers"].items()
        }

    def get_symbol_mappings(self) -> list[tuple[str, CurrencyTag]]:
        """Get single-character symbols in matching order.

        Returns:
            List of (glyph, tag) pairs
        """
        return [
            (symbol["glyph"], CurrencyTag(symbol["currency"]))
            for symbol in self.normalizer_config["symbols"]
        ]

    def get_currency_definitions(self) -> dict[CurrencyTag, dict[str, Any]]:
        """Get display symbol, names and codes per currency.

        Returns:
            dict mapping tags to their definitions
        """
        return {
            CurrencyTag(code): definition
            for code, definition in self.normalizer_config["currencies"].items()
        }

    def get_default_currency(self) -> CurrencyTag:
        """Get the currency assumed when nothing in the text matches."""
        return CurrencyTag(self.normalizer_config["default_currency"])

    def reload_config(self) -> None:
        """Reload configuration from files.

        Useful for development and testing when config files change.
        """
        self._load_normalizer_config()
