"""Normalizers turning raw prize pool text into canonical amounts."""

from .currency_registry import AliasKind, CurrencyAlias, CurrencyRegistry, get_default_registry
from .multiplier_resolver import MultiplierResolver
from .separator_disambiguator import normalize_separators
from .amount_parser import AmountParser, get_default_parser, parse

__all__ = [
    "AliasKind",
    "CurrencyAlias",
    "CurrencyRegistry",
    "get_default_registry",
    "MultiplierResolver",
    "normalize_separators",
    "AmountParser",
    "get_default_parser",
    "parse",
]
