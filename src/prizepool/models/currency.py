"""Canonical currency identifiers for prize pool normalization."""

from enum import Enum


class CurrencyTag(str, Enum):
    """Canonical currency tag, decoupled from any textual alias or glyph.

    Display symbols and recognized aliases are configured in the currency
    registry; the tag itself only carries the ISO code.
    """

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    INR = "INR"
    RUB = "RUB"
    CNY = "CNY"
    KRW = "KRW"
    THB = "THB"
    SGD = "SGD"
    MYR = "MYR"
    PHP = "PHP"
    VND = "VND"
    BRL = "BRL"
    MXN = "MXN"
    CAD = "CAD"
    AUD = "AUD"
    NZD = "NZD"
    ZAR = "ZAR"
    TRY = "TRY"
    PLN = "PLN"
    CZK = "CZK"
    HUF = "HUF"
    NOK = "NOK"
    SEK = "SEK"
    DKK = "DKK"
    CHF = "CHF"
    IDR = "IDR"
