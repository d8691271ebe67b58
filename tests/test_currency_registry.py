import pytest

from common.validation import ConfigValidationError
from prizepool.config import PrizepoolConfigManager
from prizepool.models import CurrencyTag
from prizepool.normalizers import AliasKind, CurrencyRegistry, get_default_registry


class TestDetect:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("$1,000,000", CurrencyTag.USD),
            ("€500K", CurrencyTag.EUR),
            ("£750", CurrencyTag.GBP),
            ("¥100,000,000", CurrencyTag.JPY),
            ("₹50,00,000", CurrencyTag.INR),
            ("₩1,000,000,000", CurrencyTag.KRW),
            ("1.5 Million USD", CurrencyTag.USD),
            ("1.000.000 EUR", CurrencyTag.EUR),
            ("500 gbp", CurrencyTag.GBP),
            ("50000 Chinese Yuan", CurrencyTag.CNY),
            ("5,000,000 CNY", CurrencyTag.CNY),
            ("100,000 Indonesian Rupiah", CurrencyTag.IDR),
            ("750 thousand dollars", CurrencyTag.USD),
        ],
    )
    def test_detects_currency(self, registry, raw, expected):
        assert registry.detect(raw) == expected

    @pytest.mark.parametrize("raw", ["5000", "", None, "Eurasia Cup 5000"])
    def test_falls_back_to_usd(self, registry, raw):
        assert registry.detect(raw) == CurrencyTag.USD

    def test_symbol_beats_code(self, registry):
        assert registry.detect("€500 (approx 550 USD)") == CurrencyTag.EUR

    def test_longest_name_wins(self, registry):
        assert registry.detect("Singapore dollars 5000") == CurrencyTag.SGD
        assert registry.detect("5000 danish krone") == CurrencyTag.DKK
        assert registry.detect("5000 krone") == CurrencyTag.NOK

    def test_names_are_whole_words(self, registry):
        # "yen" must not match inside "Yenisei"
        assert registry.detect("Yenisei Cup 5000") == CurrencyTag.USD

    @pytest.mark.parametrize(
        "raw", ["Real money prize 5000", "Won 5000 in the final", "500 pounds", "Rand Cup 5000", "50,000 RM"]
    )
    def test_strip_only_words_do_not_detect(self, registry, raw):
        assert registry.detect(raw) == CurrencyTag.USD

    def test_full_names_still_detect(self, registry):
        assert registry.detect("5000 brazilian real") == CurrencyTag.BRL
        assert registry.detect("5000 british pound") == CurrencyTag.GBP
        assert registry.detect("1,000,000 korean won") == CurrencyTag.KRW


class TestYenCollision:
    def test_glyph_detects_jpy(self, registry):
        assert registry.detect("¥5000") == CurrencyTag.JPY

    def test_name_and_code_detect_cny(self, registry):
        assert registry.detect("5000 yuan") == CurrencyTag.CNY
        assert registry.detect("5000 cny") == CurrencyTag.CNY

    def test_both_display_as_yen(self, registry):
        assert registry.symbol_for(CurrencyTag.JPY) == "¥"
        assert registry.symbol_for(CurrencyTag.CNY) == "¥"


class TestAliasTable:
    def test_symbols_first_in_configured_order(self, registry):
        symbols = [a.alias for a in registry.aliases if a.kind == AliasKind.SYMBOL]
        assert symbols == ["€", "£", "¥", "₹", "₽", "₩", "฿", "$"]
        assert [a.kind for a in registry.aliases[: len(symbols)]] == [AliasKind.SYMBOL] * len(symbols)

    def test_kinds_are_grouped_in_matching_order(self, registry):
        order = [AliasKind.SYMBOL, AliasKind.NAME, AliasKind.CODE, AliasKind.STRIP]
        ranks = [order.index(a.kind) for a in registry.aliases]
        assert ranks == sorted(ranks)

    def test_names_are_longest_first(self, registry):
        lengths = [len(a.alias) for a in registry.aliases if a.kind == AliasKind.NAME]
        assert lengths == sorted(lengths, reverse=True)

    def test_every_tag_has_a_symbol(self, registry):
        for tag in CurrencyTag:
            assert registry.symbol_for(tag)

    def test_aliases_for(self, registry):
        aliases = {a.alias for a in registry.aliases_for(CurrencyTag.EUR)}
        assert aliases == {"€", "euro", "euros", "eur"}

    def test_aliases_are_immutable(self, registry):
        with pytest.raises(AttributeError):
            registry.aliases[0].tag = CurrencyTag.GBP


class TestStrip:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("$1,000,000", "1,000,000"),
            ("1.5 Million USD", "1.5 Million"),
            ("750 thousand dollars", "750 thousand"),
            ("2.500.000,50 €", "2.500.000,50"),
            ("100,000 Indonesian Rupiah", "100,000"),
            ("50,000 RM", "50,000"),
            ("Real money prize 5000", "money prize 5000"),
            ("5.000 kr", "5.000"),
        ],
    )
    def test_strips_aliases(self, registry, raw, expected):
        assert registry.strip(raw) == expected


def test_ambiguous_alias_is_rejected(config_data, write_config):
    config_data["currencies"]["CNY"]["names"].append("yen")
    with pytest.raises(ConfigValidationError, match="yen"):
        CurrencyRegistry(PrizepoolConfigManager(write_config(config_data)))


def test_default_registry_is_shared():
    assert get_default_registry() is get_default_registry()


def test_shared_strip_only_alias_is_not_ambiguous(registry):
    kinds = {(a.kind, a.alias, a.tag) for a in registry.aliases if a.alias == "kr"}
    assert {tag for _, _, tag in kinds} == {CurrencyTag.NOK, CurrencyTag.SEK, CurrencyTag.DKK}
    assert all(kind == AliasKind.STRIP for kind, _, _ in kinds)
