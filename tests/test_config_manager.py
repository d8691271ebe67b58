import pytest

from common.validation import ConfigValidationError
from prizepool.config import PrizepoolConfigManager, PrizepoolSettings
from prizepool.models import CurrencyTag
from prizepool.normalizers import AmountParser


def test_bundled_config_loads(config_manager):
    assert config_manager.get_default_currency() == CurrencyTag.USD
    assert {"tbd", "to be determined", "n/a", "unknown"} <= config_manager.get_placeholders()
    multipliers = config_manager.get_multipliers()
    assert multipliers["k"] == 1000
    assert multipliers["million"] == 1000000
    assert multipliers["bil"] == 1000000000


def test_symbol_mappings_keep_configured_order(config_manager):
    glyphs = [glyph for glyph, _ in config_manager.get_symbol_mappings()]
    assert glyphs == ["€", "£", "¥", "₹", "₽", "₩", "฿", "$"]


def test_every_tag_has_a_definition(config_manager):
    definitions = config_manager.get_currency_definitions()
    assert set(definitions) == set(CurrencyTag)
    assert all(definition["symbol"] for definition in definitions.values())


def test_default_settings():
    settings = PrizepoolSettings()
    assert settings.unrecognized_placeholder == "TBD"
    assert settings.top_currencies == 2
    assert settings.partition_count == 1


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Normalizer config not found"):
        PrizepoolConfigManager(tmp_path)


def test_invalid_json(tmp_path):
    (tmp_path / "normalizer_config.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigValidationError, match="Invalid JSON"):
        PrizepoolConfigManager(tmp_path)


def test_missing_section(config_data, write_config):
    del config_data["multipliers"]
    with pytest.raises(ConfigValidationError, match="multipliers"):
        PrizepoolConfigManager(write_config(config_data))


def test_unknown_currency_code(config_data, write_config):
    config_data["currencies"]["XXX"] = {"symbol": "X", "names": [], "codes": ["xxx"]}
    with pytest.raises(ConfigValidationError) as exc_info:
        PrizepoolConfigManager(write_config(config_data))
    assert exc_info.value.json_path == "currencies"


@pytest.mark.parametrize("factor", [0, -1000, 1.5, True])
def test_multiplier_must_be_positive_integer(config_data, write_config, factor):
    config_data["multipliers"]["k"] = factor
    with pytest.raises(ConfigValidationError, match="positive integer"):
        PrizepoolConfigManager(write_config(config_data))


def test_symbol_glyph_must_be_single_character(config_data, write_config):
    config_data["symbols"].append({"glyph": "US$", "currency": "USD"})
    with pytest.raises(ConfigValidationError, match="single character"):
        PrizepoolConfigManager(write_config(config_data))


def test_extra_placeholder_is_honoured(config_data, write_config):
    config_data["placeholders"].append("pending")
    parser = AmountParser(PrizepoolConfigManager(write_config(config_data)))

    assert not parser.parse("Pending").recognized
    assert parser.parse("$5,000").major_units == 5000


def test_reload_picks_up_changes(config_data, write_config):
    config_dir = write_config(config_data)
    manager = PrizepoolConfigManager(config_dir)
    assert "pending" not in manager.get_placeholders()

    config_data["placeholders"].append("pending")
    write_config(config_data)
    manager.reload_config()

    assert "pending" in manager.get_placeholders()
