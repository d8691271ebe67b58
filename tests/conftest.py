import json
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"

for path in (REPO_ROOT, SRC_ROOT):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from prizepool.config import PrizepoolConfigManager  # noqa: E402
from prizepool.normalizers import AmountParser, CurrencyRegistry  # noqa: E402

BUNDLED_CONFIG = SRC_ROOT / "prizepool" / "config" / "normalizer_config.json"


@pytest.fixture
def config_data():
    """A fresh, mutable copy of the bundled normalizer config."""
    with open(BUNDLED_CONFIG, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def write_config(tmp_path):
    """Write a config dict to a temp directory and return that directory."""

    def _write(data):
        (tmp_path / "normalizer_config.json").write_text(
            json.dumps(data, ensure_ascii=False), encoding="utf-8"
        )
        return tmp_path

    return _write


@pytest.fixture(scope="session")
def config_manager():
    return PrizepoolConfigManager()


@pytest.fixture(scope="session")
def registry(config_manager):
    return CurrencyRegistry(config_manager)


@pytest.fixture(scope="session")
def parser(config_manager, registry):
    return AmountParser(config_manager, registry)
