import json

import pytest
from rich.console import Console

from prizepool.cli import PrizepoolDisplay
from prizepool.config import PrizepoolConfigManager, PrizepoolSettings
from prizepool.formatters import AmountFormatter
from prizepool.main import PrizepoolEngine, main
from prizepool.models import CurrencyTag
from prizepool.normalizers import CurrencyRegistry


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def entries_file(tmp_path):
    path = tmp_path / "tournaments.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Worlds", "prizepool": "$2,225,000"},
                {"id": 2, "name": "MSI", "prizepool": "$250,000"},
                {"id": 3, "name": "LEC Finals", "prizepool": "€200K"},
                {"id": 4, "name": "Regional Cup", "prizepool": "TBD"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def recording_engine():
    config_manager = PrizepoolConfigManager(settings=PrizepoolSettings(partition_count=2))
    formatter = AmountFormatter(CurrencyRegistry(config_manager), config_manager.settings)
    display = PrizepoolDisplay(formatter, Console(record=True, width=200))
    return PrizepoolEngine(config_manager, display)


def test_engine_parse_values(recording_engine):
    entries = recording_engine.parse_values(["$1,000,000", "TBD"])

    assert [entry.amount.recognized for entry in entries] == [True, False]
    output = recording_engine.display.console.export_text()
    assert "$1.0M" in output
    assert "TBD" in output


def test_engine_run_summary(recording_engine, entries_file):
    summary = recording_engine.run_summary(entries_file, show_entries=True)

    assert [group.tag for group in summary.groups] == [CurrencyTag.USD, CurrencyTag.EUR]
    assert summary.unrecognized_count == 1
    output = recording_engine.display.console.export_text()
    assert "$2.5M + €200.0K" in output
    assert "Worlds" in output


def test_main_parses_values(capsys):
    main(["$1,000,000", "€500K", "TBD"])
    out = capsys.readouterr().out
    assert "$1.0M" in out
    assert "€500.0K" in out


def test_main_summarizes_file(capsys, entries_file):
    main(["--file", str(entries_file), "--partitions", "2"])
    out = capsys.readouterr().out
    assert "USD" in out
    assert "EUR" in out


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(tmp_path / "absent.json")])
    assert exc_info.value.code == 1


def test_main_bad_file(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(path)])
    assert exc_info.value.code == 1


def test_main_requires_input():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
