"""Tests for analysis CLI commands."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from journalcorr.cli import cli


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer JOURNALCORR_* variables out of the tests."""
    for name in (
        "JOURNALCORR_JOURNAL_PATH",
        "JOURNALCORR_THRESHOLD",
        "JOURNALCORR_SORT_BY_MAGNITUDE",
        "JOURNALCORR_DEGENERATE_POLICY",
        "JOURNALCORR_STRICT_EVENTS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def journal_file(tmp_path: Path) -> Path:
    path = tmp_path / "journal.json"
    path.write_text(json.dumps([
        {"events": ["coffee", "work"], "outcome": True},
        {"events": ["coffee", "weekend"], "outcome": True},
        {"events": ["tea", "work"], "outcome": True},
        {"events": ["coffee", "work"], "outcome": False},
        {"events": ["tea", "weekend"], "outcome": False},
        {"events": ["work"], "outcome": False},
    ]))
    return path


def _invoke(runner, config_path, *args):
    return runner.invoke(cli, ["analyze", *args, "--config", str(config_path)])


def test_events_json(runner, config_path, reference_vocabulary):
    """Test events command lists the reference vocabulary."""
    result = _invoke(runner, config_path, "events", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["events"] == reference_vocabulary
    assert data["total"] == 26


def test_events_does_not_write_config(runner, config_path):
    """Test analysis commands never create the settings file."""
    result = _invoke(runner, config_path, "events")

    assert result.exit_code == 0
    assert "Journal Events" in result.output
    assert not config_path.exists()


def test_table_json(runner, config_path):
    """Test table command with JSON output."""
    result = _invoke(runner, config_path, "table", "pizza", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"event": "pizza", "table": [76, 9, 4, 1], "total": 90}


def test_table_rich(runner, config_path):
    result = _invoke(runner, config_path, "table", "pizza")

    assert result.exit_code == 0
    assert "Event absent" in result.output
    assert "Event present" in result.output
    assert "76" in result.output


def test_correlate_json(runner, config_path):
    result = _invoke(runner, config_path, "correlate", "brushed teeth", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["event"] == "brushed teeth"
    assert data["coefficient"] == pytest.approx(-0.3805211953235953, abs=1e-9)
    assert data["direction"] == "negative"
    assert data["degenerate"] is False


def test_correlate_degenerate_event(runner, config_path):
    """Test an event that never occurs reports an undefined coefficient."""
    result = _invoke(runner, config_path, "correlate", "skydiving")

    assert result.exit_code == 1
    assert "DEGENERATE_TABLE" in result.output


def test_correlate_unknown_event_strict(runner, config_path, monkeypatch):
    monkeypatch.setenv("JOURNALCORR_STRICT_EVENTS", "true")

    result = _invoke(runner, config_path, "correlate", "skydiving")

    assert result.exit_code == 1
    assert "UNKNOWN_EVENT" in result.output


def test_rank_json(runner, config_path, reference_significant):
    """Test rank command returns significant events in journal order."""
    result = _invoke(runner, config_path, "rank", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["threshold"] == 0.1
    assert data["total"] == 7
    assert [r["event"] for r in data["results"]] == [e for e, _ in reference_significant]


def test_rank_sorted(runner, config_path):
    result = _invoke(runner, config_path, "rank", "--threshold", "0.2", "--sort", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [r["event"] for r in data["results"]] == ["peanuts", "brushed teeth", "spaghetti"]


def test_rank_threshold_from_env(runner, config_path, monkeypatch):
    monkeypatch.setenv("JOURNALCORR_THRESHOLD", "0.3")

    result = _invoke(runner, config_path, "rank", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["threshold"] == 0.3
    assert [r["event"] for r in data["results"]] == ["brushed teeth", "peanuts"]


def test_rank_threshold_from_config(runner, config_path):
    config_path.write_text(json.dumps({"analysis": {"threshold": 0.5}}))

    result = _invoke(runner, config_path, "rank", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [r["event"] for r in data["results"]] == ["peanuts"]


def test_rank_nothing_above_threshold(runner, config_path):
    result = _invoke(runner, config_path, "rank", "--threshold", "0.9")

    assert result.exit_code == 0
    assert "No events with |phi| > 0.9" in result.output


def test_rank_threshold_out_of_range(runner, config_path):
    result = _invoke(runner, config_path, "rank", "--threshold", "1.5")

    assert result.exit_code != 0


def test_rank_yaml(runner, config_path):
    result = _invoke(runner, config_path, "rank", "--threshold", "0.5", "--format", "yaml")

    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["total"] == 1
    assert data["results"][0]["event"] == "peanuts"


def test_rank_table(runner, config_path):
    result = _invoke(runner, config_path, "rank")

    assert result.exit_code == 0
    assert "peanuts" in result.output
    assert "+0.5903" in result.output


def test_synthesize_peanuts_no_teeth(runner, config_path):
    """Test deriving the composite event that explains the outcome."""
    result = _invoke(
        runner, config_path,
        "synthesize", "peanuts-no-teeth",
        "--with", "peanuts",
        "--without", "brushed teeth",
        "--format", "json",
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["event"] == "peanuts-no-teeth"
    assert data["coefficient"] == 1.0
    assert data["table"] == [85, 0, 0, 5]


def test_synthesize_requires_condition(runner, config_path):
    result = _invoke(runner, config_path, "synthesize", "empty")

    assert result.exit_code == 1
    assert "--with or --without" in result.output


def test_custom_journal(runner, config_path, journal_file):
    result = _invoke(
        runner, config_path, "table", "coffee", "--journal", str(journal_file), "--format", "json"
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["table"] == [2, 1, 1, 2]
    assert data["total"] == 6


def test_journal_path_from_config(runner, config_path, journal_file):
    config_path.write_text(json.dumps({"journal_path": str(journal_file)}))

    result = _invoke(runner, config_path, "events", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["events"] == ["coffee", "work", "weekend", "tea"]


def test_missing_journal(runner, config_path, tmp_path):
    result = _invoke(
        runner, config_path, "events", "--journal", str(tmp_path / "missing.json")
    )

    assert result.exit_code == 1
    assert "JOURNAL_LOAD_ERROR" in result.output


def test_invalid_format(runner, config_path):
    result = _invoke(runner, config_path, "events", "--format", "xml")

    assert result.exit_code == 1
    assert "Invalid format" in result.output
