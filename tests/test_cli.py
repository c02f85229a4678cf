"""Tests for the command-line interface."""
import json

import pytest
from click.testing import CliRunner

from notification_parser.cli import cli
from notification_parser.config import ConfigurationError


@pytest.fixture
def runner():
    return CliRunner()


class TestParseCommand:
    """Tests for `parse`."""

    def test_json_output(self, runner):
        result = runner.invoke(
            cli, ["parse", "You spent Rp 50.000 at Coffee Shop on Jan 21", "--source", "BCA", "--json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["candidate"]["amount"] == 50000.0
        assert payload["candidate"]["merchant"] == "Coffee Shop"
        assert payload["candidate"]["source"] == "BCA"

    def test_json_with_trace(self, runner):
        result = runner.invoke(cli, ["parse", "topup 50000d vao dt", "--json", "--explain"])
        payload = json.loads(result.stdout)
        assert payload["candidate"]["category"] == "Bills"
        assert payload["trace"]["direction_rule"] == "topup"

    def test_no_transaction_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["parse", "Hello world", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["candidate"] is None

    def test_table_output(self, runner):
        result = runner.invoke(cli, ["parse", "Thanh toan 120.000d tai Phuc Long", "--currency", "VND"])
        assert result.exit_code == 0
        assert "120.000" in result.stdout
        assert "Phuc Long" in result.stdout


class TestKeywordsOption:
    """Tests for the --keywords table option."""

    def test_keywords_command_shows_bundled_table(self, runner):
        result = runner.invoke(cli, ["keywords"])
        assert result.exit_code == 0
        assert "spent" in result.stdout

    def test_custom_table(self, runner, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text("ExpenseKeywords:\n  - chi tieu\n", encoding="utf-8")
        result = runner.invoke(cli, ["--keywords", str(path), "parse", "Chi tieu 30.000d", "--json", "--explain"])
        assert json.loads(result.stdout)["trace"]["direction_rule"] == "configured_expense"

    def test_invalid_table(self, runner, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text("CategoryKeywords:\n  Groceries: [winmart]\n", encoding="utf-8")
        result = runner.invoke(cli, ["--keywords", str(path), "keywords"])
        assert isinstance(result.exception, ConfigurationError)


class TestBatchCommand:
    """Tests for `batch`."""

    def test_csv_export_and_manifest(self, runner, tmp_path):
        input_path = tmp_path / "notes.txt"
        input_path.write_text("topup 50000d vao dt\nHello world\n", encoding="utf-8")
        manifest = tmp_path / "manifest.json"

        result = runner.invoke(cli, ["batch", str(input_path), "--format", "csv", "--manifest", str(manifest)])

        assert result.exit_code == 0
        assert (tmp_path / "notes.parsed.csv").exists()
        assert json.loads(manifest.read_text(encoding="utf-8"))["totals"]["discarded"] == 1


def test_summary_command(runner, tmp_path):
    input_path = tmp_path / "notes.txt"
    input_path.write_text(
        "You received Rp 1.500.000 from John Doe\nThanh toan GrabFood 85.000d\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["summary", str(input_path), "--period", "monthly"])
    assert result.exit_code == 0
    assert "Food" in result.stdout
