"""Tests for the settle-up CLI."""

import json
from decimal import Decimal
from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from settle_up.cli import EXAMPLE_INPUT, app, format_money, parse_tolerance
from settle_up.report import MISSING_KEY_MESSAGE

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each command from an empty directory without settings in the env."""
    for name in ["OPENAI_API_KEY", "STRICT_PARTICIPANTS", "SETTLEMENT_TOLERANCE"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def input_file(tmp_path):
    """Write the example input to disk."""
    path = tmp_path / "trip.json"
    path.write_text(json.dumps(EXAMPLE_INPUT), encoding="utf-8")
    return path


class TestSettleCommand:
    """Tests for `settle-up settle`."""

    def test_prints_transfers(self, input_file):
        result = runner.invoke(app, ["settle", str(input_file)])

        assert result.exit_code == 0, result.output
        # Alice +52, Bob -14, Carol -38
        assert "Carol pays Alice $38.00" in result.output
        assert "Bob pays Alice $14.00" in result.output
        assert "Balances" in result.output

    def test_balanced_group(self, tmp_path):
        path = tmp_path / "even.json"
        path.write_text(
            json.dumps(
                {
                    "participants": [
                        {"id": "a", "name": "Alice"},
                        {"id": "b", "name": "Bob"},
                    ],
                    "expenses": [
                        {"id": "1", "title": "Lunch", "amount": "20", "payer_id": "a"},
                        {"id": "2", "title": "Cake", "amount": "20", "payer_id": "b"},
                    ],
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["settle", str(path)])

        assert result.exit_code == 0, result.output
        assert "No transfers needed" in result.output

    def test_unknown_participant_fails(self, tmp_path):
        data = json.loads(json.dumps(EXAMPLE_INPUT))
        data["expenses"][0]["involved_ids"].append("zed")
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        result = runner.invoke(app, ["settle", str(path)])

        assert result.exit_code == 1
        assert "unknown participant" in result.output

    def test_permissive_flag(self, tmp_path):
        data = json.loads(json.dumps(EXAMPLE_INPUT))
        data["expenses"][0]["involved_ids"].append("zed")
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        result = runner.invoke(app, ["settle", str(path), "--permissive"])

        assert result.exit_code == 0, result.output
        assert "zed pays Alice" in result.output

    def test_missing_file_fails(self, tmp_path):
        result = runner.invoke(app, ["settle", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_summary_without_key(self, input_file):
        result = runner.invoke(app, ["settle", str(input_file), "--summary"])

        assert result.exit_code == 0, result.output
        assert MISSING_KEY_MESSAGE in result.output

    @patch("settle_up.report.SummaryClient")
    def test_summary_with_key(self, mock_client_class, input_file, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "test_openai_key")
        mock_client_class.return_value.write_summary.return_value = "Great trip!"

        result = runner.invoke(app, ["settle", str(input_file), "-s"])

        assert result.exit_code == 0, result.output
        assert "Great trip!" in result.output


class TestToleranceOption:
    """Tests for the --tolerance option."""

    def test_tolerance_drops_one_cent_balances(self, tmp_path):
        path = tmp_path / "cent.json"
        path.write_text(
            json.dumps(
                {
                    "participants": [
                        {"id": "a", "name": "Alice"},
                        {"id": "b", "name": "Bob"},
                    ],
                    "expenses": [
                        {
                            "id": "1",
                            "title": "Gum",
                            "amount": "0.01",
                            "payer_id": "a",
                            "involved_ids": ["b"],
                        }
                    ],
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["settle", str(path), "--tolerance", "0.01"])

        assert result.exit_code == 0, result.output
        assert "No transfers needed" in result.output

    @pytest.mark.parametrize("value", ["-1", "-0.01", "0.005", "abc", "NaN"])
    def test_invalid_tolerance_is_a_usage_error(self, input_file, value):
        result = runner.invoke(app, ["settle", str(input_file), "--tolerance", value])

        assert result.exit_code == 2
        assert "pays" not in result.output


class TestParseTolerance:
    """Tests for parse_tolerance."""

    def test_exact_decimal(self):
        assert parse_tolerance("0.10") == Decimal("0.10")
        assert parse_tolerance("0") == Decimal("0")

    def test_none_means_unset(self):
        assert parse_tolerance(None) is None

    @pytest.mark.parametrize(
        "value", ["-0.50", "0.001", "1e-3", "not-money", "Infinity"]
    )
    def test_rejects_bad_values(self, value):
        with pytest.raises(typer.BadParameter):
            parse_tolerance(value)


class TestExampleCommand:
    """Tests for `settle-up example`."""

    def test_prints_valid_json(self):
        result = runner.invoke(app, ["example"])

        assert result.exit_code == 0
        assert json.loads(result.output) == EXAMPLE_INPUT


class TestFormatMoney:
    """Tests for accounting-style money formatting."""

    def test_positive(self):
        assert format_money(Decimal("85.02"), use_color=False) == " $85.02 "

    def test_negative(self):
        assert format_money(Decimal("-1234.5"), use_color=False) == "($1,234.50)"
