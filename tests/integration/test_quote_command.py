"""Integration tests for the quote, batch and grid-lookup CLI commands.

These tests run the commands end-to-end against the fixture quote files,
including:
- Every output format of a priced quote
- Calculation errors reported without a total
- Batch summaries and exit codes
- Grid lookups
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from treatments.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestQuoteCommand:
    """Tests for the quote command."""

    def test_default_format_prints_summary_and_breakdown(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", str(FIXTURES_PATH / "curtain_linear.json")])

        assert result.exit_code == 0
        assert "COST SUMMARY: Living room curtains" in result.output
        assert "COST BREAKDOWN" in result.output
        assert "$764.52" in result.output

    def test_summary_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "curtain_linear.json"), "--format", "summary"]
        )

        assert result.exit_code == 0
        assert "COST SUMMARY" in result.output
        assert "COST BREAKDOWN" not in result.output

    def test_json_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "grid_blind.json"), "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["strategy"] == "grid"
        assert data["result"]["total"] == pytest.approx(42.50)

    def test_formula_quote_in_metres(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "formula_curtain.json"), "-f", "breakdown"]
        )

        assert result.exit_code == 0
        assert "13.52 m" in result.output
        assert "Height surcharge" in result.output

    def test_per_drop_quote(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "per_drop_curtain.json"), "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["strategy"] == "per_drop"
        # 230 cm drop in the 201-300 band, pair of curtains
        assert data["result"]["labor_cost"] == pytest.approx(120.0)

    def test_per_sqm_quote(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "per_sqm_blind.json"), "-f", "breakdown"]
        )

        assert result.exit_code == 0
        assert "2.400 m² x 30.00/m² = 72.00" in result.output

    def test_infinite_measurement_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "infinite_rail_width.json")]
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "measurements.rail_width" in result.output

    def test_calculation_error_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "zero_roll_width.json"), "-f", "summary"]
        )

        assert result.exit_code == 1
        assert "invalid_fabric_spec" in result.output
        assert "withheld" in result.output

    def test_no_price_match_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "grid_no_match.json"), "-f", "summary"]
        )

        assert result.exit_code == 1
        assert "no grid row covers drop 155" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["quote", str(FIXTURES_PATH / "curtain_linear.json"), "-f", "pdf"]
        )

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output

    def test_invalid_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "measurements.colour" in result.output

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "quote.json"
        result = runner.invoke(
            app,
            [
                "quote",
                str(FIXTURES_PATH / "curtain_linear.json"),
                "-f",
                "json",
                "-o",
                str(output_path),
            ],
        )

        assert result.exit_code == 0
        assert f"Wrote {output_path}" in result.output
        assert json.loads(output_path.read_text())["status"] == "ok"


class TestBatchCommand:
    """Tests for the batch command."""

    def test_all_priced(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "batch",
                str(FIXTURES_PATH / "curtain_linear.json"),
                str(FIXTURES_PATH / "grid_blind.json"),
            ],
        )

        assert result.exit_code == 0
        assert "2 of 2 quote(s) priced, total $807.02" in result.output

    def test_failed_quote_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "batch",
                str(FIXTURES_PATH / "grid_blind.json"),
                str(FIXTURES_PATH / "incomplete.json"),
            ],
        )

        assert result.exit_code == 1
        assert "1 of 2 quote(s) priced, total $42.50" in result.output
        assert "insufficient measurements" in result.output

    def test_json_format(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "batch.json"
        result = runner.invoke(
            app,
            [
                "batch",
                str(FIXTURES_PATH / "curtain_linear.json"),
                str(FIXTURES_PATH / "grid_no_match.json"),
                "--format",
                "json",
                "--output",
                str(output_path),
            ],
        )

        assert result.exit_code == 1
        data = json.loads(output_path.read_text())
        assert [item["status"] for item in data] == ["ok", "error"]

    def test_breakdown_format_not_offered(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["batch", str(FIXTURES_PATH / "curtain_linear.json"), "-f", "breakdown"]
        )
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_unloadable_file_stops_batch(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "batch",
                str(FIXTURES_PATH / "curtain_linear.json"),
                str(FIXTURES_PATH / "invalid_json.json"),
            ],
        )
        assert result.exit_code == 1
        assert "COST SUMMARY" not in result.output


class TestGridLookupCommand:
    """Tests for the grid-lookup command."""

    def test_match(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["grid-lookup", str(FIXTURES_PATH / "grid_blind.json"), "-w", "90", "-d", "145"],
        )

        assert result.exit_code == 0
        assert "Grid price for 90 x 145: $42.50 (row 1, column 2)" in result.output

    def test_boundary_is_inclusive(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["grid-lookup", str(FIXTURES_PATH / "grid_blind.json"), "-w", "80", "-d", "150"],
        )

        assert result.exit_code == 0
        assert "$42.50" in result.output

    def test_no_match(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["grid-lookup", str(FIXTURES_PATH / "grid_blind.json"), "-w", "90", "-d", "155"],
        )

        assert result.exit_code == 1
        assert "No price: no grid row covers drop 155" in result.output

    def test_not_a_grid_quote(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["grid-lookup", str(FIXTURES_PATH / "curtain_linear.json"), "-w", "90", "-d", "145"],
        )

        assert result.exit_code == 1
        assert "priced by 'linear', not by grid" in result.output
