"""Unit tests for quote formatters and the JSON exporter."""

import json
from pathlib import Path

import pytest

from treatments.application import PriceQuoteCommand, QuoteOutput
from treatments.application.config import load_config
from treatments.infrastructure import (
    BreakdownFormatter,
    CostSummaryFormatter,
    JsonExporter,
    format_currency,
    format_length,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _price(name: str) -> QuoteOutput:
    return PriceQuoteCommand().execute(load_config(FIXTURES_PATH / name))


@pytest.fixture
def curtain_output() -> QuoteOutput:
    return _price("curtain_linear.json")


@pytest.fixture
def grid_output() -> QuoteOutput:
    return _price("grid_blind.json")


@pytest.fixture
def incomplete_output() -> QuoteOutput:
    return _price("incomplete.json")


class TestFormatHelpers:
    """Tests for currency and length formatting."""

    def test_currency(self) -> None:
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(42.5, "£") == "£42.50"

    def test_length(self) -> None:
        assert format_length(14.763779, "yd") == "14.76 yd"


class TestCostSummaryFormatter:
    """Tests for the summary table."""

    def test_priced_quote(self, curtain_output: QuoteOutput) -> None:
        text = CostSummaryFormatter().format(curtain_output)

        assert text.startswith("COST SUMMARY: Living room curtains")
        assert "linear" in text
        assert "14.76 yd" in text
        assert "Labor (6.00 h)" in text
        assert "Markup (40%)" in text
        assert "$764.52" in text
        assert "$382.26" in text

    def test_blind_quantity_in_square_units(self) -> None:
        text = CostSummaryFormatter().format(_price("blind_linear.json"))
        assert "1.44 yd²" in text

    def test_grid_hides_fabric_quantity(self, grid_output: QuoteOutput) -> None:
        text = CostSummaryFormatter().format(grid_output)
        assert "Fabric quantity" not in text
        assert "Markup (0%)" in text
        assert "$42.50" in text

    def test_error_withholds_total(self, incomplete_output: QuoteOutput) -> None:
        text = CostSummaryFormatter().format(incomplete_output)

        assert text.startswith("COST SUMMARY\n")
        assert "Unable to price quote (incomplete_measurements)" in text
        assert "insufficient measurements" in text
        assert "withheld" in text
        assert "$" not in text


class TestBreakdownFormatter:
    """Tests for the breakdown report."""

    def test_sections(self, curtain_output: QuoteOutput) -> None:
        text = BreakdownFormatter().format(curtain_output)

        for heading in ("FABRIC", "LABOR", "FEATURES", "PRICING", "WASTE"):
            assert f"\n{heading}\n" in text
        assert "  Widths per panel: ceil(300.00 / 140 roll width) = 3" in text
        assert "Leftover width:  240.00 cm" in text

    def test_line_items(self) -> None:
        text = BreakdownFormatter().format(_price("formula_curtain.json"))
        assert "Tiebacks" in text
        assert "Lining (blackout)" in text

    def test_grid_has_no_waste(self, grid_output: QuoteOutput) -> None:
        text = BreakdownFormatter().format(grid_output)
        assert "not applicable" in text
        assert "WASTE" not in text

    def test_error(self, incomplete_output: QuoteOutput) -> None:
        text = BreakdownFormatter().format(incomplete_output)
        assert text.endswith("Error: insufficient measurements")


class TestJsonExporter:
    """Tests for JSON export."""

    def test_priced_quote(self, curtain_output: QuoteOutput) -> None:
        data = json.loads(JsonExporter().export(curtain_output))

        assert data["status"] == "ok"
        assert data["reference"] == "Living room curtains"
        assert data["strategy"] == "linear"
        assert data["selling_unit"] == "yd"
        assert data["result"]["total"] == pytest.approx(764.515748031496)
        assert set(data["result"]) == {
            "fabric_quantity",
            "fabric_cost",
            "labor_hours",
            "labor_cost",
            "features_cost",
            "subtotal",
            "markup_percentage",
            "total",
            "unit_price",
        }
        assert data["breakdown"]["leftover_width"] == 240
        assert data["breakdown"]["line_items"] == []

    def test_incomplete_carries_zero_result(self, incomplete_output: QuoteOutput) -> None:
        data = JsonExporter().to_dict(incomplete_output)

        assert data["status"] == "error"
        assert data["error"] == {
            "kind": "incomplete_measurements",
            "message": "insufficient measurements",
        }
        assert data["result"]["total"] == 0.0

    def test_no_match_has_no_result(self) -> None:
        data = JsonExporter().to_dict(_price("grid_no_match.json"))
        assert data["error"]["kind"] == "no_price_match"
        assert data["result"] is None

    def test_export_many(self, curtain_output: QuoteOutput, grid_output: QuoteOutput) -> None:
        data = json.loads(JsonExporter().export_many([curtain_output, grid_output]))
        assert [item["strategy"] for item in data] == ["linear", "grid"]
