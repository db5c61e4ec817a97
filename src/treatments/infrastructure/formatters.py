"""Output formatters and exporters for treatment quotes."""

from __future__ import annotations

import json
from typing import Any, Sequence

from treatments.application.dtos import QuoteOutput
from treatments.domain.services.costing import (
    NOT_APPLICABLE,
    CalculationError,
    CostEstimate,
)


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount as currency with thousands separators.

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
    """
    return f"{symbol}{amount:,.2f}"


def format_length(value: float, unit: str) -> str:
    """Format a length or quantity with its unit."""
    return f"{value:,.2f} {unit}"


class CostSummaryFormatter:
    """Formats the cost figures of a quote for display.

    Calculation errors print the error kind and explanation and withhold
    every amount.
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        self._symbol = currency_symbol

    def _money(self, amount: float) -> str:
        return format_currency(amount, self._symbol)

    def format(self, output: QuoteOutput) -> str:
        """Format a priced quote as a summary table."""
        title = "COST SUMMARY"
        if output.reference:
            title = f"{title}: {output.reference}"
        lines = [title, "=" * 60]

        outcome = output.outcome
        if isinstance(outcome, CalculationError):
            lines.append(f"Unable to price quote ({outcome.kind.value})")
            lines.append(f"  {outcome.message}")
            lines.append("-" * 60)
            lines.append(f"{'TOTAL':<30} {'withheld':>20}")
            return "\n".join(lines)

        result = outcome.result
        lines.append(f"{'Pricing method':<30} {outcome.strategy:>20}")
        if outcome.breakdown.fabric != NOT_APPLICABLE:
            unit = output.settings.selling_unit
            if output.treatment.options.is_blind:
                unit = f"{unit}²"
            lines.append(
                f"{'Fabric quantity':<30} {format_length(result.fabric_quantity, unit):>20}"
            )
        labor_label = f"Labor ({result.labor_hours:.2f} h)"
        markup_label = f"Markup ({result.markup_percentage:g}%)"
        lines.extend(
            [
                "-" * 60,
                f"{'Fabric':<30} {self._money(result.fabric_cost):>20}",
                f"{labor_label:<30} {self._money(result.labor_cost):>20}",
                f"{'Features':<30} {self._money(result.features_cost):>20}",
                "-" * 60,
                f"{'Subtotal':<30} {self._money(result.subtotal):>20}",
                f"{markup_label:<30} {self._money(result.total - result.subtotal):>20}",
                f"{'TOTAL':<30} {self._money(result.total):>20}",
                f"{'Unit price':<30} {self._money(result.unit_price):>20}",
            ]
        )
        return "\n".join(lines)


class BreakdownFormatter:
    """Formats the step-by-step breakdown justifying a quote.

    Explanation strings are printed verbatim, one step per line.
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        self._symbol = currency_symbol

    def format(self, output: QuoteOutput) -> str:
        """Format a priced quote as a breakdown report."""
        lines = ["COST BREAKDOWN", "=" * 70]

        outcome = output.outcome
        if isinstance(outcome, CalculationError):
            lines.append(f"Error: {outcome.message}")
            return "\n".join(lines)

        breakdown = outcome.breakdown
        for heading, explanation in (
            ("FABRIC", breakdown.fabric),
            ("LABOR", breakdown.labor),
            ("FEATURES", breakdown.features),
            ("PRICING", breakdown.pricing),
        ):
            lines.append("")
            lines.append(heading)
            for step in explanation.split("; "):
                lines.append(f"  {step}")

        if breakdown.line_items:
            lines.append("")
            lines.append(f"{'Line item':<30} {'Unit':>12} {'Qty':>8} {'Total':>14}")
            lines.append("-" * 70)
            for item in breakdown.line_items:
                lines.append(
                    f"{item.name:<30} "
                    f"{format_currency(item.unit_price, self._symbol):>12} "
                    f"{item.quantity:>8.2f} "
                    f"{format_currency(item.total, self._symbol):>14}"
                )

        if breakdown.fabric != NOT_APPLICABLE:
            unit = output.settings.measurement_unit
            lines.append("")
            lines.append("WASTE")
            lines.append(
                f"  Leftover length: {format_length(breakdown.leftover_length, unit)}"
            )
            lines.append(
                f"  Leftover width:  {format_length(breakdown.leftover_width, unit)}"
            )

        return "\n".join(lines)


class JsonExporter:
    """Exports priced quotes as JSON for persistence with the treatment record."""

    def export(self, output: QuoteOutput) -> str:
        """Export a single quote as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def export_many(self, outputs: Sequence[QuoteOutput]) -> str:
        """Export several quotes as a JSON array string."""
        return json.dumps([self.to_dict(output) for output in outputs], indent=2)

    def to_dict(self, output: QuoteOutput) -> dict[str, Any]:
        """Convert a quote to a JSON-compatible dictionary."""
        data: dict[str, Any] = {"reference": output.reference}
        outcome = output.outcome
        if isinstance(outcome, CostEstimate):
            data.update(
                {
                    "status": "ok",
                    "strategy": outcome.strategy,
                    "selling_unit": output.settings.selling_unit,
                    "result": outcome.result.to_dict(),
                    "breakdown": self._format_breakdown(outcome),
                }
            )
        else:
            data.update(
                {
                    "status": "error",
                    "error": {
                        "kind": outcome.kind.value,
                        "message": outcome.message,
                    },
                    "result": outcome.result.to_dict() if outcome.result else None,
                }
            )
        return data

    def _format_breakdown(self, estimate: CostEstimate) -> dict[str, Any]:
        breakdown = estimate.breakdown
        return {
            "fabric": breakdown.fabric,
            "labor": breakdown.labor,
            "features": breakdown.features,
            "pricing": breakdown.pricing,
            "leftover_length": breakdown.leftover_length,
            "leftover_width": breakdown.leftover_width,
            "line_items": [
                {
                    "name": item.name,
                    "unit_price": item.unit_price,
                    "quantity": item.quantity,
                    "total": item.total,
                }
                for item in breakdown.line_items
            ],
        }
