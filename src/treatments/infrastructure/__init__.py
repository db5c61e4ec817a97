"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    BreakdownFormatter,
    CostSummaryFormatter,
    JsonExporter,
    format_currency,
    format_length,
)

__all__ = [
    "BreakdownFormatter",
    "CostSummaryFormatter",
    "JsonExporter",
    "format_currency",
    "format_length",
]
