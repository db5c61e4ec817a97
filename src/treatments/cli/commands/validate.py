"""Validate command for checking quote files.

This module provides the `validate` command that checks a JSON quote file
for errors and warnings, including quoting advisories. Schema errors carry
a hint naming what the field accepts, and grid or drop band coverage
errors list the ranges the price list does cover.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from treatments.application.config import (
    ConfigError,
    GridPricingConfig,
    PerDropPricingConfig,
    QuoteConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)
from treatments.domain.value_objects import PricingMethod

PRICING_METHODS = ", ".join(method.value for method in PricingMethod)

# Hints keyed by pydantic error type
_ERROR_TYPE_HINTS = {
    "finite_number": "Infinity and NaN are not accepted; enter a finite number",
    "extra_forbidden": "Remove the field or check its spelling",
    "union_tag_invalid": f"Pricing method must be one of: {PRICING_METHODS}",
    "union_tag_not_found": f"Add a pricing method, one of: {PRICING_METHODS}",
    "enum": "Check the spelling of the value",
}

# Hints keyed by the section a path starts with
_SECTION_HINTS = {
    "measurements": "Measurements are in centimetres and cannot be negative",
    "fabric": "Roll width, repeats and price use the measurement unit (cm)",
    "pricing.rows": "Each grid row needs drop_min <= drop_max and at least one width cell",
    "pricing.bands": "Each drop band needs drop_min <= drop_max and a price",
}


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON quote file to validate"),
    ],
) -> None:
    """Validate a quote file.

    Checks the quote file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, invalid types, etc.)
    - Quoting advisories (price list coverage, ignored blind options, fullness)

    Exit codes:
        0 - Quote is valid with no warnings
        1 - Quote has errors (cannot be priced)
        2 - Quote is valid but has warnings

    Example:
        treatments validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(describe_quote(config))
    typer.echo()

    result = validate_config(config)
    _display_validation_result(config, result)
    raise typer.Exit(code=result.exit_code)


def describe_quote(config: QuoteConfiguration) -> str:
    """One-line synopsis of what the quote prices.

    Example:
        >>> describe_quote(config)
        'Living room: 2 x curtain, 300 x 250 cm, priced by linear'
    """
    measurements = config.measurements
    label = config.reference or "Quote"
    return (
        f"{label}: {measurements.quantity} x {config.options.category.value}, "
        f"{measurements.rail_width:g} x {measurements.drop:g} cm, "
        f"priced by {config.pricing.method}"
    )


def hint_for(detail: dict[str, Any]) -> str | None:
    """Hint for a schema error detail, or None when nothing useful applies."""
    error_type = detail.get("error_type", "")
    if error_type in _ERROR_TYPE_HINTS:
        return _ERROR_TYPE_HINTS[error_type]

    path = detail.get("path", "")
    for section, hint in _SECTION_HINTS.items():
        if path == section or path.startswith((f"{section}.", f"{section}[")):
            return hint
    return None


def display_load_error(error: ConfigError) -> None:
    """Display a quote file loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(
                f"  {detail.get('path', 'unknown')}: {detail.get('message', 'Unknown error')}",
                err=True,
            )
            hint = hint_for(detail)
            if hint:
                typer.echo(f"    Hint: {hint}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def price_list_coverage(config: QuoteConfiguration) -> list[str]:
    """Describe the sizes a grid or per-drop price list covers.

    Returns an empty list for pricing methods without a price list.
    """
    pricing = config.pricing
    if isinstance(pricing, GridPricingConfig):
        return [
            f"drop {row.drop_min:g}-{row.drop_max:g}: widths "
            + ", ".join(f"{cell.width_min:g}-{cell.width_max:g}" for cell in row.cells)
            for row in pricing.rows
        ]
    if isinstance(pricing, PerDropPricingConfig):
        return [f"drop {band.drop_min:g}-{band.drop_max:g}" for band in pricing.bands]
    return []


def _display_validation_result(
    config: QuoteConfiguration, result: ValidationResult
) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
            if error.path in ("pricing.rows", "pricing.bands"):
                typer.echo("    Price list covers:", err=True)
                for line in price_list_coverage(config):
                    typer.echo(f"      {line}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Quote is valid.")
