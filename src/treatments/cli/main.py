"""Typer CLI for treatment quoting."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from treatments.application import PriceQuoteCommand, QuoteOutput
from treatments.application.config import (
    ConfigError,
    GridPricingConfig,
    QuoteConfiguration,
    config_to_grid,
    load_config,
)
from treatments.cli.commands import display_load_error, validate_command
from treatments.domain.services.costing import GridMatch, PricingGridResolver
from treatments.infrastructure import (
    BreakdownFormatter,
    CostSummaryFormatter,
    JsonExporter,
    format_currency,
)

logger = logging.getLogger(__name__)

QUOTE_FORMATS = ("summary", "breakdown", "json", "all")
BATCH_FORMATS = ("summary", "json")

app = typer.Typer(
    name="treatments",
    help="Price curtains and blinds and work out the fabric they need.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_or_exit(config_file: Path) -> QuoteConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _check_format(output_format: str, allowed: tuple[str, ...]) -> str:
    output_format = output_format.lower()
    if output_format not in allowed:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(allowed)}", err=True)
        raise typer.Exit(code=1)
    return output_format


def _render_quote(output: QuoteOutput, output_format: str) -> str:
    if output_format == "summary":
        return CostSummaryFormatter().format(output)
    if output_format == "breakdown":
        return BreakdownFormatter().format(output)
    if output_format == "json":
        return JsonExporter().export(output)
    return "\n\n".join(
        [
            CostSummaryFormatter().format(output),
            BreakdownFormatter().format(output),
        ]
    )


def _emit(text: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(text)
        return
    try:
        output_file.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error writing {output_file}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_file}")


@app.command()
def quote(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON quote file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, breakdown, json, all"),
    ] = "all",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log calculation steps to stderr"),
    ] = False,
) -> None:
    """Price a single quote file.

    Exits with code 1 when the quote cannot be loaded or priced; the
    reason is printed and no total is shown.
    """
    _configure_logging(verbose)
    output_format = _check_format(output_format, QUOTE_FORMATS)
    config = _load_or_exit(config_file)

    output = PriceQuoteCommand().execute(config)
    _emit(_render_quote(output, output_format), output_file)

    if not output.is_valid:
        raise typer.Exit(code=1)


@app.command()
def batch(
    config_files: Annotated[
        list[Path],
        typer.Argument(help="Paths to JSON quote files"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, json"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log calculation steps to stderr"),
    ] = False,
) -> None:
    """Price several quote files.

    Every file is loaded before any is priced. Exits with code 1 if any
    file fails to load or any quote fails to price.
    """
    _configure_logging(verbose)
    output_format = _check_format(output_format, BATCH_FORMATS)
    configs = [_load_or_exit(path) for path in config_files]
    logger.debug("Loaded %d quote file(s)", len(configs))

    outputs = PriceQuoteCommand().execute_many(configs)
    if output_format == "json":
        text = JsonExporter().export_many(outputs)
    else:
        formatter = CostSummaryFormatter()
        text = "\n\n".join(formatter.format(output) for output in outputs)
        priced = [output for output in outputs if output.is_valid]
        text += (
            f"\n\n{len(priced)} of {len(outputs)} quote(s) priced, total "
            f"{format_currency(sum(o.outcome.result.total for o in priced))}"
        )
    _emit(text, output_file)

    if any(not output.is_valid for output in outputs):
        raise typer.Exit(code=1)


@app.command(name="grid-lookup")
def grid_lookup(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to a JSON quote file priced by grid"),
    ],
    width: Annotated[float, typer.Option("--width", "-w", help="Width to price")],
    drop: Annotated[float, typer.Option("--drop", "-d", help="Drop to price")],
) -> None:
    """Look up a size in a quote file's pricing grid."""
    config = _load_or_exit(config_file)
    if not isinstance(config.pricing, GridPricingConfig):
        typer.echo(
            f"Quote is priced by '{config.pricing.method}', not by grid", err=True
        )
        raise typer.Exit(code=1)

    lookup = PricingGridResolver().resolve(config_to_grid(config.pricing), width, drop)
    if not isinstance(lookup, GridMatch):
        typer.echo(f"No price: {lookup.reason}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Grid price for {width:g} x {drop:g}: {format_currency(lookup.price)} "
        f"(row {lookup.row_index + 1}, column {lookup.cell_index + 1})"
    )


if __name__ == "__main__":
    app()
