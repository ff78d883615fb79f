"""Typer CLI for staccato.

Reads one number per line from a file or stdin and prints count, sum,
mean, upper, lower, median and stddev for the whole stream and for the
lowest N% of values (75, 90, 95 and 99 by default). If you've ever used
Statsd, the format should seem familiar.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 (Typer evaluates type hints at runtime)
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from staccato import __version__
from staccato.bundle import build_bundle
from staccato.config import StaccatoSettings
from staccato.formatter import format_bundle
from staccato.ingest import IngestionError, read_path
from staccato.models import KeyValueSeparator, OutputFormat, SortingPolicy
from staccato.percentiles import InvalidPercentileError, parse_percentiles

app = typer.Typer(
    name="staccato",
    help="Statistics from a stream of numbers on the command line",
    add_completion=False,
)
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"staccato {__version__}")
        raise typer.Exit()


def _load_settings(
    *,
    percentiles: str | None,
    separator: str | None,
    unsorted: bool,
    output_format: OutputFormat | None,
) -> StaccatoSettings:
    """Merge CLI options over environment settings, exiting on invalid input."""
    overrides: dict[str, object] = {}
    try:
        if percentiles is not None:
            overrides["percentiles"] = parse_percentiles(percentiles)
    except InvalidPercentileError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if separator is not None:
        overrides["separator"] = separator
    if unsorted:
        overrides["sort"] = SortingPolicy.UNSORTED
        # Percentiles need sorted input, so drop the defaults unless asked for
        overrides.setdefault("percentiles", [])
    if output_format is not None:
        overrides["output_format"] = output_format

    try:
        return StaccatoSettings(**overrides)
    except ValidationError as e:
        err_console.print("[red]Invalid configuration:[/red]")
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            label = f"{loc}: " if loc else ""
            err_console.print(f"  [red]✗[/red] {escape(label + err['msg'])}")
        raise typer.Exit(1) from None


@app.command()
def main(
    path: Annotated[
        Path | None,
        typer.Argument(help="File with one number per line (omit or '-' for stdin)"),
    ] = None,
    percentiles: Annotated[
        str | None,
        typer.Option(
            "--percentiles",
            "-p",
            help="Comma separated percentiles from 1 to 99, or 'none'. Default: 75,90,95,99",
        ),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Key/value separator: tab, colon, or any text"),
    ] = None,
    unsorted: Annotated[
        bool,
        typer.Option("--unsorted", help="Skip sorting (global statistics only)"),
    ] = False,
    output_format: Annotated[
        OutputFormat | None, typer.Option("--format", "-f", help="Output format: text or json")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Compute statistics for a stream of numbers, one per line.

    Lines that are not numbers are ignored.
    """
    settings = _load_settings(
        percentiles=percentiles,
        separator=separator,
        unsorted=unsorted,
        output_format=output_format,
    )
    _configure_logging("DEBUG" if verbose else settings.log_level)

    if path is not None and str(path) == "-":
        path = None

    try:
        values = read_path(path, policy=settings.sort)
    except IngestionError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if settings.sort == SortingPolicy.UNSORTED:
        err_console.print(
            "[yellow]Input is unsorted: median reflects input order, not rank[/yellow]"
        )

    bundle = build_bundle(values, settings.percentiles)
    if bundle is None:
        err_console.print("[yellow]No numeric values to compute statistics from[/yellow]")
        return

    if settings.output_format == OutputFormat.JSON:
        typer.echo(bundle.model_dump_json(indent=2))
    else:
        typer.echo(format_bundle(bundle, KeyValueSeparator.parse(settings.separator)), nl=False)


if __name__ == "__main__":
    app()
