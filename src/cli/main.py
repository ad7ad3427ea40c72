"""Command line entry point for the descriptive-stats application."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import click
import structlog

from descriptive_stats import (
    DescriptiveStatisticsError,
    EmptySequenceError,
    descriptive_statistics,
    maximum,
    mean,
    median,
    minimum,
    mode,
    range_,
    standard_deviation,
)
from descriptive_stats.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from descriptive_stats.output import format_number, format_report, format_values
from descriptive_stats.parser import parse_numbers, parse_tokens

INPUT_HELP = "Read numbers from a file, or '-' for stdin. Separators: whitespace, ',' or ';'."
NUMBERS_CONTEXT = {"ignore_unknown_options": True}

STATISTICS: dict[str, Callable[[Any], Any]] = {
    "maximum": maximum,
    "mean": mean,
    "median": median,
    "minimum": minimum,
    "mode": mode,
    "range": range_,
    "standard-deviation": standard_deviation,
}

logger = structlog.get_logger(__name__)


def _read_numbers(tokens: Sequence[str], source: str | None) -> list[int | float]:
    """Collect numbers from positional tokens and an optional input file."""
    if tokens and source:
        raise click.UsageError("Pass numbers as arguments or via --input, not both.")
    try:
        if source == "-":
            numbers = parse_numbers(sys.stdin.read())
        elif source:
            numbers = parse_numbers(Path(source).read_text())
        else:
            numbers = parse_tokens(tokens)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="NUMBERS") from exc
    except OSError as exc:
        raise click.FileError(source or "", hint=str(exc)) from exc
    if not numbers:
        raise click.UsageError(str(EmptySequenceError()))
    logger.debug("input.parsed", count=len(numbers), source=source or "arguments")
    return numbers


def _emit(document: str, output: Path | None) -> None:
    """Write ``document`` to ``output`` or echo it to stdout."""
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document + "\n")
        click.echo(f"Wrote report to {output}")
        logger.debug("report.written", output=str(output))
    else:
        click.echo(document)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(tuple(LOG_LEVELS), case_sensitive=False),
    envvar="DESCRIPTIVE_STATS_LOG_LEVEL",
    default="warning",
    show_default=True,
    help="Verbosity for structured logs.",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    envvar="DESCRIPTIVE_STATS_LOG_FORMAT",
    default="console",
    show_default=True,
    help="Render logs as console-friendly text or JSON.",
)
def cli(log_level: str, log_format: str) -> None:
    """Compute descriptive statistics for a set of numbers."""
    configure_logging(level=log_level, json_output=log_format.lower() == "json")
    logger.debug("cli.initialized", log_level=log_level.lower(), log_format=log_format.lower())


@cli.command("describe", context_settings=NUMBERS_CONTEXT)
@click.argument("numbers", nargs=-1)
@click.option("--input", "source", help=INPUT_HELP)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Render the report as a table or as JSON.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional path to write the report to.",
)
def describe(
    *,
    numbers: tuple[str, ...],
    source: str | None,
    output_format: str,
    output: Path | None,
) -> None:
    """Print maximum, mean, median, minimum, mode, range and standard deviation."""
    values = _read_numbers(numbers, source)
    cmd_log = logger.bind(command="describe", format=output_format.lower())
    cmd_log.info("command.start", count=len(values))
    try:
        report = descriptive_statistics(values)
    except DescriptiveStatisticsError as exc:
        raise click.ClickException(str(exc)) from exc
    if output_format.lower() == "json":
        document = json.dumps(report.to_dict(), indent=2)
    else:
        document = format_report(report)
    _emit(document, output)
    cmd_log.info("command.completed")


@cli.command("compute", context_settings=NUMBERS_CONTEXT)
@click.argument("statistic", type=click.Choice(tuple(STATISTICS), case_sensitive=False))
@click.argument("numbers", nargs=-1)
@click.option("--input", "source", help=INPUT_HELP)
def compute(*, statistic: str, numbers: tuple[str, ...], source: str | None) -> None:
    """Print a single statistic."""
    values = _read_numbers(numbers, source)
    name = statistic.lower()
    logger.bind(command="compute", statistic=name).info("command.start", count=len(values))
    try:
        result = STATISTICS[name](values)
    except DescriptiveStatisticsError as exc:
        raise click.ClickException(str(exc)) from exc
    if name == "mode":
        click.echo(format_values(result))
    else:
        click.echo(format_number(result))


if __name__ == "__main__":  # pragma: no cover
    cli()
