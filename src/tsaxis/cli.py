#!/usr/bin/env python3
"""Command-line interface for tsaxis.

Example usage:
    # Infer the granularity of some timestamps
    tsaxis infer 2020-01-01T10:00:00Z 2020-01-01T10:15:00Z

    # Ticks for a month-long axis, 800px wide, in Chicago time
    tsaxis ticks --start 2020-01-01 --end 2020-02-01 --width 800 --timezone America/Chicago --unit day

    # Show the granularity table
    tsaxis table
"""

import re

import typer
from rich.console import Console
from rich.table import Table

from tsaxis.core.inference import infer_granularity_index
from tsaxis.core.tick_interval import (
    expected_tick_count,
    max_ticks_for_chart_width,
    select_tick_interval,
    time_range_milliseconds,
)
from tsaxis.core.ticks import generate_ticks
from tsaxis.utils.config import AxisConfig
from tsaxis.utils.exceptions import ConfigurationError, TimeseriesAxisError
from tsaxis.utils.granularity import GRANULARITY_TABLE, UNIT_INDEX, DatetimeUnit, GranularityEntry, TimeUnit, find_entry_index
from tsaxis.utils.loguru_setup import logger

INTERVAL_PATTERN = re.compile(r"^\s*(\d+)\s*([a-zA-Z]+)\s*$")

app = typer.Typer(help="Time axis granularity and tick computation.", no_args_is_help=True)
console = Console()


def parse_interval(value: str) -> GranularityEntry:
    """Parse ``"15 minute"`` / ``"3hours"`` into a granularity table entry."""
    match = INTERVAL_PATTERN.match(value)
    if not match:
        raise typer.BadParameter(f"Expected COUNT UNIT, e.g. '15 minute', got {value!r}")
    count, unit_str = match.groups()
    try:
        unit = TimeUnit.from_string(unit_str)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    index = find_entry_index(unit, int(count))
    if index is None:
        raise typer.BadParameter(f"{count} {unit} is not in the granularity table")
    return GRANULARITY_TABLE[index]


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"),
):
    """Configure logging from the environment or --log-level."""
    try:
        config = AxisConfig.from_env(log_level=log_level)
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e
    logger.configure_level(config.log_level)


@app.command()
def infer(
    samples: list[str] = typer.Argument(..., help="Raw timestamp values in display order"),
    unit: str = typer.Option(None, "--unit", "-u", help="Declared column unit (minute, hour, day, ...)"),
):
    """Infer the bucketing granularity of timestamp samples."""
    index = infer_granularity_index(samples, unit)
    entry = GRANULARITY_TABLE[index]
    console.print(f"[green]{entry.label}[/green] (position {index})")


@app.command()
def ticks(
    start: str = typer.Option(..., "--start", "-s", help="Domain start (ISO-8601 or epoch ms)"),
    end: str = typer.Option(..., "--end", "-e", help="Domain end (ISO-8601 or epoch ms)"),
    width: int = typer.Option(800, "--width", "-w", help="Chart width in pixels"),
    timezone: str = typer.Option(None, "--timezone", "-z", help="Timezone ticks are aligned in"),
    unit: str = typer.Option(None, "--unit", "-u", help="Declared data unit (minute, hour, day, ...); default assumes 1 ms data"),
    x_interval: str = typer.Option(None, "--x-interval", "-x", help="Data granularity as COUNT UNIT, e.g. '15 minute'"),
):
    """Select a tick interval for the chart width and print the ticks.

    The data granularity comes from --x-interval or --unit. With neither, the
    finest entry (1 ms) is assumed and the chart width alone picks the spacing.
    """
    config = AxisConfig.from_env()
    timezone = timezone or config.default_timezone

    declared = DatetimeUnit.try_from(unit)
    if x_interval:
        data_interval = parse_interval(x_interval)
    elif declared is not None:
        data_interval = GRANULARITY_TABLE[UNIT_INDEX[declared]]
    else:
        data_interval = GRANULARITY_TABLE[0]

    domain = (int(start) if start.lstrip("-").isdigit() else start, int(end) if end.lstrip("-").isdigit() else end)
    try:
        time_range = time_range_milliseconds(domain)
        max_ticks = max_ticks_for_chart_width(width, config.min_pixels_per_tick)
        interval = select_tick_interval(data_interval, time_range, max_ticks)
        tick_values = generate_ticks(domain, interval, timezone)
    except TimeseriesAxisError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    table = Table(title=f"Every {interval.label} in {timezone}")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Tick", style="green")
    for i, tick in enumerate(tick_values):
        table.add_row(str(i), tick.isoformat())
    console.print(table)
    console.print(
        f"Budget {max_ticks} ticks for {width}px, expected {expected_tick_count(interval, time_range)}, generated {len(tick_values)}"
    )


@app.command("table")
def show_table():
    """Print the granularity table, finest to coarsest."""
    table = Table(title="Granularity table")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Interval", style="green")
    table.add_column("Signature")
    table.add_column("Unit index")
    unit_names = {index: unit.value for unit, index in UNIT_INDEX.items()}
    for i, entry in enumerate(GRANULARITY_TABLE):
        signature = entry.field.value if not entry.modulus else f"{entry.field.value} mod {entry.modulus}"
        table.add_row(str(i), entry.label, signature, unit_names.get(i, ""))
    console.print(table)


if __name__ == "__main__":
    app()
