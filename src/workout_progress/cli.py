"""CLI entry point for workout-progress."""

import json
from datetime import date
from enum import Enum
from pathlib import Path

import structlog
import typer

from workout_progress import __version__
from workout_progress.core.config import settings
from workout_progress.core.exceptions import WorkoutProgressError
from workout_progress.core.logging import configure_logging
from workout_progress.models.metrics import ChartPoint, Timeline, UnitSystem
from workout_progress.services.backup import bpm_samples, load_backup, weight_samples
from workout_progress.services.colors import (
    build_color_map,
    hex_to_rgba,
    pastel_for_workout_type,
)
from workout_progress.services.series import SeriesService

logger = structlog.get_logger()

app = typer.Typer(
    name="workout-progress",
    help="Chart series and palette colors from a workout app backup",
    no_args_is_help=True,
)


class Metric(str, Enum):
    """Metric to chart."""

    WEIGHT = "weight"
    BPM = "bpm"
    BMI = "bmi"


@app.callback()
def _setup(
    log_level: str = typer.Option(None, help="Log level (overrides config)"),
) -> None:
    configure_logging(level=log_level or settings.log_level, json=settings.log_json)


def _render_points(points: list[ChartPoint], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps([{"label": p.label, "value": p.value} for p in points]))
        return
    for point in points:
        value = "-" if point.value is None else f"{point.value:g}"
        typer.echo(f"{point.label:>6}  {value}")


@app.command()
def chart(
    metric: Metric = typer.Argument(..., help="Metric to chart"),
    backup: Path = typer.Argument(..., help="Path to the JSON backup file"),
    timeline: Timeline = typer.Option(None, help="week, month or year (overrides config)"),
    unit: UnitSystem = typer.Option(None, help="kg or lb (overrides config)"),
    height_cm: float = typer.Option(None, help="Height in cm for BMI (overrides config)"),
    today: str = typer.Option(None, help="Anchor date YYYY-MM-DD (defaults to today)"),
    as_json: bool = typer.Option(False, "--json", help="Print the series as JSON"),
) -> None:
    """Print a chart series built from a backup file.

    Example:
        workout-progress chart weight backup.json --timeline month --unit lb
        workout-progress chart bmi backup.json --height-cm 180 --json
    """
    try:
        anchor = date.fromisoformat(today) if today else None
    except ValueError:
        typer.echo(f"Invalid --today date: {today}", err=True)
        raise typer.Exit(code=2) from None

    service = SeriesService(settings)
    try:
        data = load_backup(backup)
        if metric == Metric.WEIGHT:
            points = service.weight_series(weight_samples(data), timeline, unit, today=anchor)
        elif metric == Metric.BMI:
            points = service.bmi_series(weight_samples(data), height_cm, timeline, today=anchor)
        else:
            points = service.bpm_series(bpm_samples(data), timeline, today=anchor)
    except WorkoutProgressError as e:
        logger.error("Chart failed", metric=metric.value, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None

    _render_points(points, as_json)


@app.command()
def color(
    name: str = typer.Argument(..., help="Workout type name"),
    alpha: float = typer.Option(None, help="Also print the color as rgba() with this alpha"),
) -> None:
    """Print the hash-based color for a workout type."""
    hex_color = pastel_for_workout_type(name)
    typer.echo(hex_color)
    if alpha is not None:
        typer.echo(hex_to_rgba(hex_color, alpha))


@app.command()
def colors(
    names: list[str] = typer.Argument(..., help="Template names in display order"),
) -> None:
    """Print order-based colors for a list of template names."""
    for name, hex_color in build_color_map(names).items():
        typer.echo(f"{hex_color}  {name}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"workout-progress v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
