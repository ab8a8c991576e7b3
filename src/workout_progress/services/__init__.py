"""Aggregation and color services."""

from workout_progress.services.backup import load_backup, parse_backup
from workout_progress.services.calendar import date_key, month_key
from workout_progress.services.canonical import latest_per_day, latest_per_month
from workout_progress.services.colors import (
    WORKOUT_COLORS,
    build_color_map,
    color_for_index,
    hex_to_rgba,
    pastel_for_workout_type,
)
from workout_progress.services.series import SeriesService, build_series, compute_bmi

__all__ = [
    "WORKOUT_COLORS",
    "SeriesService",
    "build_color_map",
    "build_series",
    "color_for_index",
    "compute_bmi",
    "date_key",
    "hex_to_rgba",
    "latest_per_day",
    "latest_per_month",
    "load_backup",
    "month_key",
    "parse_backup",
    "pastel_for_workout_type",
]
