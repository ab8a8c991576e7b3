"""Exception hierarchy.

Aggregation and color functions never raise for empty or sparse input;
these errors belong to the ingestion boundary and the metric projections.
"""


class WorkoutProgressError(Exception):
    """Base class for all workout-progress errors."""


class BackupFormatError(WorkoutProgressError):
    """Backup file or entry records could not be parsed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class InvalidHeightError(WorkoutProgressError):
    """Height must be a positive number of centimetres."""

    def __init__(self, height_cm: float) -> None:
        self.height_cm = height_cm
        super().__init__(f"Height must be positive, got {height_cm} cm")
