"""Value types shared by the aggregation core."""

from workout_progress.models.metrics import (
    BucketUnit,
    CanonicalDayEntry,
    ChartPoint,
    MetricSample,
    Timeline,
    UnitSystem,
)

__all__ = [
    "BucketUnit",
    "CanonicalDayEntry",
    "ChartPoint",
    "MetricSample",
    "Timeline",
    "UnitSystem",
]
