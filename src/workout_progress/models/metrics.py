"""Metric samples, chart points and timeline definitions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UnitSystem(str, Enum):
    """Unit system for displaying body weight."""

    KG = "kg"
    LB = "lb"


class BucketUnit(str, Enum):
    """Width of a single chart bucket."""

    DAY = "day"
    MONTH = "month"


class Timeline(str, Enum):
    """Requested chart window.

    Each timeline fixes the number of buckets and the bucket width.
    """

    WEEK = "week"  # Last 7 days
    MONTH = "month"  # Last 30 days
    YEAR = "year"  # Last 12 months

    @property
    def bucket_count(self) -> int:
        """Number of buckets in the window, always returned in full."""
        return _BUCKET_COUNTS[self]

    @property
    def bucket_unit(self) -> BucketUnit:
        """Whether buckets are days or calendar months."""
        return BucketUnit.MONTH if self is Timeline.YEAR else BucketUnit.DAY


_BUCKET_COUNTS = {
    Timeline.WEEK: 7,
    Timeline.MONTH: 30,
    Timeline.YEAR: 12,
}


@dataclass(frozen=True)
class MetricSample:
    """One timestamped measurement (body weight in grams, BPM, ...).

    Naive ``recorded_at`` values are local wall-clock time.
    """

    recorded_at: datetime
    value: float
    id: str | None = None


@dataclass(frozen=True)
class CanonicalDayEntry:
    """The representative sample chosen for one calendar day."""

    date_key: str
    sample: MetricSample


@dataclass(frozen=True)
class ChartPoint:
    """One bucket of a chart series.

    ``value`` is None when the bucket has no data, which is distinct from 0.
    """

    label: str
    value: float | None = None

    @property
    def is_absent(self) -> bool:
        return self.value is None
