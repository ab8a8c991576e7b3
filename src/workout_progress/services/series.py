"""Gap-aware chart series over fixed week, month and year windows."""

from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta, tzinfo

import structlog

from workout_progress.core.config import Settings
from workout_progress.core.config import settings as default_settings
from workout_progress.core.exceptions import InvalidHeightError
from workout_progress.core.units import display_weight, round_half_up
from workout_progress.models.metrics import (
    BucketUnit,
    ChartPoint,
    MetricSample,
    Timeline,
    UnitSystem,
)
from workout_progress.services.calendar import (
    date_key,
    day_label,
    month_key_for,
    month_label,
    shift_months,
)
from workout_progress.services.canonical import latest_per_day, latest_per_month

logger = structlog.get_logger()

Projection = Callable[[MetricSample], float]


def _sample_value(sample: MetricSample) -> float:
    return sample.value


def resolve_today(tz: tzinfo | None = None) -> date:
    """Read the local calendar date from the wall clock."""
    return datetime.now(tz).date()


def build_series(
    samples: Iterable[MetricSample],
    timeline: Timeline,
    today: date | None = None,
    tz: tzinfo | None = None,
    project: Projection | None = None,
) -> list[ChartPoint]:
    """Project samples onto the fixed bucket window of a timeline.

    Samples are first reduced to the latest one per local day; the year
    timeline further reduces those to the latest one per month. The window
    ends at ``today`` inclusive and is ordered oldest to newest.

    Args:
        samples: Samples in any order (may be empty)
        timeline: Window to build (7 days, 30 days or 12 months)
        today: Last bucket's date (None = read the local clock once)
        tz: Timezone for calendar keys and the clock (None = system local zone)
        project: Maps the chosen sample to the plotted value

    Returns:
        Exactly ``timeline.bucket_count`` points; buckets without data have
        ``value=None``
    """
    timeline = Timeline(timeline)
    if today is None:
        today = resolve_today(tz)
    project = project or _sample_value

    by_day = latest_per_day(samples, tz)
    size = timeline.bucket_count
    points: list[ChartPoint] = []

    if timeline.bucket_unit == BucketUnit.MONTH:
        by_month = latest_per_month(by_day)
        for offset in range(size - 1, -1, -1):
            month_start = shift_months(today, -offset)
            sample = by_month.get(month_key_for(month_start))
            points.append(
                ChartPoint(
                    label=month_label(month_start),
                    value=project(sample) if sample is not None else None,
                )
            )
        return points

    values = {entry.date_key: entry.sample for entry in by_day}
    for offset in range(size - 1, -1, -1):
        day = today - timedelta(days=offset)
        sample = values.get(date_key(day))
        points.append(
            ChartPoint(
                label=day_label(day),
                value=project(sample) if sample is not None else None,
            )
        )
    return points


def compute_bmi(weight_g: float, height_cm: float) -> float:
    """Body mass index rounded to one decimal.

    Example:
        compute_bmi(80000, 180) -> 24.7

    Raises:
        InvalidHeightError: If height_cm is not positive
    """
    if height_cm <= 0:
        raise InvalidHeightError(height_cm)
    kg = weight_g / 1000
    m = height_cm / 100
    return round_half_up(kg / (m * m) * 10) / 10


class SeriesService:
    """Build chart series for the body weight, BMI and BPM trackers.

    Wraps ``build_series`` with per-metric value projections and fills
    unit, timezone and height defaults from settings.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize series service.

        Args:
            settings: Application settings (defaults to the global instance)
        """
        self.settings = settings or default_settings
        self.tz = self.settings.get_tzinfo()
        self.logger = logger.bind(service="series")

    def _build(
        self,
        metric: str,
        samples: Iterable[MetricSample],
        timeline: Timeline | None,
        today: date | None,
        project: Projection | None = None,
    ) -> list[ChartPoint]:
        timeline = Timeline(timeline or self.settings.default_timeline)
        samples = list(samples)
        self.logger.debug(
            "Building series",
            metric=metric,
            timeline=timeline.value,
            sample_count=len(samples),
        )
        points = build_series(samples, timeline, today=today, tz=self.tz, project=project)
        self.logger.debug(
            "Series built",
            metric=metric,
            timeline=timeline.value,
            filled=sum(1 for p in points if p.value is not None),
            buckets=len(points),
        )
        return points

    def weight_series(
        self,
        samples: Iterable[MetricSample],
        timeline: Timeline | None = None,
        unit: UnitSystem | None = None,
        today: date | None = None,
    ) -> list[ChartPoint]:
        """Body weight series in the display unit.

        Args:
            samples: Weight samples with values in grams
            timeline: Window to build (defaults to settings)
            unit: kg or lb (defaults to settings)
            today: Last bucket's date (None = local clock)

        Returns:
            Chart points rounded to one decimal
        """
        unit = UnitSystem(unit or self.settings.unit_system)
        return self._build(
            "body_weight",
            samples,
            timeline,
            today,
            project=lambda sample: display_weight(sample.value, unit),
        )

    def bpm_series(
        self,
        samples: Iterable[MetricSample],
        timeline: Timeline | None = None,
        today: date | None = None,
    ) -> list[ChartPoint]:
        """Heart rate (BPM) series, plotted as recorded."""
        return self._build("bpm", samples, timeline, today)

    def bmi_series(
        self,
        samples: Iterable[MetricSample],
        height_cm: float | None = None,
        timeline: Timeline | None = None,
        today: date | None = None,
    ) -> list[ChartPoint]:
        """BMI series derived from weight samples in grams.

        Raises:
            InvalidHeightError: If no positive height is given or configured
        """
        height = height_cm if height_cm is not None else self.settings.height_cm
        if height is None or height <= 0:
            raise InvalidHeightError(height or 0)
        return self._build(
            "bmi",
            samples,
            timeline,
            today,
            project=lambda sample: compute_bmi(sample.value, height),
        )
