"""Latest-wins reduction of samples to one per calendar bucket."""

from collections.abc import Iterable
from datetime import tzinfo

from workout_progress.models.metrics import CanonicalDayEntry, MetricSample
from workout_progress.services.calendar import date_key, month_key


def _keep_latest(best: dict[str, MetricSample], key: str, sample: MetricSample) -> None:
    # Equal timestamps: the later sample in input order replaces the earlier one
    existing = best.get(key)
    if existing is None or sample.recorded_at >= existing.recorded_at:
        best[key] = sample


def latest_per_day_map(
    samples: Iterable[MetricSample],
    tz: tzinfo | None = None,
) -> dict[str, MetricSample]:
    """Map each local date key to the latest sample recorded that day.

    Args:
        samples: Samples in any order
        tz: Timezone for calendar keys (None = system local zone)

    Returns:
        Dict of date key -> representative sample (empty for empty input)
    """
    best: dict[str, MetricSample] = {}
    for sample in samples:
        _keep_latest(best, date_key(sample.recorded_at, tz), sample)
    return best


def latest_per_day(
    samples: Iterable[MetricSample],
    tz: tzinfo | None = None,
) -> list[CanonicalDayEntry]:
    """One-entry-per-day canonical series, sorted by date key ascending."""
    by_day = latest_per_day_map(samples, tz)
    return [CanonicalDayEntry(date_key=key, sample=by_day[key]) for key in sorted(by_day)]


def latest_per_month(entries: Iterable[CanonicalDayEntry]) -> dict[str, MetricSample]:
    """Reduce canonical day entries to the latest sample of each ``YYYY-MM`` month."""
    best: dict[str, MetricSample] = {}
    for entry in entries:
        _keep_latest(best, month_key(entry.date_key), entry.sample)
    return best
