"""BPM entry transformer."""

from collections.abc import Iterable

from workout_progress.models.metrics import MetricSample
from workout_progress.schemas.entries import BpmEntry


class BpmTransformer:
    """Transform BpmEntry -> MetricSample (value in beats per minute)."""

    @staticmethod
    def transform(entry: BpmEntry) -> MetricSample:
        return MetricSample(recorded_at=entry.recorded_at, value=entry.bpm, id=entry.id)

    @classmethod
    def transform_all(cls, entries: Iterable[BpmEntry]) -> list[MetricSample]:
        return [cls.transform(entry) for entry in entries]
