"""Body weight entry transformer.

Converts validated BodyWeightEntry records to MetricSample values in grams.
"""

from collections.abc import Iterable

from workout_progress.models.metrics import MetricSample
from workout_progress.schemas.entries import BodyWeightEntry


class BodyWeightTransformer:
    """Transform BodyWeightEntry -> MetricSample.

    Entry Fields -> Sample Fields:
    - id -> id
    - recorded_at -> recorded_at
    - weight_g -> value (grams, unit conversion happens at chart time)
    """

    @staticmethod
    def transform(entry: BodyWeightEntry) -> MetricSample:
        """Convert one body weight entry to a metric sample.

        Args:
            entry: Validated body weight entry

        Returns:
            MetricSample with the weight in grams
        """
        return MetricSample(recorded_at=entry.recorded_at, value=entry.weight_g, id=entry.id)

    @classmethod
    def transform_all(cls, entries: Iterable[BodyWeightEntry]) -> list[MetricSample]:
        return [cls.transform(entry) for entry in entries]
