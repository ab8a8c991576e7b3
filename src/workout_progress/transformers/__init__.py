"""Entry schema -> MetricSample transformers."""

from workout_progress.transformers.body_weight import BodyWeightTransformer
from workout_progress.transformers.bpm import BpmTransformer

__all__ = [
    "BodyWeightTransformer",
    "BpmTransformer",
]
