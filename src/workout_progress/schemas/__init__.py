"""Pydantic schemas for raw entry records."""

from workout_progress.schemas.entries import BackupFile, BodyWeightEntry, BpmEntry

__all__ = [
    "BackupFile",
    "BodyWeightEntry",
    "BpmEntry",
]
