"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

import pytest

from workout_progress.core.config import Settings
from workout_progress.models.metrics import MetricSample


@pytest.fixture
def today() -> date:
    """Fixed anchor date for window tests (June 15, 2025)."""
    return date(2025, 6, 15)


@pytest.fixture
def make_sample() -> Callable[..., MetricSample]:
    """Factory for samples from an ISO timestamp string.

    Naive timestamps are local wall-clock time, so results do not depend on
    the machine's timezone.
    """

    def _make(recorded_at: str, value: float, sample_id: str | None = None) -> MetricSample:
        return MetricSample(
            recorded_at=datetime.fromisoformat(recorded_at),
            value=value,
            id=sample_id,
        )

    return _make


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        _env_file=None,
        unit_system="kg",
        default_timeline="week",
        height_cm=180,
        timezone="UTC",
        log_level="DEBUG",
    )


@pytest.fixture
def backup_data() -> dict:
    """Backup payload in the app's export format."""
    return {
        "schemaVersion": 3,
        "exportedAt": "2025-06-15T12:00:00Z",
        "settings": {"unitSystem": "kg"},
        "templates": [],
        "logs": [],
        "bodyWeights": [
            {"id": "2025-06-14", "recordedAt": "2025-06-14T08:00:00Z", "weightG": 75500},
            {"id": "2025-06-15a", "recordedAt": "2025-06-15T07:00:00Z", "weightG": 76000},
            {"id": "2025-06-15b", "recordedAt": "2025-06-15T09:00:00Z", "weightG": 75000},
        ],
        "bpmEntries": [
            {"id": "bpm-1", "recordedAt": "2025-06-13T08:00:00Z", "bpm": 60},
            {"id": "bpm-2", "recordedAt": "2025-06-13T20:00:00Z", "bpm": 65},
        ],
    }


@pytest.fixture
def backup_file(tmp_path: Path, backup_data: dict) -> Path:
    """Backup payload written to a temporary file."""
    path = tmp_path / "backup.json"
    path.write_text(json.dumps(backup_data))
    return path
