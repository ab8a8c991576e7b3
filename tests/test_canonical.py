"""Tests for latest-wins canonicalization."""

from datetime import datetime

from workout_progress.models.metrics import CanonicalDayEntry, MetricSample
from workout_progress.services.canonical import (
    latest_per_day,
    latest_per_day_map,
    latest_per_month,
)


class TestLatestPerDay:
    """Tests for latest_per_day."""

    def test_empty_input(self) -> None:
        """Test empty input returns an empty result, not an error."""
        assert latest_per_day([]) == []
        assert latest_per_day_map([]) == {}

    def test_one_entry_per_day_sorted(self, make_sample) -> None:
        """Test one entry per day, sorted ascending by date key."""
        samples = [
            make_sample("2025-06-03T10:00:00", 82000, "bw-3"),
            make_sample("2025-06-01T10:00:00", 80000, "bw-1"),
            make_sample("2025-06-02T10:00:00", 81000, "bw-2"),
        ]

        result = latest_per_day(samples)

        assert [e.date_key for e in result] == ["2025-06-01", "2025-06-02", "2025-06-03"]
        assert [e.sample.id for e in result] == ["bw-1", "bw-2", "bw-3"]

    def test_keeps_latest_same_day(self, make_sample) -> None:
        """Test only the latest sample of a day is kept."""
        samples = [
            make_sample("2025-06-02T01:00:00", 80000, "bw-1"),
            make_sample("2025-06-02T06:00:00", 79500, "bw-2"),
            make_sample("2025-06-02T03:00:00", 80200, "bw-3"),
        ]

        result = latest_per_day(samples)

        assert result == [CanonicalDayEntry(date_key="2025-06-02", sample=samples[1])]

    def test_latest_wins_regardless_of_order(self, make_sample) -> None:
        """Test the result does not depend on input order."""
        morning = make_sample("2024-03-01T08:00:00", 60)
        evening = make_sample("2024-03-01T20:00:00", 65)

        assert latest_per_day([morning, evening]) == latest_per_day([evening, morning])
        assert latest_per_day_map([morning, evening])["2024-03-01"] == evening

    def test_equal_timestamps_later_input_wins(self, make_sample) -> None:
        """Test exact timestamp ties go to the later sample in input order."""
        first = make_sample("2025-06-02T08:00:00", 70, "first")
        second = make_sample("2025-06-02T08:00:00", 72, "second")

        assert latest_per_day_map([first, second])["2025-06-02"].id == "second"
        assert latest_per_day_map([second, first])["2025-06-02"].id == "first"

    def test_does_not_mutate_input(self, make_sample) -> None:
        """Test the input list is left untouched."""
        samples = [
            make_sample("2025-06-02T08:00:00", 1),
            make_sample("2025-06-01T08:00:00", 2),
        ]
        before = list(samples)

        latest_per_day(samples)

        assert samples == before


class TestLatestPerMonth:
    """Tests for latest_per_month."""

    def test_empty(self) -> None:
        """Test no entries gives an empty mapping."""
        assert latest_per_month([]) == {}

    def test_latest_day_in_month_wins(self, make_sample) -> None:
        """Test the latest canonical day represents its month."""
        samples = [
            make_sample("2025-06-01T08:00:00", 80000),
            make_sample("2025-06-10T08:00:00", 79000),
            make_sample("2025-05-20T08:00:00", 81000),
        ]

        result = latest_per_month(latest_per_day(samples))

        assert result["2025-06"].value == 79000
        assert result["2025-05"].value == 81000
        assert set(result) == {"2025-05", "2025-06"}

    def test_accepts_entries_directly(self) -> None:
        """Test month reduction over hand-built day entries."""
        early = MetricSample(recorded_at=datetime(2024, 1, 3, 9), value=1)
        late = MetricSample(recorded_at=datetime(2024, 1, 28, 9), value=2)
        entries = [
            CanonicalDayEntry(date_key="2024-01-28", sample=late),
            CanonicalDayEntry(date_key="2024-01-03", sample=early),
        ]

        assert latest_per_month(entries) == {"2024-01": late}
