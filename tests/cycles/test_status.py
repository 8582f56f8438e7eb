"""Tests for cycle status classification."""

from datetime import UTC, date, datetime

from airac_explorer.cycles.models import CycleStatus
from airac_explorer.cycles.status import as_date, classify

CYCLE_START = date(2025, 1, 23)
CYCLE_END = date(2025, 2, 19)


class TestClassify:
    """Tests for the three-way status classifier."""

    def test_current(self) -> None:
        """Test a day inside the range is current."""
        info = classify(CYCLE_START, CYCLE_END, date(2025, 2, 15))

        assert info.status is CycleStatus.CURRENT
        assert info.is_current
        assert info.is_active
        assert not info.is_upcoming
        assert not info.is_past

    def test_upcoming(self) -> None:
        """Test a range starting after now is upcoming."""
        info = classify(date(2025, 3, 20), date(2025, 4, 16), date(2025, 2, 15))

        assert info.is_upcoming is True
        assert info.is_current is False
        assert info.is_past is False

    def test_past(self) -> None:
        """Test a range ending before now is past."""
        info = classify(date(2024, 12, 1), date(2024, 12, 28), date(2025, 2, 15))

        assert info.is_past
        assert not info.is_current
        assert not info.is_upcoming

    def test_boundaries_are_inclusive(self) -> None:
        """Test first and last day both count as current."""
        assert classify(CYCLE_START, CYCLE_END, CYCLE_START).is_current
        assert classify(CYCLE_START, CYCLE_END, CYCLE_END).is_current

    def test_day_offsets_for_current(self) -> None:
        """Test elapsed/remaining days inside the range."""
        info = classify(CYCLE_START, CYCLE_END, date(2025, 2, 15))

        assert info.days_since_start == 23
        assert info.days_until_end == 4

    def test_day_offsets_are_signed(self) -> None:
        """Test offsets go negative outside the range."""
        info = classify(date(2025, 3, 20), date(2025, 4, 16), date(2025, 2, 15))

        assert info.days_since_start == -33
        assert info.days_until_end == 60

    def test_time_of_day_is_ignored(self) -> None:
        """Test late evening on the last day is still current."""
        late = datetime(2025, 2, 19, 23, 59, 59)
        early = datetime(2025, 1, 23, 0, 0, 1)

        assert classify(CYCLE_START, CYCLE_END, late).is_current
        assert classify(CYCLE_START, CYCLE_END, early).is_current
        assert classify(CYCLE_START, CYCLE_END, late).days_until_end == 0

    def test_defaults_to_today(self) -> None:
        """Test omitting now uses today's date."""
        today = date.today()
        info = classify(today, today)
        assert info.is_current


class TestAsDate:
    """Tests for date normalization."""

    def test_date_passthrough(self) -> None:
        """Test dates are returned unchanged."""
        assert as_date(date(2025, 1, 23)) == date(2025, 1, 23)

    def test_datetime_truncated(self) -> None:
        """Test datetimes drop their time component."""
        assert as_date(datetime(2025, 1, 23, 18, 30)) == date(2025, 1, 23)

    def test_aware_datetime_keeps_local_date(self) -> None:
        """Test aware datetimes are not converted to another zone."""
        assert as_date(datetime(2025, 1, 23, 23, 0, tzinfo=UTC)) == date(2025, 1, 23)
