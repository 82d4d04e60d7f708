"""Unit tests for the DateRange value object.

Tests cover:
- Validation and UTC normalization
- Day counting (partial days round up, minimum one billable day)
- Closed-interval overlap
- Started / ended / overdue relative to a reference instant
- Extensions
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.domain.value_objects import DateRange
from tests.conftest import utc


@pytest.mark.unit
class TestDateRangeConstruction:
    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError, match="start must not be after end"):
            DateRange(utc(2026, 5, 4), utc(2026, 5, 1))

    def test_zero_length_period_allowed(self):
        period = DateRange(utc(2026, 5, 1), utc(2026, 5, 1))

        assert period.days == 0
        assert period.billable_days == 1

    def test_naive_datetimes_treated_as_utc(self):
        period = DateRange(datetime(2026, 5, 1), datetime(2026, 5, 2))

        assert period.start.tzinfo is UTC
        assert period.start == utc(2026, 5, 1)

    def test_aware_datetimes_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        period = DateRange(
            datetime(2026, 5, 1, 2, tzinfo=plus_two),
            datetime(2026, 5, 2, 2, tzinfo=plus_two),
        )

        assert period.start == utc(2026, 5, 1)

    def test_starting_at(self):
        period = DateRange.starting_at(utc(2026, 5, 1), 3)

        assert period.end == utc(2026, 5, 4)

    def test_starting_at_rejects_non_positive_days(self):
        with pytest.raises(ValueError):
            DateRange.starting_at(utc(2026, 5, 1), 0)


@pytest.mark.unit
class TestDateRangeDays:
    def test_whole_days(self):
        assert DateRange(utc(2026, 5, 1), utc(2026, 5, 4)).days == 3

    def test_partial_day_rounds_up(self):
        period = DateRange(utc(2026, 5, 1), utc(2026, 5, 3, 1))

        assert period.days == 3
        assert period.billable_days == 3

    def test_short_period_bills_one_day(self):
        period = DateRange(utc(2026, 5, 1, 9), utc(2026, 5, 1, 17))

        assert period.billable_days == 1


@pytest.mark.unit
class TestDateRangeOverlap:
    def test_overlapping_periods(self):
        a = DateRange(utc(2026, 5, 1), utc(2026, 5, 5))
        b = DateRange(utc(2026, 5, 4), utc(2026, 5, 8))

        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_touching_boundaries_overlap(self):
        a = DateRange(utc(2026, 5, 1), utc(2026, 5, 5))
        b = DateRange(utc(2026, 5, 5), utc(2026, 5, 8))

        assert a.overlaps(b)

    def test_disjoint_periods_do_not_overlap(self):
        a = DateRange(utc(2026, 5, 1), utc(2026, 5, 5))
        b = DateRange(utc(2026, 5, 5, 1), utc(2026, 5, 8))

        assert not a.overlaps(b)

    def test_contained_period_overlaps(self):
        outer = DateRange(utc(2026, 5, 1), utc(2026, 5, 10))
        inner = DateRange(utc(2026, 5, 3), utc(2026, 5, 4))

        assert outer.overlaps(inner)
        assert outer.contains(utc(2026, 5, 10))


@pytest.mark.unit
class TestDateRangeRelativeToNow:
    period = DateRange(utc(2026, 5, 1), utc(2026, 5, 4))

    def test_has_started_at_start_instant(self):
        assert self.period.has_started(utc(2026, 5, 1))
        assert not self.period.has_started(utc(2026, 4, 30))

    def test_has_ended_only_after_end_instant(self):
        assert not self.period.has_ended(utc(2026, 5, 4))
        assert self.period.has_ended(utc(2026, 5, 4, 1))

    def test_days_overdue_rounds_up(self):
        assert self.period.days_overdue(utc(2026, 5, 4, 1)) == 1
        assert self.period.days_overdue(utc(2026, 5, 6, 12)) == 3

    def test_days_overdue_zero_before_end(self):
        assert self.period.days_overdue(utc(2026, 5, 2)) == 0

    def test_days_until_end(self):
        assert self.period.days_until_end(utc(2026, 5, 2)) == 2
        assert self.period.days_until_end(utc(2026, 5, 6)) == -2


@pytest.mark.unit
class TestDateRangeExtension:
    period = DateRange(utc(2026, 5, 1), utc(2026, 5, 4))

    def test_extend_to(self):
        extended = self.period.extend_to(utc(2026, 5, 6))

        assert extended.start == self.period.start
        assert extended.days == 5

    def test_extend_to_earlier_end_rejected(self):
        with pytest.raises(ValueError):
            self.period.extend_to(utc(2026, 5, 4))

    def test_extend_by(self):
        assert self.period.extend_by(2).end == utc(2026, 5, 6)

    def test_extend_by_rejects_non_positive(self):
        with pytest.raises(ValueError):
            self.period.extend_by(0)
