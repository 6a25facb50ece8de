"""Tests for core work-day arithmetic."""

from datetime import date, datetime, timedelta

import pytest

from linear_report.core.workdays import count_weekend_days, work_days_remaining


@pytest.fixture
def wednesday():
    return date(2025, 1, 15)


class TestCountWeekendDays:
    def test_weekday_only_span(self, wednesday):
        assert count_weekend_days(wednesday, wednesday + timedelta(days=2)) == 0

    def test_inclusive_of_endpoints(self):
        saturday = date(2025, 1, 18)
        sunday = date(2025, 1, 19)
        assert count_weekend_days(saturday, sunday) == 2

    def test_order_independent(self, wednesday):
        later = wednesday + timedelta(days=20)
        assert count_weekend_days(wednesday, later) == count_weekend_days(later, wednesday)

    def test_two_full_weeks(self):
        monday = date(2025, 1, 13)
        assert count_weekend_days(monday, monday + timedelta(days=13)) == 4


class TestWorkDaysRemaining:
    def test_same_day_is_zero(self, wednesday):
        assert work_days_remaining(wednesday, wednesday) == 0

    @pytest.mark.parametrize("day", [date(2025, 1, 18), date(2025, 1, 19)])
    def test_same_weekend_day_is_zero(self, day):
        assert work_days_remaining(day, day) == 0

    def test_symmetric(self, wednesday):
        target = wednesday + timedelta(days=17)
        assert work_days_remaining(wednesday, target) == work_days_remaining(target, wednesday)

    def test_within_week(self, wednesday):
        assert work_days_remaining(wednesday, wednesday + timedelta(days=2)) == 2

    def test_one_weekend_subtracts_two(self):
        friday = date(2025, 1, 17)
        monday = date(2025, 1, 20)
        raw_days = (monday - friday).days
        assert work_days_remaining(friday, monday) == raw_days - 2

    def test_ignores_time_of_day(self, wednesday):
        morning = datetime.combine(wednesday, datetime.min.time()).replace(hour=8)
        evening = datetime(2025, 1, 17, 23, 30)
        assert work_days_remaining(morning, evening) == 2

    def test_accepts_mixed_date_and_datetime(self, wednesday):
        assert work_days_remaining(datetime(2025, 1, 15, 12), wednesday + timedelta(days=1)) == 1

    def test_never_negative(self):
        saturday = date(2025, 1, 18)
        sunday = date(2025, 1, 19)
        assert work_days_remaining(saturday, sunday) == 0
