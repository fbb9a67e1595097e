"""Tests for outlay.dates pure functions."""

from datetime import date, timedelta

import pytest

from outlay.dates import (
    Period,
    PeriodKind,
    current_day,
    current_month,
    current_week,
    day_label,
    day_range,
    month_range,
    next_period,
    parse_date,
    parse_month,
    previous_period,
    week_range,
)
from outlay.domain.models import Month


class TestMonthRange:
    """Tests for month_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        period = month_range(Month("2025-01"))

        assert period.start == date(2025, 1, 1)
        assert period.end == date(2025, 2, 1)
        assert period.kind is PeriodKind.MONTH
        assert period.label == "January 2025"

    def test_december_range_crosses_year(self) -> None:
        """Should roll December over into January of the next year."""
        period = month_range(Month("2024-12"))

        assert period.start == date(2024, 12, 1)
        assert period.end == date(2025, 1, 1)

    def test_february_non_leap_year(self) -> None:
        """Should handle February in non-leap year."""
        period = month_range(Month("2025-02"))

        assert period.end == date(2025, 3, 1)
        assert len(list(period.days())) == 28

    def test_february_leap_year(self) -> None:
        """Should handle February in leap year."""
        period = month_range(Month("2024-02"))

        assert period.end == date(2024, 3, 1)
        assert len(list(period.days())) == 29

    def test_end_is_start_of_following_month(self) -> None:
        """Every month's end should be the start of the next calendar month."""
        for year in (2023, 2024, 2025):
            for month_num in range(1, 13):
                period = month_range(Month(f"{year}-{month_num:02d}"))
                following = next_period(period)

                assert period.start.day == 1
                assert period.end == following.start
                assert following.start.day == 1

    def test_invalid_month_format_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month format."""
        with pytest.raises(ValueError):
            month_range(Month("invalid"))

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            month_range(Month("2025-13"))


class TestWeekRange:
    """Tests for week_range."""

    def test_monday_starts_its_own_week(self) -> None:
        """A Monday should be the start of its week."""
        period = week_range(date(2024, 3, 4))

        assert period.start == date(2024, 3, 4)
        assert period.end == date(2024, 3, 11)
        assert period.kind is PeriodKind.WEEK

    def test_sunday_belongs_to_previous_monday(self) -> None:
        """A Sunday should belong to the week that began six days earlier."""
        period = week_range(date(2024, 3, 10))

        assert period.start == date(2024, 3, 4)
        assert period.end == date(2024, 3, 11)

    def test_week_spanning_year_boundary(self) -> None:
        """A week can start in one year and end in the next."""
        period = week_range(date(2025, 1, 1))

        assert period.start == date(2024, 12, 30)
        assert period.end == date(2025, 1, 6)

    def test_start_is_monday_and_contains_date(self) -> None:
        """For every day across a year, the week starts on Monday and contains the day."""
        day = date(2024, 1, 1)
        while day < date(2025, 1, 1):
            period = week_range(day)

            assert period.start.weekday() == 0
            assert period.start <= day < period.end
            assert day in period
            assert period.end - period.start == timedelta(days=7)
            day += timedelta(days=1)


class TestAdjacentPeriods:
    """Tests for previous_period and next_period."""

    def test_previous_month(self) -> None:
        """Should step back one calendar month."""
        assert previous_period(month_range(Month("2024-03"))) == month_range(Month("2024-02"))

    def test_previous_of_january_is_december(self) -> None:
        """January should step back to December of the previous year."""
        assert previous_period(month_range(Month("2024-01"))) == month_range(Month("2023-12"))

    def test_previous_for_every_month(self) -> None:
        """previous(month_range(m)) should equal month_range(m - 1) for all months."""
        for month_num in range(2, 13):
            current = month_range(Month(f"2024-{month_num:02d}"))
            expected = month_range(Month(f"2024-{month_num - 1:02d}"))
            assert previous_period(current) == expected

    def test_next_of_december_is_january(self) -> None:
        """December should step forward into the next year."""
        assert next_period(month_range(Month("2024-12"))) == month_range(Month("2025-01"))

    def test_previous_week_is_seven_days_earlier(self) -> None:
        """Weeks should shift by exactly seven days across a month boundary."""
        period = week_range(date(2024, 3, 1))
        previous = previous_period(period)

        assert previous.start == period.start - timedelta(days=7)
        assert previous.end == period.start

    def test_next_week(self) -> None:
        """The next week should start where this one ends."""
        period = week_range(date(2024, 12, 31))

        assert next_period(period) == week_range(date(2025, 1, 7))

    def test_previous_day(self) -> None:
        """Days should shift by exactly one day."""
        assert previous_period(day_range(date(2024, 3, 1))) == day_range(date(2024, 2, 29))

    def test_round_trip(self) -> None:
        """Stepping back and forward should return the same period."""
        for period in (month_range(Month("2024-01")), week_range(date(2024, 1, 3)), day_range(date(2024, 1, 1))):
            assert next_period(previous_period(period)) == period


class TestPeriod:
    """Tests for the Period value type."""

    def test_rejects_empty_range(self) -> None:
        """start >= end is a programming error."""
        with pytest.raises(ValueError):
            Period(date(2024, 3, 1), date(2024, 3, 1), PeriodKind.DAY)

    def test_days_are_half_open(self) -> None:
        """days() should include start and exclude end."""
        days = list(week_range(date(2024, 3, 6)).days())

        assert days[0] == date(2024, 3, 4)
        assert days[-1] == date(2024, 3, 10)
        assert len(days) == 7

    def test_labels(self) -> None:
        """Each kind should have a readable label."""
        assert week_range(date(2024, 3, 6)).label == "Week of 2024-03-04"
        assert day_range(date(2024, 3, 5)).label == "2024-03-05"

    def test_current_periods_use_injected_today(self) -> None:
        """Current periods should be derived from the date passed in."""
        today = date(2024, 3, 10)

        assert current_month(today) == month_range(Month("2024-03"))
        assert current_week(today).start == date(2024, 3, 4)
        assert current_day(today) == day_range(today)


class TestParsing:
    """Tests for strict date and month parsing."""

    def test_parse_valid_date(self) -> None:
        """Should parse ISO dates."""
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value", ["2024-02-30", "2023-02-29", "2024-13-01", "20240301", "2024-3-1", "03/05/2024", ""]
    )
    def test_parse_invalid_date(self, value: str) -> None:
        """Should reject malformed or impossible dates."""
        with pytest.raises(ValueError):
            parse_date(value)

    def test_parse_month(self) -> None:
        """Should accept YYYY-MM and reject anything else."""
        assert parse_month("2024-03") == "2024-03"
        with pytest.raises(ValueError):
            parse_month("2024-3")
        with pytest.raises(ValueError):
            parse_month("2024-00")


class TestDayLabel:
    """Tests for day_label."""

    def test_short_labels_for_a_week(self) -> None:
        """Should label Monday through Sunday in order."""
        labels = [day_label(day) for day in week_range(date(2024, 3, 4)).days()]

        assert labels == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_full_label(self) -> None:
        """Should return the full weekday name when requested."""
        assert day_label(date(2024, 3, 10), short=False) == "Sunday"
