"""Tests for outlay.domain.aggregation pure functions."""

from datetime import date

from outlay.dates import day_range, month_range, week_range
from outlay.domain.aggregation import (
    CategoryTotal,
    DailyTotal,
    build_summary,
    fill_daily_series,
    sort_category_totals,
)
from outlay.domain.models import CategoryName, Money, Month


def row(name: str, amount: int) -> CategoryTotal:
    return CategoryTotal(category=CategoryName(name), total=Money(amount))


class TestSortCategoryTotals:
    """Tests for sort_category_totals."""

    def test_descending_by_total(self) -> None:
        """Largest total should come first."""
        rows = [row("Bills", 100), row("Food", 300), row("Transport", 200)]

        assert [r.category for r in sort_category_totals(rows)] == ["Food", "Transport", "Bills"]

    def test_ties_broken_by_name(self) -> None:
        """Equal totals should be ordered by name ascending."""
        rows = [row("Transport", 100), row("Bills", 100), row("Food", 100)]

        assert [r.category for r in sort_category_totals(rows)] == ["Bills", "Food", "Transport"]


class TestBuildSummary:
    """Tests for build_summary."""

    def test_empty_period(self) -> None:
        """No expenses should give a zero total and an empty breakdown."""
        summary = build_summary(month_range(Month("2024-03")), Money(0), [])

        assert summary.total == Money(0)
        assert summary.by_category == []

    def test_breakdown_is_sparse(self) -> None:
        """Zero-total categories should not appear."""
        summary = build_summary(
            month_range(Month("2024-03")),
            Money(35000),
            [row("Transport", 10000), row("Shopping", 0), row("Food", 25000)],
        )

        assert summary.by_category == [row("Food", 25000), row("Transport", 10000)]


class TestFillDailySeries:
    """Tests for fill_daily_series."""

    def test_week_has_seven_entries(self) -> None:
        """A week should always produce seven consecutive days."""
        period = week_range(date(2024, 3, 6))

        series = fill_daily_series(period, {})

        assert len(series) == 7
        assert series[0].day == period.start
        assert [entry.day.day for entry in series] == [4, 5, 6, 7, 8, 9, 10]
        assert all(entry.total == Money(0) for entry in series)

    def test_known_days_keep_their_totals(self) -> None:
        """Days with data should keep it; the rest are zero-filled."""
        period = week_range(date(2024, 3, 4))
        totals = {date(2024, 3, 4): Money(1200), date(2024, 3, 8): Money(800)}

        series = fill_daily_series(period, totals)

        assert series[0] == DailyTotal(date(2024, 3, 4), Money(1200))
        assert series[4] == DailyTotal(date(2024, 3, 8), Money(800))
        assert [entry.total for entry in series] == [1200, 0, 0, 0, 800, 0, 0]

    def test_days_outside_period_are_ignored(self) -> None:
        """Totals for other days should not leak into the series."""
        period = week_range(date(2024, 3, 4))

        series = fill_daily_series(period, {date(2024, 3, 11): Money(500)})

        assert sum(entry.total for entry in series) == 0

    def test_non_week_periods_enumerate_every_day(self) -> None:
        """Other period lengths should not fail; they list each day."""
        assert len(fill_daily_series(month_range(Month("2024-02")), {})) == 29
        assert len(fill_daily_series(day_range(date(2024, 2, 1)), {})) == 1
