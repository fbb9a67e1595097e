"""Pure functions for period aggregation.

This module contains the functional core for reporting operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations

All monetary amounts are in minor units (Money type).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from outlay.dates import Period
from outlay.domain.models import CategoryName, Money
from outlay.domain.trend import Trend


@dataclass(frozen=True)
class CategoryTotal:
    """Total spent in one category over a period."""

    category: CategoryName
    total: Money


@dataclass(frozen=True)
class DailyTotal:
    """Total spent on a single calendar day."""

    day: date
    total: Money


@dataclass(frozen=True)
class PeriodSummary:
    """Total and sparse per-category breakdown for a period."""

    period: Period
    total: Money
    by_category: list[CategoryTotal]


@dataclass(frozen=True)
class PeriodOverview:
    """A period's summary compared against the preceding period."""

    period: Period
    previous: Period
    summary: PeriodSummary
    previous_total: Money
    change: int | Trend
    daily: list[DailyTotal] | None = None


def sort_category_totals(rows: Iterable[CategoryTotal]) -> list[CategoryTotal]:
    """Order category totals by amount descending, then name ascending."""
    return sorted(rows, key=lambda row: (-row.total, row.category))


def build_summary(period: Period, total: Money, rows: Iterable[CategoryTotal]) -> PeriodSummary:
    """Assemble a period summary.

    Categories without activity are dropped: the breakdown is sparse, unlike the
    daily series.

    Args:
        period: Period the figures cover.
        total: Sum of all matching expenses in the period.
        rows: Per-category totals, in any order.

    Returns:
        PeriodSummary with a deterministic breakdown order.
    """
    by_category = sort_category_totals(row for row in rows if row.total > 0)
    return PeriodSummary(period=period, total=total, by_category=by_category)


def fill_daily_series(period: Period, totals_by_day: Mapping[date, Money]) -> list[DailyTotal]:
    """Produce one entry per calendar day in the period, zero-filling gaps.

    Args:
        period: Period to enumerate (a week yields exactly seven entries).
        totals_by_day: Known daily totals; days outside the period are ignored.

    Returns:
        Date-ordered list of DailyTotal.
    """
    return [DailyTotal(day=day, total=totals_by_day.get(day, Money(0))) for day in period.days()]
