"""Date utilities for outlay.

Pure functions for turning a reference date into canonical half-open periods.
Nothing here reads the clock: callers pass "today" in explicitly.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from outlay.domain.models import Month

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


class PeriodKind(Enum):
    """Natural period boundaries supported by the normalizer."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class Period:
    """Half-open date range ``[start, end)`` aligned to its kind's boundary."""

    start: date
    end: date
    kind: PeriodKind

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"Period start {self.start} must be before end {self.end}")

    @property
    def label(self) -> str:
        if self.kind is PeriodKind.MONTH:
            return self.start.strftime("%B %Y")
        if self.kind is PeriodKind.WEEK:
            return f"Week of {self.start.isoformat()}"
        return self.start.isoformat()

    def days(self) -> Iterator[date]:
        """Yield every calendar day in the period, in order."""
        day = self.start
        while day < self.end:
            yield day
            day += ONE_DAY

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day < self.end


def parse_date(value: str) -> date:
    """Parse a strict ISO calendar date.

    Args:
        value: Date in YYYY-MM-DD format.

    Returns:
        The parsed date.

    Raises:
        ValueError: If the string is malformed or not a real calendar date.
    """
    if not _DATE_RE.match(value):
        raise ValueError(f"Invalid date '{value}' (expected YYYY-MM-DD)")
    return date.fromisoformat(value)


def parse_month(value: str) -> Month:
    """Validate a YYYY-MM month string.

    Raises:
        ValueError: If the string is malformed or the month number is out of range.
    """
    if not _MONTH_RE.match(value):
        raise ValueError(f"Invalid month '{value}' (expected YYYY-MM)")
    datetime.strptime(value, "%Y-%m")
    return Month(value)


def month_of(day: date) -> Month:
    return Month(day.strftime("%Y-%m"))


def month_range(month: Month) -> Period:
    """Calculate the period covering a calendar month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Period from the first day of the month up to (not including) the first
        day of the next month.

    Raises:
        ValueError: If the month string is invalid.
    """
    parse_month(month)
    year, month_num = int(month[:4]), int(month[5:7])
    start = date(year, month_num, 1)
    if month_num == 12:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, month_num + 1, 1)
    return Period(start, end, PeriodKind.MONTH)


def week_range(day: date) -> Period:
    """Calculate the ISO week (Monday to Sunday) containing ``day``.

    A Sunday belongs to the week whose Monday is six days earlier.
    """
    start = day - timedelta(days=day.weekday())
    return Period(start, start + ONE_WEEK, PeriodKind.WEEK)


def day_range(day: date) -> Period:
    return Period(day, day + ONE_DAY, PeriodKind.DAY)


def period_containing(day: date, kind: PeriodKind) -> Period:
    """Return the period of ``kind`` that contains ``day``."""
    if kind is PeriodKind.MONTH:
        return month_range(month_of(day))
    if kind is PeriodKind.WEEK:
        return week_range(day)
    return day_range(day)


def previous_period(period: Period) -> Period:
    """Return the period of the same kind immediately before ``period``.

    Computed by stepping one day back from the start boundary and re-normalizing,
    so the result is always aligned (January steps back to December of the prior
    year; weeks step back exactly seven days).
    """
    return period_containing(period.start - ONE_DAY, period.kind)


def next_period(period: Period) -> Period:
    """Return the period of the same kind immediately after ``period``."""
    return period_containing(period.end, period.kind)


def current_month(today: date) -> Period:
    return month_range(month_of(today))


def current_week(today: date) -> Period:
    return week_range(today)


def current_day(today: date) -> Period:
    return day_range(today)


def day_label(day: date, short: bool = True) -> str:
    """Weekday name for display, derived only from the date's weekday.

    Args:
        day: Calendar date.
        short: Return a three-letter abbreviation (e.g. "Mon") instead of the full name.

    Returns:
        Weekday name.
    """
    name = DAY_NAMES[day.weekday()]
    return name[:3] if short else name
