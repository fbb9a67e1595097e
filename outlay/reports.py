"""Period aggregation over the expense store.

Every call recomputes from the database; nothing is cached between calls.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from outlay.dates import Period, PeriodKind, previous_period
from outlay.domain.aggregation import (
    DailyTotal,
    PeriodOverview,
    PeriodSummary,
    build_summary,
    fill_daily_series,
)
from outlay.domain.models import CategoryId
from outlay.domain.money import total
from outlay.domain.trend import percent_change
from outlay.store.queries import sum_expenses, sum_expenses_by_category, sum_expenses_by_day

logger = logging.getLogger(__name__)


def summarize(
    period: Period, category_id: CategoryId | None = None, db_path: Path | None = None
) -> PeriodSummary:
    """Total and per-category breakdown for a period.

    The total is the exact sum of the per-category rows, so both come from a
    single read.

    An unknown ``category_id`` simply matches nothing and yields a zero summary.

    Args:
        period: Half-open date range.
        category_id: Optional category to restrict to.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        PeriodSummary with a sparse breakdown ordered by total descending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    rows = sum_expenses_by_category(period, category_id, db_path)
    return build_summary(period, total(row.total for row in rows), rows)


def daily_series(
    period: Period, category_id: CategoryId | None = None, db_path: Path | None = None
) -> list[DailyTotal]:
    """Zero-filled daily totals for every day in the period (seven for a week).

    Raises:
        sqlite3.Error: If database operation fails.
    """
    totals = sum_expenses_by_day(period, category_id, db_path)
    return fill_daily_series(period, totals)


def period_overview(
    period: Period,
    category_id: CategoryId | None = None,
    db_path: Path | None = None,
    include_daily: bool | None = None,
) -> PeriodOverview:
    """Summarize a period and compare it with the preceding one.

    The current summary, the previous total and (optionally) the daily series are
    independent reads, so they run concurrently, each on its own connection.

    Args:
        period: Period to report on.
        category_id: Optional category to restrict to.
        db_path: Path to the database file. If None, uses default location.
        include_daily: Include the daily series. Defaults to True for weeks only.

    Returns:
        PeriodOverview with the trend against the previous period.

    Raises:
        sqlite3.Error: If any of the underlying queries fails.
    """
    if include_daily is None:
        include_daily = period.kind is PeriodKind.WEEK

    previous = previous_period(period)
    started = time.perf_counter()

    with ThreadPoolExecutor(max_workers=3) as pool:
        summary_future = pool.submit(summarize, period, category_id, db_path)
        previous_future = pool.submit(sum_expenses, previous, category_id, db_path)
        daily_future = pool.submit(daily_series, period, category_id, db_path) if include_daily else None

        summary = summary_future.result()
        previous_total = previous_future.result()
        daily = daily_future.result() if daily_future is not None else None

    logger.debug("Overview for %s computed in %.1f ms", period.label, (time.perf_counter() - started) * 1000)

    return PeriodOverview(
        period=period,
        previous=previous,
        summary=summary,
        previous_total=previous_total,
        change=percent_change(summary.total, previous_total),
        daily=daily,
    )
