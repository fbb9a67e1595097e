"""Report commands for viewing spending by month, week and day."""

from datetime import date
from pathlib import Path

from outlay.commands.common import (
    console,
    find_category,
    get_settings,
    handle_errors,
    parse_date_option,
    require_database,
)
from outlay.dates import Period, current_month, day_label, day_range, month_range, parse_month, week_range
from outlay.domain.aggregation import CategoryTotal, DailyTotal, PeriodOverview
from outlay.domain.models import CategoryId, Money
from outlay.domain.money import format_money
from outlay.domain.trend import Trend, describe_change
from outlay.errors import ValidationError
from outlay.reports import period_overview


def calculate_histogram_bar_length(amount: Money, max_amount: Money, bar_width: int) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return amount * bar_width // max_amount


def format_change_with_color(overview: PeriodOverview) -> str:
    """Format the trend line; more spending is red, less is green."""
    text = describe_change(overview.change)
    versus = f"vs {overview.previous.label}"
    if isinstance(overview.change, Trend):
        return f"[dim]{text} {versus}[/dim]"
    if overview.change > 0:
        return f"[red]{text}[/red] {versus}"
    if overview.change < 0:
        return f"[green]{text}[/green] {versus}"
    return f"{text} {versus}"


def render_category_line(row: CategoryTotal, symbol: str, histogram: bool, max_amount: Money, bar_width: int) -> None:
    amount_display = format_money(row.total, symbol)
    if histogram:
        bar = "█" * calculate_histogram_bar_length(row.total, max_amount, bar_width)
        console.print(f"  {row.category:20} {amount_display:>16} {bar}")
    else:
        console.print(f"  {row.category}: {amount_display}")


def render_daily_line(entry: DailyTotal, symbol: str, max_amount: Money, bar_width: int) -> None:
    amount_display = format_money(entry.total, symbol)
    bar = "█" * calculate_histogram_bar_length(entry.total, max_amount, bar_width)
    label = f"{day_label(entry.day)} {entry.day.isoformat()}"
    if entry.total == 0:
        console.print(f"  [dim]{label:15} {amount_display:>16}[/dim]")
    else:
        console.print(f"  {label:15} {amount_display:>16} {bar}")


def render_overview(overview: PeriodOverview, symbol: str, histogram: bool = True) -> None:
    """Print an overview: total, trend, optional daily series and category breakdown."""
    summary = overview.summary

    console.print(f"[bold cyan]{overview.period.label}[/bold cyan]\n")
    console.print(f"[bold]Total spent:[/bold] {format_money(summary.total, symbol)}")
    console.print(f"[bold]Trend:[/bold] {format_change_with_color(overview)}")
    console.print(f"[dim]Previous: {format_money(overview.previous_total, symbol)}[/dim]\n")

    if overview.daily is not None:
        console.print("[bold]Daily spending:[/bold]\n")
        max_daily = Money(max((entry.total for entry in overview.daily), default=0))
        for entry in overview.daily:
            render_daily_line(entry, symbol, max_daily, 30)
        console.print()

    if not summary.by_category:
        console.print("[dim]No expenses recorded for this period[/dim]")
        return

    console.print("[bold]By category:[/bold]\n")
    max_amount = Money(max(row.total for row in summary.by_category))
    for row in summary.by_category:
        render_category_line(row, symbol, histogram, max_amount, 30)


def _category_filter(category: str | None, db_path: Path) -> CategoryId | None:
    """Resolve a --category filter; an unknown name matches nothing."""
    if not category:
        return None
    found = find_category(category, db_path)
    return found.id if found else CategoryId(0)


def _show_period(period: Period, category: str | None, histogram: bool = True) -> None:
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        category_id = _category_filter(category, db_path)
        overview = period_overview(period, category_id, db_path)

    if category:
        console.print(f"[dim]Category: {category}[/dim]")
    render_overview(overview, settings.currency_symbol, histogram)


def report_command(month: str | None = None, category: str | None = None, histogram: bool = True) -> None:
    """Monthly report: total, trend against the previous month, and breakdown."""
    with handle_errors():
        if month:
            try:
                period = month_range(parse_month(month))
            except ValueError as e:
                raise ValidationError("month", str(e)) from e
        else:
            period = current_month(date.today())

    _show_period(period, category, histogram)


def week_command(day: str | None = None, category: str | None = None) -> None:
    """Weekly report for the ISO week containing ``day`` (default: today)."""
    with handle_errors():
        period = week_range(parse_date_option(day, date.today()))

    _show_period(period, category)


def day_command(day: str | None = None, category: str | None = None) -> None:
    """Daily report for ``day`` (default: today)."""
    with handle_errors():
        period = day_range(parse_date_option(day, date.today()))

    _show_period(period, category)
