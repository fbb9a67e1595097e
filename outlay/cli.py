"""CLI entry point for outlay."""

import typer

from outlay.commands.admin import init_command, seed_command
from outlay.commands.categories import add_category_command, delete_category_command, list_categories_command
from outlay.commands.common import get_settings
from outlay.commands.expenses import add_command, delete_command, edit_command, list_command, show_command
from outlay.commands.report import day_command, report_command, week_command
from outlay.log import configure_logging

app = typer.Typer(
    name="outlay",
    help="Outlay - track your expenses and see where the money goes",
    add_completion=False,
)

category_app = typer.Typer(help="Manage expense categories.", no_args_is_help=True)
app.add_typer(category_app, name="category")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
) -> None:
    """Outlay - track your expenses and see where the money goes."""
    configure_logging(get_settings().log_level, verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize the outlay database and configuration."""
    init_command(force)


@app.command()
def seed() -> None:
    """Add the default categories (Food, Transport, ...)."""
    seed_command()


@category_app.command(name="list")
def category_list() -> None:
    """List your categories."""
    list_categories_command()


@category_app.command(name="add")
def category_add(name: str) -> None:
    """Create a category."""
    add_category_command(name)


@category_app.command(name="delete")
def category_delete(name: str) -> None:
    """Delete a category that has no expenses."""
    delete_category_command(name)


@app.command()
def add(
    amount: str = typer.Argument(..., help="Amount in major units, e.g. 250 or 12.50"),
    category: str = typer.Option(..., "--category", "-c", help="Category name or ID"),
    expense_date: str = typer.Option(None, "--date", "-d", help="Expense date (YYYY-MM-DD, default: today)"),
    note: str = typer.Option(None, "--note", "-n", help="Optional note"),
) -> None:
    """Record an expense."""
    add_command(amount, category, expense_date, note)


@app.command()
def edit(
    expense_id: int = typer.Argument(..., help="Expense ID (from 'outlay list')"),
    amount: str = typer.Option(None, "--amount", "-a", help="New amount in major units"),
    category: str = typer.Option(None, "--category", "-c", help="New category name or ID"),
    expense_date: str = typer.Option(None, "--date", "-d", help="New date (YYYY-MM-DD)"),
    note: str = typer.Option(None, "--note", "-n", help="New note (empty string clears it)"),
) -> None:
    """Edit an expense."""
    edit_command(expense_id, amount, category, expense_date, note)


@app.command()
def show(expense_id: int = typer.Argument(..., help="Expense ID")) -> None:
    """Show a single expense."""
    show_command(expense_id)


@app.command()
def delete(
    expense_id: int = typer.Argument(..., help="Expense ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete an expense."""
    delete_command(expense_id, yes)


@app.command(name="list")
def list_expenses(
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    limit: int = typer.Option(50, help="Maximum expenses to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all matching expenses"),
) -> None:
    """List your expenses, newest first."""
    list_command(month, category, limit, all)


@app.command()
def report(
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM, default: this month)"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    histogram: bool = typer.Option(True, help="Show histogram of your spending"),
) -> None:
    """Show monthly spending with the trend against last month."""
    report_command(month, category, histogram)


@app.command()
def week(
    day: str = typer.Option(None, "--date", "-d", help="Any date in the week (YYYY-MM-DD, default: today)"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
) -> None:
    """Show daily spending for a Monday-to-Sunday week."""
    week_command(day, category)


@app.command()
def day(
    day: str = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD, default: today)"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
) -> None:
    """Show spending for a single day."""
    day_command(day, category)


if __name__ == "__main__":
    app()
