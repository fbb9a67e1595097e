"""Expense commands (add, edit, show, delete, list)."""

from datetime import date

import typer
from rich.table import Table

from outlay.commands.common import (
    console,
    find_category,
    get_settings,
    handle_errors,
    parse_date_option,
    require_database,
    resolve_category,
)
from outlay.dates import month_range, parse_month
from outlay.domain.models import Expense, ExpenseId
from outlay.domain.money import format_money, parse_amount
from outlay.errors import ValidationError
from outlay.ledger import create_expense, delete_expense, get_expense_for_edit, update_expense
from outlay.store.queries import list_expenses


def print_expense(expense: Expense, symbol: str) -> None:
    console.print(f"  ID: {expense.id}")
    console.print(f"  Date: {expense.expense_date.isoformat()}")
    console.print(f"  Category: {expense.category_name}")
    console.print(f"  Amount: {format_money(expense.amount, symbol)}")
    if expense.note:
        console.print(f"  Note: {expense.note}")


def add_command(
    amount: str,
    category: str,
    expense_date: str | None = None,
    note: str | None = None,
) -> None:
    """Record an expense.

    Args:
        amount: Amount in major units (e.g. "250" or "12.50").
        category: Category name or id.
        expense_date: Date in YYYY-MM-DD format. Defaults to today.
        note: Optional note.
    """
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        amount_minor = parse_amount(amount)
        day = parse_date_option(expense_date, date.today())
        resolved = resolve_category(category, db_path)
        expense = create_expense(amount_minor, resolved.id, day, note, db_path)

    console.print("[green]✓[/green] Expense added:")
    print_expense(expense, settings.currency_symbol)


def edit_command(
    expense_id: int,
    amount: str | None = None,
    category: str | None = None,
    expense_date: str | None = None,
    note: str | None = None,
) -> None:
    """Change fields of an existing expense. Pass an empty --note to clear it."""
    settings = get_settings()
    db_path = require_database(settings)

    if amount is None and category is None and expense_date is None and note is None:
        console.print("[yellow]Nothing to change[/yellow]")
        console.print("[dim]Use --amount, --category, --date or --note[/dim]")
        return

    with handle_errors():
        # Fetch first so a missing expense is reported before any bad field
        get_expense_for_edit(ExpenseId(expense_id), db_path)

        amount_minor = parse_amount(amount) if amount is not None else None
        category_id = resolve_category(category, db_path).id if category is not None else None
        day = parse_date_option(expense_date, date.today()) if expense_date is not None else None

        expense = update_expense(
            ExpenseId(expense_id),
            amount=amount_minor,
            category_id=category_id,
            expense_date=day,
            note=note,
            db_path=db_path,
        )

    console.print(f"[green]✓[/green] Updated expense {expense_id}:")
    print_expense(expense, settings.currency_symbol)


def show_command(expense_id: int) -> None:
    """Show a single expense."""
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        expense = get_expense_for_edit(ExpenseId(expense_id), db_path)

    print_expense(expense, settings.currency_symbol)
    if expense.created_at:
        console.print(f"  [dim]Created: {expense.created_at}[/dim]")


def delete_command(expense_id: int, yes: bool = False) -> None:
    """Delete an expense after confirmation."""
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        expense = get_expense_for_edit(ExpenseId(expense_id), db_path)

        print_expense(expense, settings.currency_symbol)
        if not yes and not typer.confirm("Delete this expense?", default=False):
            console.print("[dim]Cancelled[/dim]")
            return

        delete_expense(expense.id, db_path)

    console.print(f"[green]✓[/green] Deleted expense {expense_id}")


def list_command(
    month: str | None = None,
    category: str | None = None,
    limit: int = 50,
    all: bool = False,
) -> None:
    """List expenses, newest first."""
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        period = None
        if month:
            try:
                period = month_range(parse_month(month))
            except ValueError as e:
                raise ValidationError("month", str(e)) from e

        category_id = None
        if category:
            found = find_category(category, db_path)
            if found is None:
                console.print(f"[yellow]No expenses found for category '{category}'[/yellow]")
                return
            category_id = found.id

        expenses = list_expenses(period, category_id, None if all else limit, db_path)

    if not expenses:
        console.print("[yellow]No expenses found[/yellow]")
        return

    scope = period.label if period else "All time"
    table = Table(title=f"Expenses - {scope} (showing {len(expenses)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Note", style="white")

    for expense in expenses:
        table.add_row(
            str(expense.id),
            expense.expense_date.isoformat(),
            expense.category_name,
            format_money(expense.amount, settings.currency_symbol),
            expense.note or "[dim]-[/dim]",
        )

    console.print(table)
