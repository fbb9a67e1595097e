"""Database query functions.

Range filters are half-open: ``expense_date >= start AND expense_date < end``.
Dates are stored as ISO strings, which order the same way as the dates themselves.
"""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any

from outlay.dates import Period
from outlay.domain.aggregation import CategoryTotal
from outlay.domain.models import Category, CategoryId, CategoryName, Expense, ExpenseId, Money
from outlay.store.schema import get_db_path

_EXPENSE_COLUMNS = """
    e.id, e.amount, e.category_id, c.name AS category_name, e.expense_date, e.note, e.created_at
"""


@contextmanager
def _connect(db_path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Open a database connection with row factory and foreign keys enabled.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Yields:
        Database connection, closed on exit.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        yield conn
    finally:
        conn.close()


def _period_filter(period: Period | None, category_id: CategoryId | None) -> tuple[str, list[Any]]:
    """Build a WHERE clause for optional period and category filters."""
    clauses: list[str] = []
    params: list[Any] = []

    if period is not None:
        clauses.append("e.expense_date >= ? AND e.expense_date < ?")
        params.extend([period.start.isoformat(), period.end.isoformat()])
    if category_id is not None:
        clauses.append("e.category_id = ?")
        params.append(category_id)

    where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


def _row_to_category(row: sqlite3.Row) -> Category:
    return Category(id=CategoryId(row["id"]), name=CategoryName(row["name"]))


def _row_to_expense(row: sqlite3.Row) -> Expense:
    """Convert a joined expense row to an :class:`Expense`."""
    return Expense(
        id=ExpenseId(row["id"]),
        amount=Money(row["amount"]),
        category_id=CategoryId(row["category_id"]),
        category_name=CategoryName(row["category_name"]),
        expense_date=date.fromisoformat(row["expense_date"]),
        note=row["note"],
        created_at=row["created_at"],
    )


def list_categories(db_path: Path | None = None) -> list[Category]:
    """Get all categories.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of categories sorted by name.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        rows = conn.execute("SELECT id, name FROM categories ORDER BY name").fetchall()
        return [_row_to_category(row) for row in rows]


def get_category(category_id: CategoryId, db_path: Path | None = None) -> Category | None:
    with _connect(db_path) as conn:
        row = conn.execute("SELECT id, name FROM categories WHERE id = ?", (category_id,)).fetchone()
        return _row_to_category(row) if row else None


def get_category_by_name(name: CategoryName, db_path: Path | None = None) -> Category | None:
    """Look up a category by exact (case-sensitive) name."""
    with _connect(db_path) as conn:
        row = conn.execute("SELECT id, name FROM categories WHERE name = ?", (name,)).fetchone()
        return _row_to_category(row) if row else None


def add_category(name: CategoryName, db_path: Path | None = None) -> Category:
    """Add a new category.

    Args:
        name: Category name.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        The created category with its assigned id.

    Raises:
        sqlite3.IntegrityError: If a category with this name already exists.
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("INSERT INTO categories (name) VALUES (?)", (name,))
            conn.commit()
            return Category(id=CategoryId(cursor.lastrowid), name=name)
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_category(category_id: CategoryId, db_path: Path | None = None) -> bool:
    """Delete a category.

    Returns:
        True if a row was deleted.

    Raises:
        sqlite3.IntegrityError: If expenses still reference the category.
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM categories WHERE id = ?", (category_id,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def count_expenses_for_category(category_id: CategoryId, db_path: Path | None = None) -> int:
    with _connect(db_path) as conn:
        row = conn.execute("SELECT COUNT(*) FROM expenses WHERE category_id = ?", (category_id,)).fetchone()
        return int(row[0])


def list_expenses(
    period: Period | None = None,
    category_id: CategoryId | None = None,
    limit: int | None = None,
    db_path: Path | None = None,
) -> list[Expense]:
    """Get expenses with their category names.

    Args:
        period: Optional half-open date range to filter by.
        category_id: Optional category to filter by.
        limit: Maximum number of expenses to return. If None, returns all.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        List of expenses ordered by date descending, then id descending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    where, params = _period_filter(period, category_id)
    query = (
        f"SELECT {_EXPENSE_COLUMNS} FROM expenses e JOIN categories c ON c.id = e.category_id"
        f"{where} ORDER BY e.expense_date DESC, e.id DESC"
    )
    if limit is not None:
        query += " LIMIT ?"
        params.append(limit)

    with _connect(db_path) as conn:
        rows = conn.execute(query, params).fetchall()
        return [_row_to_expense(row) for row in rows]


def get_expense(expense_id: ExpenseId, db_path: Path | None = None) -> Expense | None:
    with _connect(db_path) as conn:
        row = conn.execute(
            f"SELECT {_EXPENSE_COLUMNS} FROM expenses e JOIN categories c ON c.id = e.category_id WHERE e.id = ?",
            (expense_id,),
        ).fetchone()
        return _row_to_expense(row) if row else None


def sum_expenses(
    period: Period, category_id: CategoryId | None = None, db_path: Path | None = None
) -> Money:
    """Sum expense amounts in a period.

    Args:
        period: Half-open date range.
        category_id: Optional category to filter by.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Total in minor units, 0 when nothing matches.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    where, params = _period_filter(period, category_id)
    with _connect(db_path) as conn:
        row = conn.execute(f"SELECT COALESCE(SUM(e.amount), 0) FROM expenses e{where}", params).fetchone()
        return Money(int(row[0]))


def sum_expenses_by_category(
    period: Period, category_id: CategoryId | None = None, db_path: Path | None = None
) -> list[CategoryTotal]:
    """Get spending breakdown by category.

    Only categories with at least one matching expense are returned.

    Args:
        period: Half-open date range.
        category_id: Optional category to restrict the breakdown to.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Category totals ordered by total descending, then name ascending.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    where, params = _period_filter(period, category_id)
    query = (
        "SELECT c.name AS category, SUM(e.amount) AS total"
        f" FROM expenses e JOIN categories c ON c.id = e.category_id{where}"
        " GROUP BY c.id, c.name ORDER BY total DESC, c.name ASC"
    )
    with _connect(db_path) as conn:
        rows = conn.execute(query, params).fetchall()
        return [CategoryTotal(category=CategoryName(row["category"]), total=Money(row["total"])) for row in rows]


def sum_expenses_by_day(
    period: Period, category_id: CategoryId | None = None, db_path: Path | None = None
) -> dict[date, Money]:
    """Get daily totals for days that have at least one expense.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    where, params = _period_filter(period, category_id)
    query = f"SELECT e.expense_date, SUM(e.amount) FROM expenses e{where} GROUP BY e.expense_date"
    with _connect(db_path) as conn:
        rows = conn.execute(query, params).fetchall()
        return {date.fromisoformat(row[0]): Money(row[1]) for row in rows}


def insert_expense(
    amount: Money,
    category_id: CategoryId,
    expense_date: date,
    note: str | None = None,
    db_path: Path | None = None,
) -> ExpenseId:
    """Insert an expense.

    Args:
        amount: Amount in minor units.
        category_id: Category the expense belongs to.
        expense_date: Calendar date of the expense.
        note: Optional note.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        The new expense id.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO expenses (amount, category_id, expense_date, note) VALUES (?, ?, ?, ?)",
                (amount, category_id, expense_date.isoformat(), note),
            )
            conn.commit()
            return ExpenseId(cursor.lastrowid)
        except sqlite3.Error:
            conn.rollback()
            raise


def update_expense(
    expense_id: ExpenseId,
    amount: Money,
    category_id: CategoryId,
    expense_date: date,
    note: str | None,
    db_path: Path | None = None,
) -> bool:
    """Overwrite the editable fields of an expense.

    Returns:
        True if the expense existed and was updated.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "UPDATE expenses SET amount = ?, category_id = ?, expense_date = ?, note = ? WHERE id = ?",
                (amount, category_id, expense_date.isoformat(), note, expense_id),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_expense(expense_id: ExpenseId, db_path: Path | None = None) -> bool:
    """Delete an expense.

    Returns:
        True if a row was deleted.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise
