"""Validated single-record operations on expenses and categories.

Input is validated and category references are resolved before anything is
written. Store failures (``sqlite3.Error``) are not caught here.
"""

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from outlay.domain.models import Category, CategoryId, Expense, ExpenseId
from outlay.domain.validation import (
    normalize_note,
    validate_category_name,
    validate_expense,
)
from outlay.errors import CategoryInUseError, NotFoundError, ValidationError
from outlay.store import queries

logger = logging.getLogger(__name__)


def _require_category(category_id: CategoryId, db_path: Path | None) -> Category:
    category = queries.get_category(category_id, db_path)
    if category is None:
        raise ValidationError("category", f"Category {category_id} does not exist")
    return category


def get_expense_for_edit(expense_id: ExpenseId, db_path: Path | None = None) -> Expense:
    """Fetch an expense by id.

    Raises:
        NotFoundError: If no expense has this id.
    """
    expense = queries.get_expense(expense_id, db_path)
    if expense is None:
        raise NotFoundError("Expense", expense_id)
    return expense


def create_expense(
    amount: int,
    category_id: int,
    expense_date: date | str,
    note: str | None = None,
    db_path: Path | None = None,
) -> Expense:
    """Validate and record a new expense.

    Args:
        amount: Amount in minor units, must be positive.
        category_id: Existing category id.
        expense_date: Calendar date (date or YYYY-MM-DD string).
        note: Optional note; blank notes are stored as absent.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        The stored expense.

    Raises:
        ValidationError: If any field is invalid or the category does not exist.
        sqlite3.Error: If database operation fails.
    """
    draft = validate_expense(amount, category_id, expense_date, note)
    _require_category(draft.category_id, db_path)

    expense_id = queries.insert_expense(draft.amount, draft.category_id, draft.expense_date, draft.note, db_path)
    logger.info("Recorded expense %s: %s on %s", expense_id, draft.amount, draft.expense_date)
    return get_expense_for_edit(expense_id, db_path)


def update_expense(
    expense_id: ExpenseId,
    *,
    amount: int | None = None,
    category_id: int | None = None,
    expense_date: date | str | None = None,
    note: str | None = None,
    db_path: Path | None = None,
) -> Expense:
    """Change fields of an existing expense.

    Fields left as None keep their current value. Pass ``note=""`` to clear the note.

    Raises:
        NotFoundError: If no expense has this id.
        ValidationError: If any resulting field is invalid.
        sqlite3.Error: If database operation fails.
    """
    current = get_expense_for_edit(expense_id, db_path)

    draft = validate_expense(
        current.amount if amount is None else amount,
        current.category_id if category_id is None else category_id,
        current.expense_date if expense_date is None else expense_date,
        current.note if note is None else normalize_note(note),
    )
    if draft.category_id != current.category_id:
        _require_category(draft.category_id, db_path)

    if not queries.update_expense(
        expense_id, draft.amount, draft.category_id, draft.expense_date, draft.note, db_path
    ):
        raise NotFoundError("Expense", expense_id)

    logger.info("Updated expense %s", expense_id)
    return get_expense_for_edit(expense_id, db_path)


def delete_expense(expense_id: ExpenseId, db_path: Path | None = None) -> None:
    """Delete an expense.

    Raises:
        NotFoundError: If no expense has this id.
        sqlite3.Error: If database operation fails.
    """
    if not queries.delete_expense(expense_id, db_path):
        raise NotFoundError("Expense", expense_id)
    logger.info("Deleted expense %s", expense_id)


def create_category(name: str, db_path: Path | None = None) -> Category:
    """Create a category with a unique, non-empty name.

    Raises:
        ValidationError: If the name is blank or already taken.
        sqlite3.Error: If database operation fails.
    """
    category_name = validate_category_name(name)
    if queries.get_category_by_name(category_name, db_path) is not None:
        raise ValidationError("name", f"Category '{category_name}' already exists")

    category = queries.add_category(category_name, db_path)
    logger.info("Created category %s (%s)", category.name, category.id)
    return category


def seed_categories(names: Iterable[str], db_path: Path | None = None) -> list[Category]:
    """Create any of ``names`` that do not exist yet.

    Returns:
        The categories that were created, in input order.
    """
    existing = {category.name for category in queries.list_categories(db_path)}
    created: list[Category] = []
    for name in names:
        category_name = validate_category_name(name)
        if category_name in existing:
            continue
        created.append(queries.add_category(category_name, db_path))
        existing.add(category_name)

    logger.info("Seeded %d categories", len(created))
    return created


def remove_category(category_id: CategoryId, db_path: Path | None = None) -> None:
    """Delete a category that no expense refers to.

    Raises:
        NotFoundError: If no category has this id.
        CategoryInUseError: If expenses still reference the category.
        sqlite3.Error: If database operation fails.
    """
    category = queries.get_category(category_id, db_path)
    if category is None:
        raise NotFoundError("Category", category_id)

    in_use = queries.count_expenses_for_category(category_id, db_path)
    if in_use:
        raise CategoryInUseError(category.name, in_use)

    queries.delete_category(category_id, db_path)
    logger.info("Deleted category %s (%s)", category.name, category_id)
