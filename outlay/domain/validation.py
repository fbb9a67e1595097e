"""Validation boundary for expense and category input.

Every check here runs before the store is touched, so invalid input is never
partially applied. Values are rejected, never coerced: a negative amount is an
error, not a zero.
"""

from dataclasses import dataclass
from datetime import date, datetime

from outlay.dates import parse_date
from outlay.domain.models import CategoryId, CategoryName, Money
from outlay.domain.money import MAX_AMOUNT, MINOR_UNITS_PER_MAJOR
from outlay.errors import ValidationError


@dataclass(frozen=True)
class ExpenseDraft:
    """Validated expense fields ready to be written."""

    amount: Money
    category_id: CategoryId
    expense_date: date
    note: str | None


def validate_amount(amount: object) -> Money:
    """Check that an amount is a positive integer count of minor units.

    Raises:
        ValidationError: If the amount is not an int, is not greater than zero, or
            exceeds ``MAX_AMOUNT``.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError("amount", "Amount must be a whole number of minor units")
    if amount <= 0:
        raise ValidationError("amount", "Amount must be a positive number")
    if amount > MAX_AMOUNT:
        raise ValidationError("amount", f"Amount cannot exceed {MAX_AMOUNT // MINOR_UNITS_PER_MAJOR:,}")
    return Money(amount)


def validate_expense_date(value: date | str) -> date:
    """Accept a date or a strict YYYY-MM-DD string.

    Raises:
        ValidationError: If the value is malformed or not a real calendar date.
    """
    if isinstance(value, datetime):
        raise ValidationError("date", "Expense date must not carry a time of day")
    if isinstance(value, date):
        return value
    try:
        return parse_date(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("date", f"Invalid date '{value}' (expected YYYY-MM-DD)") from e


def normalize_note(note: str | None) -> str | None:
    """Trim a note; an empty note becomes absent."""
    if note is None:
        return None
    trimmed = note.strip()
    return trimmed or None


def validate_category_id(category_id: object) -> CategoryId:
    if isinstance(category_id, bool) or not isinstance(category_id, int):
        raise ValidationError("category", "Category is required")
    return CategoryId(category_id)


def validate_expense(
    amount: object,
    category_id: object,
    expense_date: date | str,
    note: str | None = None,
) -> ExpenseDraft:
    """Validate all fields of an expense.

    Args:
        amount: Amount in minor units.
        category_id: Identifier of the category the expense belongs to.
        expense_date: Calendar date of the expense.
        note: Optional free-text note.

    Returns:
        ExpenseDraft with normalized values.

    Raises:
        ValidationError: On the first invalid field.
    """
    return ExpenseDraft(
        amount=validate_amount(amount),
        category_id=validate_category_id(category_id),
        expense_date=validate_expense_date(expense_date),
        note=normalize_note(note),
    )


def validate_category_name(name: str) -> CategoryName:
    """Trim a category name and reject empty names."""
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError("name", "Category name is required")
    return CategoryName(trimmed)
