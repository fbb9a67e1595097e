"""Domain type definitions for outlay.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (cents)
- Month: Month in YYYY-MM format
- CategoryName: Display name of an expense category
- CategoryId / ExpenseId: Store-assigned surrogate keys
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Category name, unique across categories (case-sensitive)
CategoryName = NewType("CategoryName", str)

CategoryId = NewType("CategoryId", int)

ExpenseId = NewType("ExpenseId", int)


@dataclass(frozen=True)
class Category:
    """Immutable category record."""

    id: CategoryId
    name: CategoryName


@dataclass(frozen=True)
class Expense:
    """Immutable expense record as read back from the store.

    ``category_name`` is denormalized display data joined from the categories table.
    """

    id: ExpenseId
    amount: Money
    category_id: CategoryId
    category_name: CategoryName
    expense_date: date
    note: str | None = None
    created_at: str | None = None
