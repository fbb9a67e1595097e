"""Domain models and types for outlay.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Business logic separated from infrastructure
"""

from outlay.domain.models import Category, CategoryId, CategoryName, Expense, ExpenseId, Money, Month

__all__ = ["Money", "Month", "CategoryName", "CategoryId", "ExpenseId", "Category", "Expense"]
