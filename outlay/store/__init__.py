"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from outlay.store.queries import (
    add_category,
    count_expenses_for_category,
    delete_category,
    delete_expense,
    get_category,
    get_category_by_name,
    get_expense,
    insert_expense,
    list_categories,
    list_expenses,
    sum_expenses,
    sum_expenses_by_category,
    sum_expenses_by_day,
    update_expense,
)
from outlay.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "add_category",
    "count_expenses_for_category",
    "delete_category",
    "delete_expense",
    "get_category",
    "get_category_by_name",
    "get_expense",
    "insert_expense",
    "list_categories",
    "list_expenses",
    "sum_expenses",
    "sum_expenses_by_category",
    "sum_expenses_by_day",
    "update_expense",
]
