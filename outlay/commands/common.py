"""Shared helpers for CLI commands: settings, database location and error display."""

import logging
import os
import sqlite3
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path

from rich.console import Console

from outlay.config import Settings, load_settings
from outlay.dates import parse_date
from outlay.domain.models import Category, CategoryId, CategoryName
from outlay.errors import CategoryInUseError, ConfigError, NotFoundError, ValidationError
from outlay.store.queries import get_category, get_category_by_name
from outlay.store.schema import database_exists, get_db_path

console = Console()
logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Load settings, exiting with a message if the config file is invalid."""
    try:
        return load_settings()
    except ConfigError as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)


def resolve_db_path(settings: Settings) -> Path:
    """Database location: OUTLAY_DB_PATH, then the config file, then the XDG default."""
    if os.environ.get("OUTLAY_DB_PATH") or settings.db_path is None:
        return get_db_path()
    return settings.db_path


def require_database(settings: Settings) -> Path:
    """Return the database path, exiting if it has not been initialized."""
    db_path = resolve_db_path(settings)
    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'outlay init' first.[/red]", style="bold")
        sys.exit(1)
    return db_path


def find_category(name_or_id: str, db_path: Path) -> Category | None:
    """Resolve a category by exact name, or by id when given a number."""
    category = get_category_by_name(CategoryName(name_or_id), db_path)
    if category is None and name_or_id.isdigit():
        category = get_category(CategoryId(int(name_or_id)), db_path)
    return category


def resolve_category(name_or_id: str, db_path: Path) -> Category:
    """Like :func:`find_category`, but an unknown category is a validation error."""
    category = find_category(name_or_id, db_path)
    if category is None:
        raise ValidationError("category", f"Unknown category '{name_or_id}'")
    return category


def parse_date_option(value: str | None, today: date) -> date:
    """Parse a --date option, defaulting to ``today``."""
    if value is None:
        return today
    try:
        return parse_date(value)
    except ValueError as e:
        raise ValidationError("date", str(e)) from e


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn outlay and store errors into a console message and exit status 1."""
    try:
        yield
    except ValidationError as e:
        console.print(f"[red]Invalid {e.field}: {e.message}[/red]")
        sys.exit(1)
    except NotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except CategoryInUseError as e:
        console.print(f"[red]{e}[/red]")
        console.print("[dim]Move or delete its expenses first[/dim]")
        sys.exit(1)
    except sqlite3.Error as e:
        logger.debug("Store failure: %s", e, exc_info=True)
        console.print("[red]Database error: the operation could not be completed[/red]", style="bold")
        sys.exit(1)
