"""Shared fixtures for outlay tests."""

from pathlib import Path

import pytest

from outlay.domain.models import Category
from outlay.ledger import create_category
from outlay.store.schema import init_database


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """An initialized, empty database."""
    path = tmp_path / "outlay.db"
    init_database(path)
    return path


@pytest.fixture
def food(db_path: Path) -> Category:
    return create_category("Food", db_path)


@pytest.fixture
def transport(db_path: Path) -> Category:
    return create_category("Transport", db_path)
