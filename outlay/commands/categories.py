"""Category management commands (list, add, delete)."""

from rich.table import Table

from outlay.commands.common import console, get_settings, handle_errors, require_database, resolve_category
from outlay.ledger import create_category, remove_category
from outlay.store.queries import list_categories


def list_categories_command() -> None:
    """List categories."""
    db_path = require_database(get_settings())

    with handle_errors():
        categories = list_categories(db_path)

    if not categories:
        console.print("[yellow]No categories yet[/yellow]")
        console.print("[dim]Use 'outlay seed' or 'outlay category add <name>'[/dim]")
        return

    table = Table(title=f"Categories ({len(categories)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="magenta")
    for category in categories:
        table.add_row(str(category.id), category.name)

    console.print(table)


def add_category_command(name: str) -> None:
    """Create a category."""
    db_path = require_database(get_settings())

    with handle_errors():
        category = create_category(name, db_path)

    console.print(f"[green]✓[/green] Created category: {category.name} (ID: {category.id})")


def delete_category_command(name: str) -> None:
    """Delete a category that has no expenses."""
    db_path = require_database(get_settings())

    with handle_errors():
        category = resolve_category(name, db_path)
        remove_category(category.id, db_path)

    console.print(f"[green]✓[/green] Deleted category: {category.name}")
