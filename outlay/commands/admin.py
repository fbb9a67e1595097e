"""Admin commands for initializing and seeding outlay."""

import sys

from outlay.commands.common import console, get_settings, handle_errors, require_database, resolve_db_path
from outlay.config import create_default_config, get_config_path
from outlay.ledger import seed_categories
from outlay.store.schema import init_database


def init_command(force: bool = False) -> None:
    """Initialize outlay database and configuration."""
    settings = get_settings()
    db_path = resolve_db_path(settings)
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (db_exists or config_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if db_exists:
            console.print(f"  Database already exists: {db_path}")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'outlay init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        if force and db_exists:
            db_path.unlink()

        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        with handle_errors():
            init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print("[dim]Run 'outlay seed' to add the default categories[/dim]")

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def seed_command() -> None:
    """Create the configured default categories, skipping existing ones."""
    settings = get_settings()
    db_path = require_database(settings)

    with handle_errors():
        created = seed_categories(settings.seed_categories, db_path)

    if not created:
        console.print("[dim]All default categories already exist[/dim]")
        return

    for category in created:
        console.print(f"[green]✓[/green] Created category: {category.name}")
    console.print(f"\n[green]Seed complete ({len(created)} added)[/green]")
