"""Catalog administration CLI commands."""

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from src.bookstore.core.errors import InternalServerError
from src.bookstore.core.models.catalog import BookCategoryCreate
from src.bookstore.core.services import BookCategoryService, DbSessionService
from src.bookstore.runtime.context import get_config
from src.bookstore.runtime.init_db import init_db

console = Console()

db_app = typer.Typer(help="Manage the catalog database")
category_app = typer.Typer(help="Manage book categories")


@db_app.command("init")
def init_database() -> None:
    """Create all catalog tables that do not exist yet."""
    try:
        init_db()
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Database ready at {get_config().database.url}[/green]")


@category_app.command("list")
def list_categories() -> None:
    """List all active book categories."""
    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            categories = asyncio.run(BookCategoryService(session).list_categories())
    except InternalServerError as e:
        console.print(f"[red]❌ {e.detail}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.dispose()

    if not categories:
        console.print("[yellow]No book categories found[/yellow]")
        return

    table = Table(title="Book categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Created", style="magenta")

    for category in categories:
        table.add_row(category.id, category.name, category.created_at.isoformat(timespec="seconds"))

    console.print(table)
    console.print(f"\n[green]Found {len(categories)} categories[/green]")


@category_app.command("add")
def add_category(
    name: str = typer.Argument(..., help="Name of the new category"),
) -> None:
    """Add a book category."""
    try:
        data = BookCategoryCreate(name=name)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid category name: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1) from e

    db_service = DbSessionService()
    try:
        with db_service.session_scope() as session:
            category = asyncio.run(BookCategoryService(session).create_category(data))
    except InternalServerError as e:
        console.print(f"[red]❌ {e.detail}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db_service.dispose()

    console.print(f"[green]✅ Created category '{category.name}' ({category.id})[/green]")
