"""Main CLI application module."""

import typer

from .catalog_commands import category_app, db_app

app = typer.Typer(
    help="📚 Bookstore catalog administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(category_app, name="category")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from src.bookstore.runtime.context import get_config

    config = get_config()
    uvicorn.run(
        "src.bookstore.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
