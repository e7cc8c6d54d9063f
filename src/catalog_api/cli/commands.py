"""Service CLI commands."""

import typer
from rich.console import Console
from rich.panel import Panel

from catalog_api.runtime.context import get_config, override_config

console = Console()


def serve(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host from config"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port from config"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Uvicorn log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    Start the HTTP server.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Catalog API[/bold green] on http://{host}:{port}",
            border_style="green",
        )
    )
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "catalog_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,  # Request logging middleware covers this
    )


def init_db(
    database_url: str | None = typer.Option(
        None, help="Database URL; defaults to the database settings from config"
    ),
) -> None:
    """
    Create the products and users tables if they do not exist.
    """
    from sqlalchemy.exc import SQLAlchemyError

    from catalog_api.core.services import DbSessionService

    overrides = {"database": {"url": database_url}} if database_url else {}
    with override_config(**overrides) as config:
        database_service = DbSessionService(config.database)
        try:
            database_service.create_all()
        except SQLAlchemyError as e:
            console.print(f"[red]Failed to initialize database: {e}[/red]")
            raise typer.Exit(1) from e
        finally:
            database_service.dispose()

    console.print("[green]Database initialized.[/green]")
