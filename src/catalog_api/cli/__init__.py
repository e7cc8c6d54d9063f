"""Main CLI application module."""

import typer

from .commands import init_db, serve

app = typer.Typer(
    help="Catalog API service commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve)
app.command(name="init-db")(init_db)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
