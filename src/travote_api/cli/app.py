"""Typer CLI root application with serve command."""

import typer

from travote_api.core.config import get_settings
from travote_api.core.logging import setup_logging

app = typer.Typer(name="travote-api", help="Travote places and countries CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(
        settings.log_level,
        log_dir=settings.log_dir,
        json_logs=settings.log_json,
        environment=settings.environment,
    )


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "travote_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from travote_api.cli.places_cmd import places_app
    from travote_api.cli.tables_cmd import tables_app

    app.add_typer(tables_app, name="tables", help="DynamoDB table management commands")
    app.add_typer(places_app, name="places", help="Place lookup commands")


_register_subcommands()
