"""DynamoDB table management CLI commands."""

import json
from decimal import Decimal
from pathlib import Path

import typer
from loguru import logger

tables_app = typer.Typer()


def _load_items(path: Path) -> list[dict]:
    """Load a JSON array of items, keeping numbers as Decimal for DynamoDB."""
    data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    if not isinstance(data, list):
        typer.echo(f"Error: {path} must contain a JSON array of items.", err=True)
        raise typer.Exit(code=1)
    return data


@tables_app.command("create")
def create_command() -> None:
    """Create the places and countries tables if they are missing."""
    from travote_api.core.clients import create_storage
    from travote_api.core.config import get_settings
    from travote_api.lib.storage.dynamodb import create_tables
    from travote_api.lib.storage.errors import StorageError

    settings = get_settings()
    storage = create_storage(settings)
    try:
        created = create_tables(storage)
    except StorageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if created:
        typer.echo(f"Created tables: {', '.join(created)}")
    else:
        typer.echo("All tables already exist.")


@tables_app.command("seed")
def seed_command(
    places: Path | None = typer.Option(None, "--places", exists=True, dir_okay=False, help="JSON array of places"),
    countries: Path | None = typer.Option(
        None, "--countries", exists=True, dir_okay=False, help="JSON array of countries"
    ),
) -> None:
    """Load places and/or countries from JSON files."""
    from travote_api.core.clients import create_storage
    from travote_api.core.config import get_settings
    from travote_api.lib.storage.dynamodb import put_items
    from travote_api.lib.storage.errors import StorageError
    from travote_api.services.place_service import put_places

    if places is None and countries is None:
        typer.echo("Error: pass --places and/or --countries.", err=True)
        raise typer.Exit(code=1)

    settings = get_settings()
    storage = create_storage(settings)
    try:
        if places is not None:
            count = put_places(storage, _load_items(places))
            typer.echo(f"Loaded {count} places into {storage.places_table_name}")
        if countries is not None:
            count = put_items(storage.countries, _load_items(countries))
            typer.echo(f"Loaded {count} countries into {storage.countries_table_name}")
    except (StorageError, ValueError) as e:
        logger.error(f"Seeding failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
