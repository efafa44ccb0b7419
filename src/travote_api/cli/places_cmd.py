"""Place lookup CLI commands."""

import json

import typer

places_app = typer.Typer()


@places_app.command("near")
def near_command(
    lat: float = typer.Option(..., "--lat", help="Center latitude (-90 to 90)"),  # noqa: B008
    long: float = typer.Option(..., "--long", help="Center longitude (-180 to 180)"),  # noqa: B008
    distance: float = typer.Option(..., "--distance", help="Search radius in degrees"),  # noqa: B008
    abbr: str | None = typer.Option(None, "--abbr", help="Limit to a region code"),
    limit: int = typer.Option(50, "--limit", help="Maximum number of places"),
) -> None:
    """Print places inside the bounding box around a point as JSON."""
    from travote_api.core.clients import create_storage
    from travote_api.core.config import get_settings
    from travote_api.lib.geo.bounding_box import InvalidInputError, Point, build_bounding_box_query
    from travote_api.lib.geo.filters import PlaceFilter, place_equality_clause
    from travote_api.lib.storage.errors import DeserializationError, StorageError
    from travote_api.services.place_service import find_places_near

    settings = get_settings()
    try:
        query = build_bounding_box_query(
            Point(lat, long),
            distance,
            limit,
            equality=place_equality_clause(PlaceFilter.BY_REGION, abbr),
            max_result_limit=settings.max_result_limit,
        )
    except InvalidInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if query.wraps_antimeridian:
        typer.echo("Search box crosses the antimeridian", err=True)

    try:
        places = find_places_near(create_storage(settings), query)
    except (StorageError, DeserializationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps([p.model_dump() for p in places], indent=2))
