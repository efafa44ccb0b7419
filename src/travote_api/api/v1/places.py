"""Place API endpoints: filtered listing and bounding-box search."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from travote_api.core.config import Settings, get_settings
from travote_api.core.dependencies import get_storage
from travote_api.lib.geo.bounding_box import (
    InvalidInputError,
    Point,
    build_bounding_box_query,
    validate_result_limit,
)
from travote_api.lib.geo.filters import place_equality_clause, resolve_place_filter
from travote_api.lib.storage.dynamodb import Storage
from travote_api.lib.storage.errors import DeserializationError, StorageError
from travote_api.schemas.common import ErrorResponse
from travote_api.schemas.place import Place
from travote_api.services.place_service import find_places_near, list_places

places_router = APIRouter(prefix="/places", tags=["places"])


@places_router.get(
    "",
    response_model=list[Place],
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_places(
    abbr: str | None = Query(None, max_length=16, description="Region code"),  # noqa: B008
    category: str | None = Query(None, max_length=64, description="Place category"),  # noqa: B008
    place_id: str | None = Query(None, alias="id", max_length=128, description="Place identifier"),  # noqa: B008
    lat: float | None = Query(None, description="Search center latitude (WGS84)"),  # noqa: B008
    long: float | None = Query(None, description="Search center longitude (WGS84)"),  # noqa: B008
    distance: float | None = Query(None, description="Search radius in degrees"),  # noqa: B008
    limit: int | None = Query(None, description="Maximum number of places to return"),  # noqa: B008
    storage: Storage = Depends(get_storage),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[Place]:
    """List places by a single equality filter, optionally within a bounding box.

    When ``lat``, ``long`` and ``distance`` are all given the search is
    limited to the box around that point; the box wraps across the
    antimeridian and is clamped at the poles.
    """
    coordinates = (lat, long, distance)
    query = None
    try:
        place_filter, value = resolve_place_filter(abbr=abbr, category=category, place_id=place_id)
        result_limit = validate_result_limit(
            limit if limit is not None else settings.places_default_limit,
            settings.max_result_limit,
        )
        if any(c is not None for c in coordinates) and not all(c is not None for c in coordinates):
            msg = "lat, long and distance must be given together"
            raise InvalidInputError(msg)

        if lat is not None and long is not None and distance is not None:
            query = build_bounding_box_query(
                Point(lat, long),
                distance,
                result_limit,
                equality=place_equality_clause(place_filter, value),
                max_result_limit=settings.max_result_limit,
            )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    try:
        if query is not None:
            return find_places_near(storage, query)
        return list_places(storage, place_filter, value, result_limit)
    except StorageError as e:
        logger.error(f"Storage error while listing places: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Places are temporarily unavailable.",
        ) from e
    except DeserializationError as e:
        logger.error(f"Malformed place record: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while reading places.",
        ) from e
