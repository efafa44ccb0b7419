"""Country API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from travote_api.core.config import Settings, get_settings
from travote_api.core.dependencies import get_storage
from travote_api.lib.geo.bounding_box import InvalidInputError, validate_result_limit
from travote_api.lib.geo.filters import resolve_country_filter
from travote_api.lib.storage.dynamodb import Storage
from travote_api.lib.storage.errors import DeserializationError, StorageError
from travote_api.schemas.common import ErrorResponse
from travote_api.schemas.country import Country
from travote_api.services.country_service import list_countries

countries_router = APIRouter(prefix="/countries", tags=["countries"])


@countries_router.get(
    "",
    response_model=list[Country],
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_countries(
    abbr: str | None = Query(None, max_length=16, description="Region code"),  # noqa: B008
    name: str | None = Query(None, max_length=128, description="Country name"),  # noqa: B008
    limit: int | None = Query(None, description="Maximum number of countries to return"),  # noqa: B008
    storage: Storage = Depends(get_storage),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[Country]:
    """List countries, optionally filtered by region code or name."""
    try:
        country_filter, value = resolve_country_filter(abbr=abbr, name=name)
        result_limit = validate_result_limit(
            limit if limit is not None else settings.countries_default_limit,
            settings.max_result_limit,
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    try:
        return list_countries(storage, country_filter, value, result_limit)
    except (StorageError, DeserializationError) as e:
        logger.error(f"Failed to list countries: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Countries are temporarily unavailable.",
        ) from e
