"""Supported equality filters for place and country lookups.

Each request resolves to exactly one tag from a closed set; the tag decides
which stored attribute the equality clause targets.
"""

from enum import StrEnum
from typing import Any

from travote_api.lib.geo.bounding_box import EqualityClause, InvalidInputError


class PlaceFilter(StrEnum):
    """Equality filters supported for places."""

    BY_REGION = "by_region"
    BY_CATEGORY = "by_category"
    BY_IDENTIFIER = "by_identifier"
    NONE = "none"


class CountryFilter(StrEnum):
    """Equality filters supported for countries."""

    BY_REGION = "by_region"
    BY_NAME = "by_name"
    NONE = "none"


PLACE_FILTER_FIELDS: dict[PlaceFilter, str] = {
    PlaceFilter.BY_REGION: "abbr",
    PlaceFilter.BY_CATEGORY: "category",
    PlaceFilter.BY_IDENTIFIER: "id",
}

COUNTRY_FILTER_FIELDS: dict[CountryFilter, str] = {
    CountryFilter.BY_REGION: "abbr",
    CountryFilter.BY_NAME: "name",
}


def _pick_one(candidates: dict[Any, str | None], none_tag: Any) -> tuple[Any, str | None]:
    supplied = {tag: value for tag, value in candidates.items() if value is not None}
    if len(supplied) > 1:
        msg = "Only one filter may be given per request"
        raise InvalidInputError(msg)
    if not supplied:
        return none_tag, None
    tag, value = next(iter(supplied.items()))
    if not value.strip():
        msg = "Filter value must not be empty"
        raise InvalidInputError(msg)
    return tag, value.strip()


def resolve_place_filter(
    *,
    abbr: str | None = None,
    category: str | None = None,
    place_id: str | None = None,
) -> tuple[PlaceFilter, str | None]:
    """Resolve request parameters into a single place filter.

    Args:
        abbr: Region code.
        category: Place category.
        place_id: Place identifier.

    Returns:
        Tuple of (filter tag, filter value); the value is None for ``NONE``.

    Raises:
        InvalidInputError: If more than one filter is supplied or the value is blank.
    """
    return _pick_one(
        {
            PlaceFilter.BY_REGION: abbr,
            PlaceFilter.BY_CATEGORY: category,
            PlaceFilter.BY_IDENTIFIER: place_id,
        },
        PlaceFilter.NONE,
    )


def resolve_country_filter(
    *,
    abbr: str | None = None,
    name: str | None = None,
) -> tuple[CountryFilter, str | None]:
    """Resolve request parameters into a single country filter."""
    return _pick_one(
        {CountryFilter.BY_REGION: abbr, CountryFilter.BY_NAME: name},
        CountryFilter.NONE,
    )


def place_equality_clause(place_filter: PlaceFilter, value: str | None) -> EqualityClause | None:
    """Equality clause for a place filter, or None for ``PlaceFilter.NONE``."""
    field = PLACE_FILTER_FIELDS.get(place_filter)
    if field is None or value is None:
        return None
    return EqualityClause(field, value)


def country_equality_clause(country_filter: CountryFilter, value: str | None) -> EqualityClause | None:
    """Equality clause for a country filter, or None for ``CountryFilter.NONE``."""
    field = COUNTRY_FILTER_FIELDS.get(country_filter)
    if field is None or value is None:
        return None
    return EqualityClause(field, value)
