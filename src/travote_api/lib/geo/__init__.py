"""Geo library: bounding-box predicates and equality filter resolution.

Public API:
    - Point: Validated WGS84 coordinate pair
    - NormalizedRange / EqualityClause: Predicate clauses
    - BoundingBoxQuery: Normalized search predicate
    - build_bounding_box_query: Build a predicate around a center point
    - validate_result_limit: Check a requested result limit
    - InvalidInputError: Raised for invalid query parameters
    - PlaceFilter / CountryFilter: Closed sets of supported equality filters
    - resolve_place_filter / resolve_country_filter: Resolve request parameters
    - place_equality_clause / country_equality_clause: Filter tag to clause
"""

from travote_api.lib.geo.bounding_box import (
    LATITUDE_FIELD,
    LONGITUDE_FIELD,
    BoundingBoxQuery,
    EqualityClause,
    InvalidInputError,
    NormalizedRange,
    Point,
    build_bounding_box_query,
    latitude_range,
    longitude_ranges,
    validate_result_limit,
)
from travote_api.lib.geo.filters import (
    CountryFilter,
    PlaceFilter,
    country_equality_clause,
    place_equality_clause,
    resolve_country_filter,
    resolve_place_filter,
)

__all__ = [
    "LATITUDE_FIELD",
    "LONGITUDE_FIELD",
    "BoundingBoxQuery",
    "CountryFilter",
    "EqualityClause",
    "InvalidInputError",
    "NormalizedRange",
    "PlaceFilter",
    "Point",
    "build_bounding_box_query",
    "country_equality_clause",
    "latitude_range",
    "longitude_ranges",
    "place_equality_clause",
    "resolve_country_filter",
    "resolve_place_filter",
    "validate_result_limit",
]
