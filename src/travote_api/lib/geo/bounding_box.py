"""Bounding-box predicate construction for point collections.

Places store latitude and longitude as two independent numeric attributes,
and the store only offers equality and inclusive range clauses. A search
around a center point is therefore expressed as an axis-aligned box:

- latitude is bounded, so the box is clamped to [-90, 90];
- longitude is cyclic, so a box crossing the antimeridian becomes the union
  of two ranges, each with ``low <= high``.

The resulting :class:`BoundingBoxQuery` is a plain value object.  It is
translated into store-specific conditions by the storage layer.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

LATITUDE_FIELD = "lat"
LONGITUDE_FIELD = "long"

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
_LONGITUDE_PERIOD = 360.0


class InvalidInputError(ValueError):
    """Raised when query parameters cannot describe a valid search."""


@dataclass(frozen=True)
class Point:
    """WGS84 coordinate pair."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (MIN_LATITUDE <= self.latitude <= MAX_LATITUDE):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise InvalidInputError(msg)
        if not (MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise InvalidInputError(msg)


@dataclass(frozen=True)
class NormalizedRange:
    """Inclusive range clause ``low <= field <= high``."""

    field: str
    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            msg = f"range on {self.field!r} is inverted: {self.low} > {self.high}"
            raise ValueError(msg)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class EqualityClause:
    """Equality clause ``field == value``."""

    field: str
    value: str

    def matches(self, record: Mapping[str, Any]) -> bool:
        return record.get(self.field) == self.value


@dataclass(frozen=True)
class BoundingBoxQuery:
    """Normalized search predicate.

    Shape: ``equality AND latitude AND (longitude[0] OR longitude[1])``.
    ``longitude`` holds one range, or two when the box wraps the antimeridian.
    """

    center: Point
    radius_degrees: float
    result_limit: int
    latitude: NormalizedRange
    longitude: tuple[NormalizedRange, ...]
    equality: EqualityClause | None = None

    @property
    def wraps_antimeridian(self) -> bool:
        return len(self.longitude) > 1

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Evaluate the predicate against a single stored record.

        Coordinates may be stored as numbers, ``Decimal`` or numeric strings.
        Records with missing or unparsable coordinates never match.
        """
        if self.equality is not None and not self.equality.matches(record):
            return False
        try:
            lat = float(record[self.latitude.field])
            lng = float(record[self.longitude[0].field])
        except (KeyError, TypeError, ValueError):
            return False
        if not self.latitude.contains(lat):
            return False
        return any(r.contains(lng) for r in self.longitude)


def latitude_range(center_lat: float, radius_degrees: float) -> NormalizedRange:
    """Latitude range around ``center_lat``, clamped at the poles."""
    min_lat = max(center_lat - radius_degrees, MIN_LATITUDE)
    max_lat = min(center_lat + radius_degrees, MAX_LATITUDE)
    return NormalizedRange(LATITUDE_FIELD, min_lat, max_lat)


def longitude_ranges(center_long: float, radius_degrees: float) -> tuple[NormalizedRange, ...]:
    """Longitude ranges around ``center_long``, split at the antimeridian.

    Returns a single range when the box stays within [-180, 180], otherwise
    two ranges whose union is the wrapped box.  A radius of 180 degrees or
    more covers every longitude and returns the full range.
    """
    if radius_degrees >= _LONGITUDE_PERIOD / 2:
        return (NormalizedRange(LONGITUDE_FIELD, MIN_LONGITUDE, MAX_LONGITUDE),)

    min_long = center_long - radius_degrees
    max_long = center_long + radius_degrees

    if min_long < MIN_LONGITUDE:
        wrapped_min = min_long + _LONGITUDE_PERIOD
        return (
            NormalizedRange(LONGITUDE_FIELD, MIN_LONGITUDE, max_long),
            NormalizedRange(LONGITUDE_FIELD, wrapped_min, MAX_LONGITUDE),
        )
    if max_long > MAX_LONGITUDE:
        wrapped_max = max_long - _LONGITUDE_PERIOD
        return (
            NormalizedRange(LONGITUDE_FIELD, min_long, MAX_LONGITUDE),
            NormalizedRange(LONGITUDE_FIELD, MIN_LONGITUDE, wrapped_max),
        )
    return (NormalizedRange(LONGITUDE_FIELD, min_long, max_long),)


def validate_result_limit(result_limit: int, max_result_limit: int | None = None) -> int:
    """Check that a result limit is a positive integer within ``max_result_limit``.

    Raises:
        InvalidInputError: If the limit is not positive or exceeds the maximum.
    """
    if isinstance(result_limit, bool) or not isinstance(result_limit, int) or result_limit <= 0:
        msg = f"limit must be a positive integer, got {result_limit!r}"
        raise InvalidInputError(msg)
    if max_result_limit is not None and result_limit > max_result_limit:
        msg = f"limit must not exceed {max_result_limit}, got {result_limit}"
        raise InvalidInputError(msg)
    return result_limit


def build_bounding_box_query(
    center: Point,
    radius_degrees: float,
    result_limit: int,
    *,
    equality: EqualityClause | None = None,
    max_result_limit: int | None = None,
) -> BoundingBoxQuery:
    """Build a bounding-box search predicate.

    Args:
        center: Center of the search box.
        radius_degrees: Half-width of the box in degrees on both axes.
        result_limit: Maximum number of matches the executor may return.
        equality: Optional equality clause ANDed with the coordinate ranges.
        max_result_limit: Optional upper bound for ``result_limit``.

    Returns:
        The normalized query.

    Raises:
        InvalidInputError: If the radius is negative or not finite, or the
            result limit is not a positive integer within bounds.
    """
    if isinstance(radius_degrees, bool) or not isinstance(radius_degrees, int | float):
        msg = f"radius must be a number, got {radius_degrees!r}"
        raise InvalidInputError(msg)
    if not math.isfinite(radius_degrees) or radius_degrees < 0:
        msg = f"radius must be a non-negative number of degrees, got {radius_degrees}"
        raise InvalidInputError(msg)
    validate_result_limit(result_limit, max_result_limit)

    radius = float(radius_degrees)
    return BoundingBoxQuery(
        center=center,
        radius_degrees=radius,
        result_limit=result_limit,
        latitude=latitude_range(center.latitude, radius),
        longitude=longitude_ranges(center.longitude, radius),
        equality=equality,
    )
