"""Place service: filtered listing and bounding-box search over the places table."""

from typing import Any

from loguru import logger

from travote_api.lib.geo.bounding_box import LATITUDE_FIELD, LONGITUDE_FIELD, BoundingBoxQuery
from travote_api.lib.geo.filters import PLACE_FILTER_FIELDS, PlaceFilter, place_equality_clause
from travote_api.lib.storage.conditions import bounding_box_condition, equality_condition
from travote_api.lib.storage.dynamodb import Storage, put_items, query_partition, scan_items
from travote_api.schemas.place import Place
from travote_api.services.records import deserialize_items

COORDINATE_FIELDS = (LATITUDE_FIELD, LONGITUDE_FIELD)


def list_places(storage: Storage, place_filter: PlaceFilter, value: str | None, limit: int) -> list[Place]:
    """List places matching a single equality filter.

    Region filters use the table's partition key; other filters scan.

    Args:
        storage: Shared storage handle.
        place_filter: Resolved filter tag.
        value: Filter value, or None for ``PlaceFilter.NONE``.
        limit: Maximum number of places to return.

    Returns:
        Matching places.

    Raises:
        StorageError: If the table cannot be read.
        DeserializationError: If a stored item is malformed.
    """
    clause = place_equality_clause(place_filter, value)
    if clause is None:
        logger.info(f"Listing places without filter (limit={limit})")
        items = scan_items(storage.places, limit)
    elif place_filter is PlaceFilter.BY_REGION:
        logger.info(f"Listing places in region {value} (limit={limit})")
        items = query_partition(storage.places, PLACE_FILTER_FIELDS[place_filter], clause.value, limit)
    else:
        logger.info(f"Listing places with {clause.field}={value} (limit={limit})")
        items = scan_items(storage.places, limit, equality_condition(clause))

    return deserialize_items(Place, items)


def find_places_near(storage: Storage, query: BoundingBoxQuery) -> list[Place]:
    """Return places inside a bounding box.

    Args:
        storage: Shared storage handle.
        query: Normalized bounding-box query.

    Returns:
        Up to ``query.result_limit`` places inside the box.

    Raises:
        StorageError: If the table cannot be read.
        DeserializationError: If a stored item is malformed.
    """
    logger.info(
        f"Searching places near ({query.center.latitude}, {query.center.longitude}) "
        f"radius={query.radius_degrees} wraps={query.wraps_antimeridian} limit={query.result_limit}"
    )
    items = scan_items(storage.places, query.result_limit, bounding_box_condition(query))
    return deserialize_items(Place, items)


def put_places(storage: Storage, items: list[dict[str, Any]]) -> int:
    """Write raw place items, storing coordinates as numbers.

    Coordinates given as numeric strings are converted so that bounding-box
    range conditions can match them.

    Returns:
        Number of places written.

    Raises:
        ValueError: If a coordinate is not numeric.
        StorageError: If the write fails.
    """
    return put_items(storage.places, items, numeric_fields=COORDINATE_FIELDS)
