"""Storage library: DynamoDB access for places and countries.

Provides the shared :class:`Storage` value, predicate-to-condition
translation, paginated scan/query execution, atomic counters, and the
storage error types.
"""

from travote_api.lib.storage.conditions import bounding_box_condition, equality_condition, range_condition
from travote_api.lib.storage.dynamodb import (
    Storage,
    create_dynamodb_resource,
    create_tables,
    increment_counter,
    normalize_numeric_fields,
    put_items,
    query_partition,
    scan_items,
)
from travote_api.lib.storage.errors import DeserializationError, ItemNotFoundError, StorageError

__all__ = [
    "DeserializationError",
    "ItemNotFoundError",
    "Storage",
    "StorageError",
    "bounding_box_condition",
    "create_dynamodb_resource",
    "create_tables",
    "equality_condition",
    "increment_counter",
    "normalize_numeric_fields",
    "put_items",
    "query_partition",
    "range_condition",
    "scan_items",
]
