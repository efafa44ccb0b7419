"""DynamoDB storage operations for places and countries.

Provides boto3 resource creation, paginated scan/query helpers that stop
once enough matches are collected, an atomic counter update, and table
creation for local development.  botocore failures are re-raised as
:class:`StorageError`.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from travote_api.lib.storage.errors import ItemNotFoundError, StorageError

DEFAULT_PAGE_SIZE = 200


@dataclass(frozen=True)
class Storage:
    """DynamoDB resource plus the table names the service reads and writes.

    Created once per process and shared across requests.
    """

    resource: Any
    places_table_name: str = "Places"
    countries_table_name: str = "Countries"

    @property
    def places(self) -> Any:
        return self.resource.Table(self.places_table_name)

    @property
    def countries(self) -> Any:
        return self.resource.Table(self.countries_table_name)


def create_dynamodb_resource(region_name: str, endpoint_url: str | None = None) -> Any:
    """Create a boto3 DynamoDB resource.

    Args:
        region_name: AWS region (e.g. ``ap-southeast-1``).
        endpoint_url: Optional endpoint override for DynamoDB Local.

    Returns:
        boto3 DynamoDB service resource.
    """
    kwargs: dict[str, Any] = {"region_name": region_name}
    if endpoint_url:
        kwargs["endpoint_url"] = endpoint_url
    return boto3.resource("dynamodb", **kwargs)


@contextmanager
def _storage_errors(operation: str, table: str) -> Iterator[None]:
    try:
        yield
    except ClientError as exc:
        error = exc.response.get("Error", {})
        code = error.get("Code")
        logger.warning(f"DynamoDB {operation} on {table} failed: {code}")
        raise StorageError(operation, table, error.get("Message", str(exc)), code=code) from exc
    except BotoCoreError as exc:
        logger.warning(f"DynamoDB {operation} on {table} failed: {exc}")
        raise StorageError(operation, table, str(exc)) from exc


def _collect(page_fn: Any, params: dict[str, Any], limit: int) -> list[dict[str, Any]]:
    """Page through results until ``limit`` items are collected or the table is exhausted.

    DynamoDB applies ``Limit`` before filtering, so a single page may hold
    fewer matches than requested.
    """
    items: list[dict[str, Any]] = []
    while True:
        response = page_fn(**params)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if len(items) >= limit or last_key is None:
            return items[:limit]
        params["ExclusiveStartKey"] = last_key


def scan_items(
    table: Any,
    limit: int,
    condition: ConditionBase | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[dict[str, Any]]:
    """Scan a table and return up to ``limit`` items matching ``condition``.

    Args:
        table: boto3 DynamoDB Table.
        limit: Maximum number of items to return.
        condition: Optional filter condition.
        page_size: Items evaluated per Scan call.  DynamoDB applies it before
            the filter, so it is independent of ``limit``.

    Returns:
        Raw DynamoDB items.

    Raises:
        StorageError: If the scan fails.
    """
    params: dict[str, Any] = {"Limit": min(limit, page_size)}
    if condition is not None:
        params["Limit"] = page_size
        params["FilterExpression"] = condition

    with _storage_errors("Scan", table.name):
        items = _collect(table.scan, params, limit)
    logger.debug(f"Scan on {table.name} returned {len(items)} items")
    return items


def query_partition(
    table: Any,
    key_name: str,
    value: str,
    limit: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[dict[str, Any]]:
    """Return up to ``limit`` items sharing a partition key value.

    Raises:
        StorageError: If the query fails.
    """
    params: dict[str, Any] = {
        "KeyConditionExpression": Key(key_name).eq(value),
        "Limit": min(limit, page_size),
    }
    with _storage_errors("Query", table.name):
        items = _collect(table.query, params, limit)
    logger.debug(f"Query on {table.name} ({key_name}) returned {len(items)} items")
    return items


def increment_counter(table: Any, key: dict[str, str], attribute: str, amount: int = 1) -> int:
    """Atomically add ``amount`` to a numeric attribute of an existing item.

    Args:
        table: boto3 DynamoDB Table.
        key: Full primary key of the item.
        attribute: Counter attribute name.
        amount: Value to add.

    Returns:
        The counter value after the update.

    Raises:
        ItemNotFoundError: If no item has the given key.
        StorageError: If the update fails for any other reason.
    """
    condition = None
    for key_name in key:
        exists = Attr(key_name).exists()
        condition = exists if condition is None else condition & exists

    try:
        with _storage_errors("UpdateItem", table.name):
            response = table.update_item(
                Key=key,
                UpdateExpression="ADD #counter :amount",
                ExpressionAttributeNames={"#counter": attribute},
                ExpressionAttributeValues={":amount": amount},
                ConditionExpression=condition,
                ReturnValues="UPDATED_NEW",
            )
    except StorageError as exc:
        if exc.code == "ConditionalCheckFailedException":
            raise ItemNotFoundError("UpdateItem", table.name, f"No item with key {key}", code=exc.code) from exc
        raise

    return int(response["Attributes"][attribute])


def create_tables(storage: Storage) -> list[str]:
    """Create the places and countries tables if they do not exist.

    Places are keyed by ``abbr`` (partition) and ``id`` (sort); countries by
    ``abbr``.  Both use on-demand billing.

    Returns:
        Names of the tables that were created.

    Raises:
        StorageError: If table creation fails.
    """
    definitions = {
        storage.places_table_name: [("abbr", "HASH"), ("id", "RANGE")],
        storage.countries_table_name: [("abbr", "HASH")],
    }

    with _storage_errors("ListTables", "*"):
        existing = {t.name for t in storage.resource.tables.all()}

    created: list[str] = []
    for name, keys in definitions.items():
        if name in existing:
            logger.info(f"Table {name} already exists")
            continue
        with _storage_errors("CreateTable", name):
            table = storage.resource.create_table(
                TableName=name,
                KeySchema=[{"AttributeName": attr, "KeyType": kind} for attr, kind in keys],
                AttributeDefinitions=[{"AttributeName": attr, "AttributeType": "S"} for attr, _ in keys],
                BillingMode="PAY_PER_REQUEST",
            )
            table.wait_until_exists()
        logger.info(f"Created table {name}")
        created.append(name)
    return created


def normalize_numeric_fields(item: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Return a copy of ``item`` with ``fields`` stored as DynamoDB numbers.

    Range conditions only match attributes of type N, so fields that are
    searched by range must never be written as strings.  Missing fields are
    skipped.

    Raises:
        ValueError: If a field holds a value that is not numeric.
    """
    normalized = dict(item)
    for field in fields:
        value = normalized.get(field)
        if value is None:
            continue
        if isinstance(value, bool):
            msg = f"{field} must be numeric, got {value!r}"
            raise ValueError(msg)
        try:
            number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation as e:
            msg = f"{field} must be numeric, got {value!r}"
            raise ValueError(msg) from e
        if not number.is_finite():
            msg = f"{field} must be finite, got {value!r}"
            raise ValueError(msg)
        normalized[field] = number
    return normalized


def put_items(table: Any, items: list[dict[str, Any]], numeric_fields: tuple[str, ...] = ()) -> int:
    """Write items in batches, overwriting items with the same key.

    Values in ``numeric_fields`` are converted to ``Decimal`` first; other
    numeric values must already be ``int`` or ``Decimal``.

    Returns:
        Number of items written.

    Raises:
        ValueError: If a value in ``numeric_fields`` is not numeric.
        StorageError: If a batch write fails.
    """
    normalized = [normalize_numeric_fields(item, numeric_fields) for item in items]
    with _storage_errors("BatchWriteItem", table.name), table.batch_writer() as batch:
        for item in normalized:
            batch.put_item(Item=item)
    logger.info(f"Wrote {len(items)} items to {table.name}")
    return len(items)
