"""Deserialization of raw DynamoDB items into schema models."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError

from travote_api.lib.storage.errors import DeserializationError


def deserialize_items(model: type[BaseModel], items: Iterable[dict[str, Any]]) -> list[Any]:
    """Validate raw items into ``model`` instances.

    Args:
        model: Pydantic model class describing the stored record.
        items: Raw DynamoDB items.

    Returns:
        Validated model instances, in input order.

    Raises:
        DeserializationError: If any item does not match the model.
    """
    records: list[Any] = []
    for item in items:
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            msg = f"Stored item does not match {model.__name__}: {e.error_count()} validation error(s)"
            raise DeserializationError(msg) from e
    return records
