"""Country service: filtered listing over the countries table."""

from loguru import logger

from travote_api.lib.geo.filters import CountryFilter, country_equality_clause
from travote_api.lib.storage.conditions import equality_condition
from travote_api.lib.storage.dynamodb import Storage, scan_items
from travote_api.schemas.country import Country
from travote_api.services.records import deserialize_items


def list_countries(storage: Storage, country_filter: CountryFilter, value: str | None, limit: int) -> list[Country]:
    """List countries, optionally filtered by region code or name.

    Raises:
        StorageError: If the table cannot be read.
        DeserializationError: If a stored item is malformed.
    """
    clause = country_equality_clause(country_filter, value)
    if clause is None:
        logger.info(f"Listing countries without filter (limit={limit})")
        items = scan_items(storage.countries, limit)
    else:
        logger.info(f"Listing countries with {clause.field}={value} (limit={limit})")
        items = scan_items(storage.countries, limit, equality_condition(clause))

    return deserialize_items(Country, items)
