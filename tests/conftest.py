"""Shared test fixtures for settings, moto-backed DynamoDB storage, and sample records."""

from collections.abc import Generator
from decimal import Decimal

import boto3
import pytest
from moto import mock_aws

from travote_api.core.config import Settings
from travote_api.lib.storage.dynamodb import Storage, create_tables, put_items

_REGION = "ap-southeast-1"


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        aws_region=_REGION,
        places_table="Places",
        countries_table="Countries",
        max_result_limit=100,
    )


@pytest.fixture
def storage(settings: Settings) -> Generator[Storage]:
    """Moto-mocked DynamoDB with empty places and countries tables."""
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name=_REGION)
        store = Storage(
            resource=resource,
            places_table_name=settings.places_table,
            countries_table_name=settings.countries_table,
        )
        create_tables(store)
        yield store


def _make_place(place_id: str, abbr: str, lat: str, long: str, **extra: object) -> dict:
    """Build a raw place item as stored in DynamoDB."""
    item = {
        "id": place_id,
        "abbr": abbr,
        "name": f"Place {place_id}",
        "category": "food",
        "lat": Decimal(lat),
        "long": Decimal(long),
    }
    item.update(extra)
    return item


_SAMPLE_PLACES = [
    _make_place("sg-1", "SG", "1.35", "103.8", name="Maxwell Food Centre"),
    _make_place("sg-2", "SG", "1.29", "103.85", category="museum"),
    _make_place("sg-3", "SG", "1.44", "103.78"),
    _make_place("fj-1", "FJ", "-17.7", "179.9", name="Taveuni"),
    _make_place("ws-1", "WS", "-13.8", "-179.8", name="Apia East"),
    _make_place("nz-1", "NZ", "-36.8", "174.7"),
    _make_place("no-1", "NO", "89.9", "10.0", name="Near the pole"),
]

_SAMPLE_COUNTRIES = [
    {"abbr": "SG", "name": "Singapore", "xaxis": "12", "yaxis": Decimal("7")},
    {"abbr": "FJ", "name": "Fiji", "xaxis": Decimal("30"), "yaxis": Decimal("18")},
    {"abbr": "NZ", "name": "New Zealand", "xaxis": Decimal("33"), "yaxis": Decimal("25")},
]


@pytest.fixture
def seeded_storage(storage: Storage) -> Storage:
    """Storage with the sample places and countries loaded."""
    put_items(storage.places, _SAMPLE_PLACES)
    put_items(storage.countries, _SAMPLE_COUNTRIES)
    return storage
