"""Tests for the place service against moto DynamoDB."""

from decimal import Decimal

import pytest

from travote_api.lib.geo import EqualityClause, PlaceFilter, Point, build_bounding_box_query
from travote_api.lib.storage import DeserializationError, Storage, put_items
from travote_api.schemas.place import Place
from travote_api.services.place_service import find_places_near, list_places, put_places


def _ids(places: list[Place]) -> set[str]:
    return {p.id for p in places}


class TestListPlaces:
    """Tests for list_places()."""

    def test_no_filter_returns_up_to_limit(self, seeded_storage: Storage) -> None:
        places = list_places(seeded_storage, PlaceFilter.NONE, None, 5)
        assert len(places) == 5
        assert all(isinstance(p, Place) for p in places)

    def test_by_region(self, seeded_storage: Storage) -> None:
        places = list_places(seeded_storage, PlaceFilter.BY_REGION, "SG", 50)
        assert _ids(places) == {"sg-1", "sg-2", "sg-3"}

    def test_by_category(self, seeded_storage: Storage) -> None:
        places = list_places(seeded_storage, PlaceFilter.BY_CATEGORY, "museum", 50)
        assert _ids(places) == {"sg-2"}

    def test_by_identifier(self, seeded_storage: Storage) -> None:
        places = list_places(seeded_storage, PlaceFilter.BY_IDENTIFIER, "fj-1", 50)
        assert len(places) == 1
        assert places[0].name == "Taveuni"
        assert places[0].lat == pytest.approx(-17.7)
        assert places[0].long == pytest.approx(179.9)

    def test_no_match_is_empty(self, seeded_storage: Storage) -> None:
        assert list_places(seeded_storage, PlaceFilter.BY_CATEGORY, "zoo", 50) == []

    def test_malformed_item_raises(self, storage: Storage) -> None:
        put_items(storage.places, [{"abbr": "SG", "id": "bad", "lat": Decimal("95"), "long": Decimal("0")}])
        with pytest.raises(DeserializationError, match="Place"):
            list_places(storage, PlaceFilter.NONE, None, 10)


class TestFindPlacesNear:
    """Tests for find_places_near()."""

    def test_box_without_wraparound(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(Point(1.35, 103.8), 0.5, 50)
        assert _ids(find_places_near(seeded_storage, query)) == {"sg-1", "sg-2", "sg-3"}

    def test_box_wrapping_east(self, seeded_storage: Storage) -> None:
        """A box centred just west of the antimeridian finds places on both sides."""
        query = build_bounding_box_query(Point(-15.0, 179.5), 5.0, 50)
        assert _ids(find_places_near(seeded_storage, query)) == {"fj-1", "ws-1"}

    def test_box_wrapping_west(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(Point(-15.0, -179.5), 5.0, 50)
        assert _ids(find_places_near(seeded_storage, query)) == {"fj-1", "ws-1"}

    def test_box_clamped_at_pole(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(Point(89.5, 10.0), 2.0, 50)
        assert _ids(find_places_near(seeded_storage, query)) == {"no-1"}

    def test_box_with_equality(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(
            Point(-15.0, 179.5), 5.0, 50, equality=EqualityClause("abbr", "WS")
        )
        assert _ids(find_places_near(seeded_storage, query)) == {"ws-1"}

    def test_limit_applies_after_filtering(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(Point(1.35, 103.8), 0.5, 2)
        places = find_places_near(seeded_storage, query)
        assert len(places) == 2
        assert _ids(places) <= {"sg-1", "sg-2", "sg-3"}

    def test_results_satisfy_predicate(self, seeded_storage: Storage) -> None:
        query = build_bounding_box_query(Point(0.0, 0.0), 179.0, 100)
        for place in find_places_near(seeded_storage, query):
            assert query.matches(place.model_dump())


class TestPutPlaces:
    """Tests for put_places()."""

    def test_string_coordinates_found_by_box_search(self, storage: Storage) -> None:
        """Places seeded with string coordinates are still found by bounding-box search."""
        written = put_places(
            storage,
            [
                {"abbr": "SG", "id": "sg-s", "lat": "1.35", "long": "103.8"},
                {"abbr": "FJ", "id": "fj-s", "lat": "-17.7", "long": "179.9"},
            ],
        )
        assert written == 2

        near_singapore = build_bounding_box_query(Point(1.35, 103.8), 0.5, 10)
        assert _ids(find_places_near(storage, near_singapore)) == {"sg-s"}

        across_meridian = build_bounding_box_query(Point(-17.0, -179.5), 1.0, 10)
        assert _ids(find_places_near(storage, across_meridian)) == {"fj-s"}

    def test_non_numeric_coordinate_rejected(self, storage: Storage) -> None:
        with pytest.raises(ValueError, match="long"):
            put_places(storage, [{"abbr": "SG", "id": "bad", "lat": "1.3", "long": "east"}])
