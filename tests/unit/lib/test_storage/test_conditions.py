"""Unit tests for predicate to DynamoDB condition translation."""

from decimal import Decimal

from boto3.dynamodb.conditions import ConditionExpressionBuilder

from travote_api.lib.geo import EqualityClause, NormalizedRange, Point, build_bounding_box_query
from travote_api.lib.storage.conditions import (
    bounding_box_condition,
    equality_condition,
    range_condition,
    to_decimal,
)


def _build(condition):
    return ConditionExpressionBuilder().build_expression(condition)


class TestToDecimal:
    """Tests for to_decimal()."""

    def test_uses_shortest_repr(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(-179.5) == Decimal("-179.5")


class TestClauseConditions:
    """Tests for single clause conditions."""

    def test_range_condition_is_between(self) -> None:
        built = _build(range_condition(NormalizedRange("lat", 0.85, 1.85)))
        assert "BETWEEN" in built.condition_expression
        assert set(built.attribute_name_placeholders.values()) == {"lat"}
        assert set(built.attribute_value_placeholders.values()) == {Decimal("0.85"), Decimal("1.85")}

    def test_equality_condition(self) -> None:
        built = _build(equality_condition(EqualityClause("abbr", "SG")))
        assert set(built.attribute_name_placeholders.values()) == {"abbr"}
        assert list(built.attribute_value_placeholders.values()) == ["SG"]


class TestBoundingBoxCondition:
    """Tests for bounding_box_condition()."""

    def test_single_longitude_range_has_no_or(self) -> None:
        query = build_bounding_box_query(Point(10.0, 20.0), 1.0, 10)
        built = _build(bounding_box_condition(query))
        assert " OR " not in built.condition_expression
        assert " AND " in built.condition_expression
        assert set(built.attribute_name_placeholders.values()) == {"lat", "long"}
        assert set(built.attribute_value_placeholders.values()) == {
            Decimal("9.0"),
            Decimal("11.0"),
            Decimal("19.0"),
            Decimal("21.0"),
        }

    def test_wrapped_box_joins_longitude_ranges_with_or(self) -> None:
        query = build_bounding_box_query(Point(0.0, 179.5), 1.0, 10)
        built = _build(bounding_box_condition(query))
        assert " OR " in built.condition_expression
        assert set(built.attribute_value_placeholders.values()) >= {
            Decimal("178.5"),
            Decimal("180.0"),
            Decimal("-180.0"),
            Decimal("-179.5"),
        }

    def test_equality_is_included(self) -> None:
        query = build_bounding_box_query(
            Point(1.35, 103.8), 0.5, 10, equality=EqualityClause("abbr", "SG")
        )
        built = _build(bounding_box_condition(query))
        assert "abbr" in built.attribute_name_placeholders.values()
        assert "SG" in built.attribute_value_placeholders.values()

    def test_request_values_never_inline(self) -> None:
        """User supplied values only appear as placeholders."""
        query = build_bounding_box_query(
            Point(1.35, 103.8), 0.5, 10, equality=EqualityClause("abbr", "SG' OR 1=1")
        )
        built = _build(bounding_box_condition(query))
        assert "SG" not in built.condition_expression
        assert "103" not in built.condition_expression
        assert "SG' OR 1=1" in built.attribute_value_placeholders.values()
