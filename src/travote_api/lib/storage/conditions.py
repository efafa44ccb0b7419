"""Translate store-agnostic predicates into boto3 DynamoDB conditions.

boto3 condition objects render to placeholder names and values
(``ExpressionAttributeNames`` / ``ExpressionAttributeValues``), so request
values never appear inside the expression string.
"""

from decimal import Decimal

from boto3.dynamodb.conditions import Attr, ConditionBase

from travote_api.lib.geo.bounding_box import BoundingBoxQuery, EqualityClause, NormalizedRange


def to_decimal(value: float) -> Decimal:
    """Convert a float to the Decimal type DynamoDB numbers require."""
    return Decimal(str(value))


def range_condition(clause: NormalizedRange) -> ConditionBase:
    return Attr(clause.field).between(to_decimal(clause.low), to_decimal(clause.high))


def equality_condition(clause: EqualityClause) -> ConditionBase:
    return Attr(clause.field).eq(clause.value)


def bounding_box_condition(query: BoundingBoxQuery) -> ConditionBase:
    """Build ``equality AND lat AND (long_a OR long_b)`` as a filter condition.

    Args:
        query: Normalized bounding-box query.

    Returns:
        boto3 condition usable as a Scan ``FilterExpression``.
    """
    longitude = range_condition(query.longitude[0])
    for extra in query.longitude[1:]:
        longitude = longitude | range_condition(extra)

    condition = range_condition(query.latitude) & longitude
    if query.equality is not None:
        condition = equality_condition(query.equality) & condition
    return condition
