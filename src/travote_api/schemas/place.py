"""Pydantic v2 schemas for places.

Stored items carry coordinates and counters as ``Decimal``; validation
converts them to plain numbers.
"""

from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    """A place record as stored in the places table."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1, description="Place identifier (sort key)")
    abbr: str = Field(min_length=1, description="Region code (partition key)")
    name: str = ""
    master: str = ""
    category: str = ""
    desc: str = ""
    lat: float = Field(ge=-90, le=90, description="WGS84 latitude")
    long: float = Field(ge=-180, le=180, description="WGS84 longitude")
    address: str = ""
    postal: str = ""
    contact: str = ""
    hours: str = ""
    website: str = ""
    email: str = ""
    zone: str = ""
    ext_1: str = ""
    votes: int = Field(default=0, ge=0, description="Number of votes cast for the place")
