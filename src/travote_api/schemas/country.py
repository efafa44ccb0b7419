"""Pydantic v2 schemas for countries."""

from pydantic import BaseModel, ConfigDict


class Country(BaseModel):
    """A country record as stored in the countries table.

    ``xaxis`` and ``yaxis`` position the country on the client map and may
    be stored as numeric strings.
    """

    model_config = ConfigDict(extra="ignore")

    abbr: str
    name: str = ""
    xaxis: int = 0
    yaxis: int = 0
