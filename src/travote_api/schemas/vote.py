"""Pydantic v2 schemas for place voting."""

from pydantic import BaseModel, Field


class VoteRequest(BaseModel):
    """Vote for a place, authenticated with a Facebook user token."""

    fb_id: str = Field(min_length=1, max_length=64, description="Facebook user ID")
    fb_access_token: str = Field(min_length=1, max_length=1024, description="Facebook user access token")
    place_id: str = Field(min_length=1, max_length=128, description="Identifier of the place being voted for")
    place_abbr: str = Field(min_length=1, max_length=16, description="Region code of the place")


class VoteResponse(BaseModel):
    """Outcome of a vote."""

    success: bool
    votes: int | None = Field(default=None, description="Vote count after a successful vote")
