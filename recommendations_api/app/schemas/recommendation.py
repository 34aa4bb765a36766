"""
Pydantic schemas for recommendations.

A recommendation is a named piece of media (usually a video link)
that users vote on.  ``RecommendationCreate`` is the request body for
submitting one, ``RecommendationRead`` is what the API returns and
``RecommendationVote`` reports the outcome of an upvote or downvote.
"""

from pydantic import BaseModel, Field, field_validator


class RecommendationCreate(BaseModel):
    """Schema for submitting a new recommendation."""

    name: str = Field(..., min_length=1, description="Unique display name")
    media_link: str = Field(..., min_length=1, description="Link to the recommended media")

    @field_validator("name", "media_link")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        # Names are matched exactly, so the value itself is kept as sent.
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v


class RecommendationRead(BaseModel):
    """Schema for reading a recommendation from the API."""

    id: int
    name: str
    media_link: str
    score: int

    model_config = {
        "from_attributes": True,
    }


class RecommendationVote(BaseModel):
    """Outcome of a vote.

    ``score`` is the value after the vote was applied.  ``removed`` is
    true when a downvote pushed the score past the elimination
    threshold and the recommendation was deleted.
    """

    id: int
    score: int
    removed: bool = False
