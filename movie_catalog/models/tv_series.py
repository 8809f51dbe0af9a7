"""
Pydantic model for a TV series record.

TV series are not stored or persisted yet; only the record shape and its
validation exist.
"""

from pydantic import BaseModel, Field


class TVSeries(BaseModel):
    """A catalogued TV series."""

    title: str = Field(..., min_length=1)
    creator: str = Field(..., min_length=1)
    seasons: int = Field(..., ge=1)
    episodes: int = Field(..., ge=1)

    class Config:
        validate_assignment = True
