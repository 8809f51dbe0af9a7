"""
Pydantic model for a movie record.
"""

from pydantic import BaseModel, Field

# Earliest accepted release year is MIN_YEAR + 1.
MIN_YEAR = 1800
MAX_RATING = 5.0


class Movie(BaseModel):
    """A catalogued movie.

    Records are mutated in place by update and rate, so assignments are
    validated against the same constraints as construction.
    """

    title: str = Field(..., min_length=1)
    director: str = Field(..., min_length=1)
    year: int = Field(..., gt=MIN_YEAR)
    rating: float = Field(0.0, ge=0.0, le=MAX_RATING)  # 0 means unrated

    class Config:
        validate_assignment = True

    @property
    def is_rated(self) -> bool:
        return self.rating > 0
