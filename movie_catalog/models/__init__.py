"""
Record models for the catalog.
"""

from movie_catalog.models.movie import Movie, MIN_YEAR, MAX_RATING
from movie_catalog.models.tv_series import TVSeries

__all__ = [
    "Movie",
    "MIN_YEAR",
    "MAX_RATING",
    "TVSeries",
]
