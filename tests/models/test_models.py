"""
Unit tests for the Movie and TVSeries record models.
"""

import pytest
from pydantic import ValidationError

from movie_catalog.models import Movie, TVSeries


class TestMovieModel:
    """Tests for Movie field constraints."""

    def test_defaults_to_unrated(self):
        """A new movie has rating 0 and is not rated."""
        movie = Movie(title="Dune", director="Villeneuve", year=2021)

        assert movie.rating == 0.0
        assert movie.is_rated is False

    @pytest.mark.parametrize("field,value", [
        ("title", ""),
        ("director", ""),
        ("year", 1800),
        ("rating", 5.5),
        ("rating", -1.0),
    ])
    def test_rejects_invalid_fields(self, field, value):
        """Construction fails for any field outside its bounds."""
        data = {"title": "Dune", "director": "Villeneuve", "year": 2021}
        data[field] = value

        with pytest.raises(ValidationError):
            Movie(**data)

    def test_assignment_is_validated(self):
        """Assigning an out-of-range year is rejected and the old value kept."""
        movie = Movie(title="Dune", director="Villeneuve", year=2021)

        with pytest.raises(ValidationError):
            movie.year = 1066

        assert movie.year == 2021


class TestTVSeriesModel:
    """Tests for the TVSeries stub model."""

    def test_create_tv_series(self):
        series = TVSeries(title="Dark", creator="Baran bo Odar", seasons=3, episodes=26)

        assert series.seasons == 3
        assert series.episodes == 26

    @pytest.mark.parametrize("seasons,episodes", [(0, 10), (1, 0)])
    def test_counts_must_be_positive(self, seasons, episodes):
        with pytest.raises(ValidationError):
            TVSeries(title="Dark", creator="Baran bo Odar", seasons=seasons, episodes=episodes)
