"""
CRUD operations for Movie and TVSeries records.

This module provides the create, insert, update, rate, delete, search and
sort operations the shell calls. Store-level operations take the
RecordStore as their first argument.
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from pydantic import ValidationError

from movie_catalog.errors import InvalidInputError, InvalidRatingError, OutOfMemoryError
from movie_catalog.models import Movie, MIN_YEAR, TVSeries
from movie_catalog.storage.store import RecordStore

logger = logging.getLogger(__name__)

RATING_CHOICES = ('1', '2', '3', '4', '5')


class DeleteOutcome(str, Enum):
    """Result of a confirmed or declined deletion."""

    DELETED = "deleted"
    CANCELLED = "cancelled"


def _validate_movie_fields(title: Optional[str], director: Optional[str], year: int) -> None:
    if not title or not isinstance(title, str):
        raise InvalidInputError("Title cannot be blank")
    if not director or not isinstance(director, str):
        raise InvalidInputError("Director cannot be blank")
    if not isinstance(year, int) or year <= MIN_YEAR:
        raise InvalidInputError(f"Year must be after {MIN_YEAR}")


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(title: str, director: str, year: int) -> Movie:
    """
    Create a new, unrated movie record.

    The record is not placed in any store; see insert_movie and add_movie.

    Args:
        title: Movie title (non-empty)
        director: Movie director (non-empty)
        year: Release year (after 1800)

    Returns:
        Created Movie object with rating 0

    Raises:
        InvalidInputError: If title or director is empty or year <= 1800
    """
    _validate_movie_fields(title, director, year)
    try:
        return Movie(title=title, director=director, year=year)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


def insert_movie(store: RecordStore, movie: Movie) -> int:
    """
    Insert a record into the store.

    Reuses the first empty slot below count, otherwise appends. Doubles the
    store first when it is full.

    Args:
        store: Record store
        movie: Record to insert

    Returns:
        Index the record was stored at

    Raises:
        OutOfMemoryError: If the store is full and cannot grow
    """
    index = store.insert(movie)
    logger.debug("Inserted %r at index %d", movie.title, index)
    return index


def add_movie(store: RecordStore, title: str, director: str, year: int) -> Movie:
    """
    Create a movie and insert it into the store.

    Raises:
        InvalidInputError: If the fields are invalid (nothing is inserted)
        OutOfMemoryError: If the store cannot grow
    """
    movie = create_movie(title, director, year)
    insert_movie(store, movie)
    return movie


def get_movie(store: RecordStore, index: int) -> Movie:
    """
    Get a movie by its position in the store.

    Raises:
        IndexOutOfRangeError: If index does not address a live record
    """
    return store.get(index)


def get_movies(store: RecordStore) -> List[Movie]:
    """Get all live movies in slot order."""
    return list(store)


def get_movie_count(store: RecordStore) -> int:
    """Get total count of movies."""
    return store.count


def update_movie(movie: Movie, new_title: str, new_director: str, new_year: int) -> Movie:
    """
    Replace a movie's title, director and year in place.

    All fields are validated before any is changed; the rating is kept.

    Args:
        movie: Record to update
        new_title: New title (non-empty)
        new_director: New director (non-empty)
        new_year: New release year (after 1800)

    Returns:
        The same, updated Movie object

    Raises:
        InvalidInputError: If any argument is missing or invalid
    """
    if movie is None:
        raise InvalidInputError("No movie to update")
    _validate_movie_fields(new_title, new_director, new_year)

    movie.title = new_title
    movie.director = new_director
    movie.year = new_year
    return movie


def rate_movie(movie: Movie, rating_input: str) -> Movie:
    """
    Rate a movie from a single-character response.

    Args:
        movie: Record to rate
        rating_input: User response, one of '1'..'5'; surrounding whitespace
            is ignored

    Returns:
        The same, rated Movie object

    Raises:
        InvalidRatingError: If the response is not a string holding a digit
            1-5; the rating
            is left unchanged and the caller may prompt again
    """
    if movie is None:
        raise InvalidInputError("Invalid movie data")

    if not isinstance(rating_input, str):
        raise InvalidRatingError("Invalid rating. Please try again.")

    choice = rating_input.strip()
    if choice not in RATING_CHOICES:
        raise InvalidRatingError("Invalid rating. Please try again.")

    movie.rating = float(choice)
    return movie


def delete_movie(
    store: RecordStore,
    index: int,
    confirmation: Union[str, bool, None]
) -> DeleteOutcome:
    """
    Delete the movie at index if the user confirmed it.

    Args:
        store: Record store
        index: Position of the record to delete
        confirmation: User response; 'y'/'Y' or True deletes, anything else
            cancels

    Returns:
        DeleteOutcome.DELETED or DeleteOutcome.CANCELLED

    Raises:
        IndexOutOfRangeError: If index does not address a live record
    """
    movie = store.get(index)

    if isinstance(confirmation, bool):
        confirmed = confirmation
    else:
        confirmed = (confirmation or "").strip() in ('y', 'Y')

    if not confirmed:
        logger.debug("Deletion of %r cancelled", movie.title)
        return DeleteOutcome.CANCELLED

    store.remove_at(index)
    logger.info("Deleted %r (index %d)", movie.title, index)
    return DeleteOutcome.DELETED


def search_movie(store: RecordStore, title: str) -> Optional[Movie]:
    """
    Find a movie by exact title.

    Returns:
        First matching Movie or None if not found
    """
    return store.find_by_title(title)


def sort_movies(store: RecordStore) -> None:
    """Sort the store's movies alphabetically by title."""
    store.sort_by_title()


def resize_store(store: RecordStore) -> int:
    """
    Double the store capacity.

    Returns:
        The new capacity

    Raises:
        OutOfMemoryError: If the store cannot grow; it is left unchanged
    """
    try:
        return store.resize()
    except OutOfMemoryError:
        logger.error("Failed to resize record store %r", store)
        raise


# ==================== TV SERIES OPERATIONS ====================

def create_tv_series(title: str, creator: str, seasons: int, episodes: int) -> TVSeries:
    """
    Create a TV series record.

    Raises:
        InvalidInputError: If title or creator is empty, or seasons or
            episodes is below 1
    """
    if not title or not creator or seasons < 1 or episodes < 1:
        raise InvalidInputError("Invalid TV series details")
    try:
        return TVSeries(title=title, creator=creator, seasons=seasons, episodes=episodes)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e
