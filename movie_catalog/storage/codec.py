"""
Flat-file persistence for the record store.

File format, one record per line, UTF-8, no header:

    title|director|year|rating

The rating always has one fractional digit. Fields are not escaped, so a
title or director containing '|' cannot be read back; such lines are
skipped on load.
"""

import logging
import math
from pathlib import Path
from typing import Optional, Tuple, Union

from movie_catalog.errors import CatalogError, PersistenceError
from movie_catalog.models import MAX_RATING, Movie
from movie_catalog.storage.crud import create_movie, insert_movie
from movie_catalog.storage.store import RecordStore

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"

PathLike = Union[str, Path]


class LineFormatError(ValueError):
    """Raised when a catalog line cannot be turned into a record."""


def format_line(movie: Movie) -> str:
    """Render one record as a catalog line (without newline)."""
    return FIELD_SEPARATOR.join(
        [movie.title, movie.director, str(movie.year), f"{movie.rating:.1f}"]
    )


def parse_line(line: str) -> Tuple[str, str, int, float]:
    """
    Split a catalog line into title, director, year and rating.

    Three-field lines carry no rating and yield 0.0.

    Raises:
        LineFormatError: If the line is malformed
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise LineFormatError(f"expected at least 3 fields, got {len(parts)}")
    if len(parts) > 4:
        raise LineFormatError(f"expected at most 4 fields, got {len(parts)}")

    title, director, year_str = parts[:3]
    try:
        year = int(year_str.strip())
    except ValueError:
        raise LineFormatError(f"year is not an integer: {year_str!r}") from None

    rating = 0.0
    if len(parts) == 4:
        try:
            rating = float(parts[3].strip())
        except ValueError:
            raise LineFormatError(f"rating is not a number: {parts[3]!r}") from None
        if math.isnan(rating) or not 0.0 <= rating <= MAX_RATING:
            raise LineFormatError(f"rating out of range: {parts[3]!r}")

    return title, director, year, rating


def save_movies(path: PathLike, store: RecordStore) -> int:
    """
    Write every live record to path, replacing its contents.

    Args:
        path: Catalog file path
        store: Record store to write

    Returns:
        Number of records written

    Raises:
        PersistenceError: If the file cannot be opened or written
    """
    written = 0
    try:
        with open(path, "w", encoding="utf-8") as f:
            for movie in store:
                f.write(format_line(movie) + "\n")
                written += 1
    except OSError as e:
        logger.error("Error opening file for writing: %s (%s)", path, e)
        raise PersistenceError(f"Could not save catalog to {path}: {e}") from e

    logger.info("Saved %d movies to %s", written, path)
    return written


def load_movies(path: PathLike, store: RecordStore) -> int:
    """
    Read records from path into store.

    A missing file is the normal first-run state: it is logged and nothing
    is loaded. Malformed or invalid lines are skipped with a warning.

    Args:
        path: Catalog file path
        store: Destination store; grows as needed

    Returns:
        Number of records loaded

    Raises:
        OutOfMemoryError: If the store cannot grow to hold the file
        PersistenceError: If the file exists but cannot be read or decoded;
            records read before the failure stay in the store
    """
    loaded = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, raw in enumerate(f, start=1):
                movie = _read_line(raw, line_no)
                if movie is None:
                    continue
                insert_movie(store, movie)
                loaded += 1
    except FileNotFoundError:
        logger.warning("Could not open file for reading: %s (starting empty)", path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read catalog file %s after %d movies: %s", path, loaded, e)
        raise PersistenceError(f"Could not read catalog {path}: {e}") from e

    logger.info("Loaded %d movies from %s", loaded, path)
    return loaded


def _read_line(raw: str, line_no: int) -> Optional[Movie]:
    line = raw.rstrip("\r\n")
    if not line.strip():
        return None

    try:
        title, director, year, rating = parse_line(line)
        movie = create_movie(title, director, year)
        movie.rating = rating
    except (LineFormatError, CatalogError) as e:
        logger.warning("Error parsing line %d: %r (%s)", line_no, line, e)
        return None
    return movie
