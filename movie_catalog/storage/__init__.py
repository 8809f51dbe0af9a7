"""
Storage module for the movie catalog.

This module provides the in-memory record store, the record operations the
shell calls, and the flat-file persistence codec.
"""

from movie_catalog.storage.store import RecordStore, DEFAULT_CAPACITY
from movie_catalog.storage.crud import DeleteOutcome
from movie_catalog.storage.codec import save_movies, load_movies
from movie_catalog.storage import crud

__all__ = [
    # Store
    'RecordStore',
    'DEFAULT_CAPACITY',
    # Persistence
    'save_movies',
    'load_movies',
    # CRUD module
    'crud',
    'DeleteOutcome',
]
