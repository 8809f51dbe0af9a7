"""
Exceptions raised by the catalog.

Every error the record operations can raise derives from CatalogError so the
shell can report and recover from any of them in one place.
"""


class CatalogError(Exception):
    """Base error for this package."""


class InvalidInputError(CatalogError, ValueError):
    """Raised when record fields fail validation on create or update."""


class InvalidRatingError(InvalidInputError):
    """Raised when a rating response is not one of '1'..'5'.

    The operation can be retried with a new response.
    """


class IndexOutOfRangeError(CatalogError, IndexError):
    """Raised when an index does not address a live record."""


class OutOfMemoryError(CatalogError):
    """Raised when the record store cannot grow its slot array."""


class PersistenceError(CatalogError):
    """Raised when the catalog file cannot be written."""
