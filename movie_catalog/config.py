"""
Application configuration loaded from environment or defaults.
"""

import os

DEFAULT_DATA_FILE = "movies.txt"


def get_data_file() -> str:
    """Get catalog file path from env or default."""
    return os.getenv("MOVIE_CATALOG_FILE", "") or DEFAULT_DATA_FILE


def get_initial_capacity() -> int:
    """Get initial record store capacity."""
    return int(os.getenv("MOVIE_CATALOG_CAPACITY", "10"))


def get_max_capacity() -> int | None:
    """Get the record store growth ceiling, or None for unbounded."""
    value = os.getenv("MOVIE_CATALOG_MAX_CAPACITY", "")
    return int(value) if value else None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "WARNING").upper()


def get_log_file() -> str | None:
    """Get log file name from env, None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get log directory from env or default."""
    return os.getenv("LOG_DIR", "logs")
