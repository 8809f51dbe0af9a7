"""
Logging configuration for the movie catalog.

Console output goes to stderr so log records never interleave with the
interactive menu drawn on stdout. A rotating file handler can be added for
longer-lived diagnostics.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "WARNING",
    log_dir: str = "logs",
    max_bytes: int = 1024 * 1024,  # 1MB
    backup_count: int = 3
) -> None:
    """
    Configure logging for the application.

    Args:
        log_file: Name of log file (default: None, logs to console only)
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 1MB)
        backup_count: Number of backup files to keep (default: 3)
    """
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        full_log_path = log_path / log_file

    # unknown names fall back to WARNING
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            full_log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        root_logger.info(f"Logging to file: {full_log_path}")

    # rich logs its own markup warnings at DEBUG
    logging.getLogger('rich').setLevel(logging.WARNING)


def configure_shell_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    log_dir: str = "logs"
) -> None:
    """
    Configure logging for an interactive shell session.

    Args:
        level: Logging level; DEBUG also records every store mutation
        log_file: Optional log file name, e.g. 'movie_catalog.log'
        log_dir: Directory for the log file
    """
    setup_logging(
        log_file=log_file,
        level=level,
        log_dir=log_dir
    )
