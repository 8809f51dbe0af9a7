"""
Shared utilities package.

This package contains the logging configuration used by the shell and the
entry point.
"""

from movie_catalog.utils.logging_config import setup_logging, configure_shell_logging

__all__ = ['setup_logging', 'configure_shell_logging']
