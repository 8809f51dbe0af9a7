"""
Movie Catalog application package.

This package contains the record models, the record store and its flat-file
persistence, and the interactive terminal shell.
"""

__version__ = "1.0.0"
