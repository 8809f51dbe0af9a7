"""
Shell pages.
"""

from movie_catalog.ui.pages.movie_list import show_movie_list

__all__ = ["show_movie_list"]
