"""
Reusable shell components: dialogs, tables, forms and prompts.
"""

from movie_catalog.ui.components.popup import show_popup
from movie_catalog.ui.components.movie_table import render_movie_table
from movie_catalog.ui.components.movie_form import prompt_movie_details
from movie_catalog.ui.components.rating_widget import prompt_rating

__all__ = [
    "show_popup",
    "render_movie_table",
    "prompt_movie_details",
    "prompt_rating",
]
