"""
Star rating prompt component.
"""

from rich.markup import escape

from movie_catalog.errors import InvalidRatingError
from movie_catalog.models import Movie
from movie_catalog.storage import crud
from movie_catalog.ui.components.popup import show_popup
from movie_catalog.ui.utils.session_state import ShellContext


def prompt_rating(ctx: ShellContext, movie: Movie) -> bool:
    """
    Ask for a 1-5 rating until a valid one is given.

    A blank answer cancels and keeps the current rating.

    Returns:
        True if the movie was rated
    """
    while True:
        response = ctx.ask(
            f"Enter a rating for the movie ({escape(movie.title)}) from 1 to 5 "
            "[dim](blank to cancel)[/dim]"
        )
        if not response.strip():
            return False
        try:
            crud.rate_movie(movie, response)
        except InvalidRatingError as e:
            show_popup(ctx, "Warning", str(e))
            continue
        return True
