"""
Movie list page - browse the catalog and rate, edit, delete, search or sort.
"""

import logging
from typing import Optional

from rich.markup import escape

from movie_catalog.errors import CatalogError
from movie_catalog.storage import crud, DeleteOutcome
from movie_catalog.ui.components import (
    prompt_movie_details,
    prompt_rating,
    render_movie_table,
    show_popup,
)
from movie_catalog.ui.utils.session_state import ShellContext

logger = logging.getLogger(__name__)

ACTIONS = {
    "r": "Rate",
    "d": "Delete",
    "e": "Edit",
    "s": "Search",
    "o": "Order by title",
    "q": "Back",
}


def _ask_index(ctx: ShellContext) -> Optional[int]:
    """Ask for a row number and return the matching store index."""
    response = ctx.ask("Movie number")
    try:
        number = int(response.strip())
    except ValueError:
        number = 0
    if not 1 <= number <= crud.get_movie_count(ctx.store):
        show_popup(ctx, "Warning", "No movie is selected or the selected movie is invalid.")
        return None
    return number - 1


def _rate(ctx: ShellContext) -> None:
    index = _ask_index(ctx)
    if index is None:
        return
    movie = crud.get_movie(ctx.store, index)
    if prompt_rating(ctx, movie):
        ctx.mark_changed()
        show_popup(ctx, "Info", f"Rated {movie.title}: {movie.rating:.1f}/5")


def _delete(ctx: ShellContext) -> None:
    index = _ask_index(ctx)
    if index is None:
        return
    movie = crud.get_movie(ctx.store, index)
    response = ctx.ask(f"Delete {escape(movie.title)}? (y/n)")
    outcome = crud.delete_movie(ctx.store, index, response)
    if outcome is DeleteOutcome.DELETED:
        ctx.mark_changed()
        show_popup(ctx, "Info", "Movie deleted successfully!")
    elif response.strip().lower() == "n":
        show_popup(ctx, "Info", "Deletion canceled.")
    else:
        show_popup(ctx, "Warning", "Invalid input. Deletion canceled.")


def _edit(ctx: ShellContext) -> None:
    index = _ask_index(ctx)
    if index is None:
        return
    movie = crud.get_movie(ctx.store, index)
    title, director, year = prompt_movie_details(ctx, initial=movie)
    crud.update_movie(movie, title, director, year)
    ctx.mark_changed()
    show_popup(ctx, "Info", "Movie updated successfully!")


def _search(ctx: ShellContext) -> None:
    title = ctx.ask("Title to search for")
    movie = crud.search_movie(ctx.store, title.strip())
    if movie is None:
        show_popup(ctx, "Info", f"No movie titled '{title.strip()}'.")
        return
    ctx.console.print(render_movie_table([movie], title="SEARCH RESULT"))


def _order(ctx: ShellContext) -> None:
    crud.sort_movies(ctx.store)
    ctx.mark_changed()


HANDLERS = {
    "r": _rate,
    "d": _delete,
    "e": _edit,
    "s": _search,
    "o": _order,
}


def show_movie_list(ctx: ShellContext) -> None:
    """
    Show the catalog and handle list actions until the user goes back.

    Errors from a single action are reported and the list is shown again.
    """
    while True:
        movies = crud.get_movies(ctx.store)
        if not movies:
            show_popup(ctx, "Warning", "No movies to display!")
            return

        ctx.console.print(render_movie_table(movies))
        ctx.console.print(
            "  ".join(f"[bold]{key}[/bold]: {label}" for key, label in ACTIONS.items())
        )
        action = ctx.ask("Action", choices=list(ACTIONS), default="q")
        if action == "q":
            return

        try:
            HANDLERS[action](ctx)
        except CatalogError as e:
            logger.warning("Movie list action %r failed: %s", action, e)
            show_popup(ctx, "Error", str(e))
