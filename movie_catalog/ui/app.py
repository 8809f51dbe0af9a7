"""
Main menu loop for the movie catalog shell.
"""

import logging
from enum import Enum

from rich.panel import Panel

from movie_catalog.errors import CatalogError
from movie_catalog.storage import crud, save_movies
from movie_catalog.ui.components import prompt_movie_details, show_popup
from movie_catalog.ui.pages import show_movie_list
from movie_catalog.ui.utils.session_state import ShellContext

logger = logging.getLogger(__name__)


class MenuOption(str, Enum):
    MOVIE_ADD = "1"
    MOVIE_DISPLAY = "2"
    TV_SERIES_ADD = "3"
    TV_SERIES_DISPLAY = "4"
    SAVE = "5"
    EXIT = "6"


MENU_LABELS = {
    MenuOption.MOVIE_ADD: "ADD MOVIE",
    MenuOption.MOVIE_DISPLAY: "DISPLAY MOVIES",
    MenuOption.TV_SERIES_ADD: "ADD TV SERIES",
    MenuOption.TV_SERIES_DISPLAY: "DISPLAY TV SERIES",
    MenuOption.SAVE: "SAVE",
    MenuOption.EXIT: "EXIT",
}


def main_menu(ctx: ShellContext) -> MenuOption:
    """Draw the main menu and return the chosen option."""
    lines = [f"{option.value}) {label}" for option, label in MENU_LABELS.items()]
    subtitle = "unsaved changes" if ctx.dirty else None
    ctx.console.print(
        Panel("\n".join(lines), title="MOVIE CATALOG", subtitle=subtitle, border_style="yellow", expand=False)
    )
    choice = ctx.ask("Select", choices=[option.value for option in MenuOption])
    return MenuOption(choice)


def add_movie_page(ctx: ShellContext) -> None:
    """Collect a new movie's details and store it."""
    title, director, year = prompt_movie_details(ctx)
    try:
        crud.add_movie(ctx.store, title, director, year)
    except CatalogError as e:
        logger.warning("Failed to add %r: %s", title, e)
        show_popup(ctx, "Error", f"Failed to create a new movie entry.\n{e}")
        return
    ctx.mark_changed()
    show_popup(ctx, "Info", f"Added {title} ({year}).")


def save_catalog(ctx: ShellContext) -> bool:
    """
    Write the catalog to the data file.

    Returns:
        True if the file was written
    """
    try:
        written = save_movies(ctx.data_file, ctx.store)
    except CatalogError as e:
        show_popup(ctx, "Error", str(e))
        return False
    ctx.mark_saved()
    show_popup(ctx, "Info", f"Saved {written} movies to {ctx.data_file}.")
    return True


def run_shell(ctx: ShellContext) -> None:
    """
    Run the menu loop until the user exits, then save the catalog.

    End of input or Ctrl-C at any prompt counts as choosing exit.
    """
    try:
        while True:
            choice = main_menu(ctx)
            if choice is MenuOption.EXIT:
                break
            if choice is MenuOption.MOVIE_ADD:
                add_movie_page(ctx)
            elif choice is MenuOption.MOVIE_DISPLAY:
                show_movie_list(ctx)
            elif choice in (MenuOption.TV_SERIES_ADD, MenuOption.TV_SERIES_DISPLAY):
                show_popup(ctx, "Info", "TV series are not available yet.")
            elif choice is MenuOption.SAVE:
                save_catalog(ctx)
    except (EOFError, KeyboardInterrupt):
        ctx.console.print()
        logger.info("Input closed, exiting")

    if ctx.save_on_exit:
        save_catalog(ctx)
