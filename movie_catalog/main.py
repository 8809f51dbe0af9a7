"""
Entry point for the movie catalog shell.

Usage:
    python -m movie_catalog
    MOVIE_CATALOG_FILE=~/films.txt movie-catalog
"""

import logging
from typing import Optional, TextIO

from rich.console import Console

from movie_catalog.config import (
    get_data_file,
    get_initial_capacity,
    get_log_dir,
    get_log_file,
    get_log_level,
    get_max_capacity,
)
from movie_catalog.errors import OutOfMemoryError, PersistenceError
from movie_catalog.storage import RecordStore, load_movies
from movie_catalog.ui import ShellContext, run_shell, terminal_session
from movie_catalog.ui.components import show_popup
from movie_catalog.utils.logging_config import configure_shell_logging

logger = logging.getLogger(__name__)


def main(stream: Optional[TextIO] = None, console: Optional[Console] = None) -> int:
    """
    Load the catalog, run the shell and save on exit.

    Args:
        stream: Input stream to read answers from (default: the terminal)
        console: Console to draw on (default: a new terminal console)

    Returns:
        0 on normal exit, 1 if the record store cannot be allocated
    """
    configure_shell_logging(level=get_log_level(), log_file=get_log_file(), log_dir=get_log_dir())

    try:
        store = RecordStore(capacity=get_initial_capacity(), max_capacity=get_max_capacity())
    except (OutOfMemoryError, ValueError) as e:
        logger.error("Failed to allocate memory: %s", e)
        (console or Console(stderr=True)).print(f"[bold red]Failed to allocate memory.[/bold red] {e}")
        return 1

    data_file = get_data_file()
    with store, terminal_session(console) as term:
        ctx = ShellContext(console=term, store=store, data_file=data_file, stream=stream)
        try:
            load_movies(data_file, store)
        except (OutOfMemoryError, PersistenceError) as e:
            logger.error("Catalog only partly loaded: %s", e)
            ctx.save_on_exit = False
            show_popup(ctx, "Error", f"Catalog only partly loaded, it will not be saved on exit.\n{e}")
        run_shell(ctx)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
