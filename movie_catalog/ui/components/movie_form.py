"""
Movie details form component.
"""

from typing import Optional, Tuple

from rich.markup import escape

from movie_catalog.models import MIN_YEAR, Movie
from movie_catalog.ui.utils.session_state import ShellContext


def _ask_text(ctx: ShellContext, label: str, default: Optional[str]) -> str:
    while True:
        if default is not None:
            value = ctx.ask(f"Enter movie {label}", default=default)
        else:
            value = ctx.ask(f"Enter movie {label}")
        value = value.strip()
        if value:
            return value
        ctx.console.print(f"[red]Error: {label.capitalize()} cannot be blank.[/red]")


def _ask_year(ctx: ShellContext, default: Optional[int]) -> int:
    while True:
        if default is not None:
            value = ctx.ask("Enter movie year", default=str(default))
        else:
            value = ctx.ask("Enter movie year")
        try:
            year = int(value.strip())
        except ValueError:
            year = None
        if year is not None and MIN_YEAR < year <= ctx.current_year:
            return year
        ctx.console.print(
            f"[red]Error: Please enter a valid year (after {MIN_YEAR}, "
            f"not after {ctx.current_year}).[/red]"
        )


def prompt_movie_details(ctx: ShellContext, initial: Optional[Movie] = None) -> Tuple[str, str, int]:
    """
    Ask for a movie's title, director and year.

    Each field is asked again until it is valid. When editing, the current
    values are offered as defaults.

    Args:
        ctx: Shell context
        initial: Movie being edited, None for a new movie

    Returns:
        (title, director, year)
    """
    if initial is not None:
        ctx.console.print(f"[bold]Editing[/bold] {escape(initial.title)}")

    title = _ask_text(ctx, "title", initial.title if initial else None)
    director = _ask_text(ctx, "director", initial.director if initial else None)
    year = _ask_year(ctx, initial.year if initial else None)
    return title, director, year
