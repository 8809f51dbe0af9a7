"""
Movie list table component.
"""

from typing import Iterable

from rich.table import Table
from rich.text import Text

from movie_catalog.models import Movie


def format_rating(movie: Movie) -> str:
    return f"{movie.rating:.1f}/5"


def render_movie_table(movies: Iterable[Movie], title: str = "MOVIE LIST", start: int = 1) -> Table:
    """
    Build the movie list table.

    Args:
        movies: Records to show, in display order
        title: Table title
        start: Number shown for the first row

    Returns:
        rich Table ready to print
    """
    table = Table(title=title, header_style="bold yellow")
    table.add_column("No", justify="right", style="cyan")
    table.add_column("Title", style="cyan")
    table.add_column("Director", style="cyan")
    table.add_column("Year", justify="right")
    table.add_column("Rating", justify="right", style="magenta")

    for number, movie in enumerate(movies, start=start):
        table.add_row(
            str(number),
            Text(movie.title),
            Text(movie.director),
            str(movie.year),
            format_rating(movie),
        )
    return table
