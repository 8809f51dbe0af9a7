"""
Interactive terminal shell for the movie catalog.
"""

from movie_catalog.ui.utils.session_state import ShellContext
from movie_catalog.ui.terminal import terminal_session
from movie_catalog.ui.app import run_shell, MenuOption

__all__ = [
    "ShellContext",
    "terminal_session",
    "run_shell",
    "MenuOption",
]
