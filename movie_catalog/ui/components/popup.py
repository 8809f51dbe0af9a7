"""
Pop-up dialog component.
"""

from rich.panel import Panel
from rich.text import Text

from movie_catalog.ui.utils.session_state import ShellContext

POPUP_STYLES = {
    "INFO": "bold cyan",
    "WARNING": "bold yellow",
    "ERROR": "bold red",
}


def show_popup(ctx: ShellContext, title: str, message: str) -> None:
    """
    Show a boxed message.

    Args:
        ctx: Shell context
        title: Dialog title; INFO, WARNING and ERROR get their own colours
        message: Message body
    """
    style = POPUP_STYLES.get(title.upper(), "bold white")
    ctx.console.print(
        Panel(Text(message.strip()), title=title.upper(), border_style=style, expand=False)
    )
