"""
Process-wide terminal session.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from rich.console import Console
from rich.panel import Panel

logger = logging.getLogger(__name__)


@contextmanager
def terminal_session(console: Optional[Console] = None) -> Generator[Console, None, None]:
    """
    Acquire the terminal once for the whole shell run.

    The cursor is restored and the exit notice shown on every exit path,
    including errors raised by the shell.

    Usage:
        with terminal_session() as console:
            run_shell(ShellContext(console=console, ...))

    Yields:
        rich Console used for all shell output
    """
    console = console or Console()
    logger.debug("Terminal session started")
    try:
        yield console
    finally:
        console.show_cursor(True)
        console.print(Panel("Exiting Program...", title="WARNING", border_style="bold yellow", expand=False))
        logger.debug("Terminal session ended")
