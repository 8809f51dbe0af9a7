"""
Shell session state.

One ShellContext is built at startup and handed to every page and component,
so no terminal state lives at module level.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.prompt import Prompt

from movie_catalog.storage import RecordStore


class _EOFStream:
    """Input stream wrapper that reads lines the way input() does.

    The newline is dropped, so a blank answer selects a prompt's default,
    and EOFError is raised once the stream is exhausted.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError("input stream exhausted")
        return line.rstrip("\r\n")


@dataclass
class ShellContext:
    """Everything a shell page needs: output, input, catalog and file."""

    console: Console
    store: RecordStore
    data_file: str
    stream: Optional[TextIO] = None
    dirty: bool = False
    save_on_exit: bool = True
    current_year: int = field(default_factory=lambda: datetime.date.today().year)

    def __post_init__(self) -> None:
        if self.stream is not None and not isinstance(self.stream, _EOFStream):
            self.stream = _EOFStream(self.stream)

    def ask(self, prompt: str, **kwargs: Any) -> str:
        """Prompt for one line of input; raises EOFError when input ends."""
        return Prompt.ask(prompt, console=self.console, stream=self.stream, **kwargs)

    def mark_changed(self) -> None:
        self.dirty = True

    def mark_saved(self) -> None:
        self.dirty = False
