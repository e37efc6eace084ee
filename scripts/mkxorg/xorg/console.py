"""Colored warning and error lines on stderr."""

from typing import IO, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

THEME = Theme(
    {
        "warning": "bold yellow",
        "error": "bold red",
        "detail": "dim white",
    }
)


class Reporter:
    def __init__(self, color: bool = True, file: Optional[IO[str]] = None):
        self.console = Console(
            file=file,
            stderr=file is None,
            theme=THEME,
            no_color=not color,
            highlight=False,
            soft_wrap=True,
        )

    def warning(self, msg: str) -> None:
        self.console.print(f"[warning]warning:[/warning] {escape(msg)}")

    def error(self, msg: str) -> None:
        self.console.print(f"[error]error:[/error] {escape(msg)}")

    def detail(self, msg: str) -> None:
        self.console.print(f"  [detail]{escape(msg)}[/detail]")
