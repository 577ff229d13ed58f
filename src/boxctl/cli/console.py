"""Rich-backed output sinks for the CLI layer.

``console`` renders diagnostics on stderr; :class:`ConsoleUI` is the
:class:`~boxctl.core.protocols.UI` handed to commands and machines.
Command output (help text, tables) goes to stdout.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)
"""Shared stderr console used by the error boundary."""


class ConsoleUI:
    """Plain-message :class:`UI` rendered through Rich.

    Messages are escaped, so square brackets in help text or machine
    names are printed literally rather than parsed as markup.
    """

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out: Console = out or Console()
        self.err: Console = err or console

    def info(self, message: str) -> None:
        self.out.print(escape(message), highlight=False)

    def success(self, message: str) -> None:
        self.out.print(f"[green]{escape(message)}[/green]", highlight=False)

    def warn(self, message: str) -> None:
        self.err.print(f"[yellow]{escape(message)}[/yellow]", highlight=False)

    def error(self, message: str) -> None:
        self.err.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)
