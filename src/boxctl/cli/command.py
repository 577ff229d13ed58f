"""Base class for subcommand handlers.

A concrete subcommand subclasses :class:`Command`, declares its
``name``/``synopsis``, and implements :meth:`Command.execute` using the
helpers provided here:

* :meth:`Command.parse_options` — parse ``self.argv`` with a
  :class:`~boxctl.cli.options.CommandOptionParser`;
* :meth:`Command.with_target_vms` / :meth:`Command.target_vms` —
  resolve the machines to act on;
* :meth:`Command.split_main_and_subcommand` — used by the dispatcher
  (and by commands with nested subcommands).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import ClassVar

from boxctl.cli.console import ConsoleUI
from boxctl.cli.options import CommandOptionParser, parse_options
from boxctl.core.arg_splitter import split_main_and_subcommand
from boxctl.core.models import ParsedInvocation, ResolutionOptions
from boxctl.core.protocols import UI, Environment, MachineHandle
from boxctl.core.target_resolver import Names, TargetResolver


class Command(ABC):
    """One subcommand invocation.

    Parameters
    ----------
    argv:
        Arguments that followed the subcommand name.
    env:
        The environment to resolve machines against, or ``None``.
    ui:
        Output sink; defaults to a Rich-backed :class:`ConsoleUI`.
    """

    name: ClassVar[str] = ""
    synopsis: ClassVar[str] = ""

    def __init__(
        self,
        argv: Sequence[str] | None,
        env: Environment | None,
        ui: UI | None = None,
    ) -> None:
        self.argv: list[str] = list(argv or [])
        self.env: Environment | None = env
        self.ui: UI = ui or ConsoleUI()

    @abstractmethod
    def execute(self) -> int:
        """Run the subcommand and return a process exit code."""

    def parse_options(self, parser: CommandOptionParser | None = None) -> list[str] | None:
        """Parse ``self.argv``; ``None`` means help was shown."""
        return parse_options(parser, self.argv, self.ui)

    def with_target_vms(
        self,
        action: Callable[[MachineHandle], object],
        names: Names = None,
        *,
        provider: str | None = None,
        single_target: bool = False,
        reverse: bool = False,
    ) -> None:
        """Call *action* for every target machine, in order."""
        options = ResolutionOptions(
            provider=provider,
            single_target=single_target,
            reverse=reverse,
        )
        TargetResolver(self.env).with_target_vms(action, names, options)

    def target_vms(
        self,
        names: Names = None,
        *,
        provider: str | None = None,
        single_target: bool = False,
        reverse: bool = False,
    ) -> Iterator[MachineHandle]:
        """Lazy form of :meth:`with_target_vms`."""
        options = ResolutionOptions(
            provider=provider,
            single_target=single_target,
            reverse=reverse,
        )
        return TargetResolver(self.env).iter_target_vms(names, options)

    @staticmethod
    def split_main_and_subcommand(args: Sequence[str]) -> ParsedInvocation:
        return split_main_and_subcommand(args)

    def option_parser(self, description: str | None = None) -> CommandOptionParser:
        """Return a parser whose usage line names this subcommand."""
        return CommandOptionParser(
            prog=f"boxctl {self.name}".rstrip(),
            description=description or self.synopsis or None,
        )
