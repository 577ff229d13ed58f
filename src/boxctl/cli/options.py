"""Subcommand option parsing on top of :mod:`argparse`.

:class:`CommandOptionParser` adapts ``argparse`` to the way subcommands
consume their arguments:

* help flags are handled by :func:`parse_options`, not by argparse;
* unknown or malformed options raise
  :class:`~boxctl.exceptions.CLIInvalidOptions` instead of exiting;
* whatever positional tokens remain are handed back, in order;
* flags may carry callbacks that run while parsing (:meth:`on`).
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

from boxctl.core.protocols import UI
from boxctl.exceptions import CLIInvalidOptions

HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})

_POSITIONAL_DEST = "_positional"


class _CallbackAction(argparse.Action):
    """Invoke a callback with the flag's value as soon as it is parsed."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        callback: Callable[[Any], object],
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.callback = callback

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        value = True if self.nargs == 0 else values
        setattr(namespace, self.dest, value)
        self.callback(value)


class CommandOptionParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports errors and passes positionals through."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("add_help", False)
        super().__init__(*args, **kwargs)
        self.add_argument(_POSITIONAL_DEST, nargs="*", help=argparse.SUPPRESS)

    def on(
        self,
        *flags: str,
        callback: Callable[[Any], object],
        help: str | None = None,
        metavar: str | None = None,
        takes_value: bool = False,
    ) -> argparse.Action:
        """Register *flags* with a callback run during parsing.

        The callback receives ``True`` for plain flags, or the option's
        value when *takes_value* is set.
        """
        return self.add_argument(
            *flags,
            action=_CallbackAction,
            callback=callback,
            nargs=None if takes_value else 0,
            metavar=metavar,
            help=help,
        )

    def remaining(self, args: Sequence[str]) -> list[str]:
        """Parse *args* and return the positional tokens left over.

        Everything after the first ``--`` is positional and passed
        through verbatim.
        """
        tokens = list(args)
        trailing: list[str] = []
        if "--" in tokens:
            index = tokens.index("--")
            tokens, trailing = tokens[:index], tokens[index + 1:]
        namespace = self.parse_intermixed_args(tokens)
        return list(getattr(namespace, _POSITIONAL_DEST) or []) + trailing

    def error(self, message: str) -> NoReturn:  # type: ignore[override]
        raise CLIInvalidOptions(message, self.format_help())


def parse_options(
    parser: CommandOptionParser | None,
    args: Sequence[str],
    ui: UI,
) -> list[str] | None:
    """Parse subcommand *args* with *parser*.

    Returns
    -------
    list[str] | None
        The remaining positional arguments, or ``None`` when a help
        flag was present and the help text was written to *ui*.  A
        ``None`` result means "stop, exit successfully".

    Raises
    ------
    CLIInvalidOptions
        If *parser* rejects an option.
    """
    if parser is None:
        parser = CommandOptionParser()

    if any(token in HELP_FLAGS for token in args):
        ui.info(parser.format_help())
        return None

    return parser.remaining(args)
