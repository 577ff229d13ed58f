"""CLI application entry point and command routing for boxctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~boxctl.exceptions.BoxctlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* Global flags are split from the subcommand with
  :func:`~boxctl.core.arg_splitter.split_main_and_subcommand` before any
  command is instantiated; the subcommand only ever sees its own args.
* No business logic lives here — commands delegate to ``core``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.logging import RichHandler
from rich.markup import escape

from boxctl.cli import exit_codes
from boxctl.cli.commands import COMMANDS
from boxctl.cli.console import console
from boxctl.config import load_settings
from boxctl.core.arg_splitter import split_main_and_subcommand
from boxctl.core.environment import StaticEnvironment
from boxctl.core.protocols import UI, Environment
from boxctl.exceptions import BoxctlError, UnknownCommandError
from boxctl.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser for global flags (those before the subcommand)."""
    epilog_lines = ["commands:"]
    for name in sorted(COMMANDS):
        epilog_lines.append(f"  {name:<18} {COMMANDS[name].synopsis}")

    parser = argparse.ArgumentParser(
        prog="boxctl",
        usage="%(prog)s [-v] [-V] [-h] <command> [<args>]",
        description="Resolve and operate on named machines.",
        epilog="\n".join(epilog_lines),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    return parser


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging(verbosity: int, baseline: str = "WARNING") -> None:
    """Attach a Rich handler to the ``boxctl`` logger.

    Each ``-v`` lowers the baseline level by one step.
    """
    level = logging.getLevelName(baseline)
    level = max(logging.DEBUG, level - 10 * verbosity)

    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("boxctl")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    environment: Environment | None = None,
    ui: UI | None = None,
) -> int:
    """Run the boxctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environment:
        Environment to run against.  When ``None`` one is built from
        :class:`~boxctl.config.Settings`.
    ui:
        Output sink for the subcommand.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    invocation = split_main_and_subcommand(args)

    parser = _build_parser()
    global_args = parser.parse_args(list(invocation.main_args))

    if invocation.subcommand is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command_class = COMMANDS.get(invocation.subcommand)
    if command_class is None:
        raise UnknownCommandError(invocation.subcommand, COMMANDS)

    if environment is None:
        settings = load_settings()
        _configure_logging(global_args.verbose, settings.log_level)
        environment = StaticEnvironment.from_settings(settings)
    else:
        _configure_logging(global_args.verbose)

    logger.debug(
        "Dispatching '%s' with args %s",
        invocation.subcommand,
        list(invocation.subcommand_args),
    )
    command = command_class(invocation.subcommand_args, environment, ui)
    return command.execute()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BoxctlError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", highlight=False)
        sys.exit(exit_codes.for_exception(exc))
    except KeyboardInterrupt as exc:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.for_exception(exc))
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.for_exception(exc))
