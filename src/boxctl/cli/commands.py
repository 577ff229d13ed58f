"""Built-in subcommands and the registry the dispatcher consults.

Each command lives in the CLI layer and only composes helpers from
:class:`~boxctl.cli.command.Command`; resolution and arithmetic are
delegated to ``core`` and ``utils``.
"""

from __future__ import annotations

import logging

from rich.table import Table

from boxctl.cli import exit_codes
from boxctl.cli.command import Command
from boxctl.cli.console import ConsoleUI
from boxctl.core.protocols import MachineHandle
from boxctl.exceptions import CLIInvalidUsage
from boxctl.utils.network_ip import network_address

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------

class StatusCommand(Command):
    """List the machines a command would target and their providers."""

    name = "status"
    synopsis = "show the target machines and the provider each resolves to"

    def execute(self) -> int:
        options: dict[str, str] = {}
        parser = self.option_parser()
        parser.usage = "boxctl status [NAME...] [--provider PROVIDER]"
        parser.on(
            "--provider",
            metavar="PROVIDER",
            takes_value=True,
            help="Resolve machines under this provider.",
            callback=lambda value: options.update(provider=value),
        )

        argv = self.parse_options(parser)
        if argv is None:
            return exit_codes.SUCCESS

        rows: list[tuple[str, str]] = []

        def _collect(machine: MachineHandle) -> None:
            rows.append((machine.name, machine.provider))

        self.with_target_vms(
            _collect,
            argv or None,
            provider=options.get("provider"),
        )
        self._render(rows)
        return exit_codes.SUCCESS

    def _render(self, rows: list[tuple[str, str]]) -> None:
        if isinstance(self.ui, ConsoleUI):
            table = Table(
                title="Target machines",
                show_header=True,
                header_style="bold cyan",
                border_style="dim",
            )
            table.add_column("Machine", style="bold", min_width=12)
            table.add_column("Provider", min_width=12)
            for name, provider in rows:
                table.add_row(name, provider)
            self.ui.out.print(table)
            return

        self.ui.info("Target machines:")
        for name, provider in rows:
            self.ui.info(f"{name:<24} ({provider})")


# ---------------------------------------------------------------------------
# network-address
# ---------------------------------------------------------------------------

class NetworkAddressCommand(Command):
    """Print the network address for an IPv4 address and mask."""

    name = "network-address"
    synopsis = "compute the network address of IP under MASK"

    def execute(self) -> int:
        parser = self.option_parser()
        parser.usage = "boxctl network-address IP MASK"

        argv = self.parse_options(parser)
        if argv is None:
            return exit_codes.SUCCESS
        if len(argv) != 2:
            raise CLIInvalidUsage(parser.format_help())

        ip, mask = argv
        logger.debug("Computing network address of %s/%s", ip, mask)
        self.ui.info(network_address(ip, mask))
        return exit_codes.SUCCESS


COMMANDS: dict[str, type[Command]] = {
    StatusCommand.name: StatusCommand,
    NetworkAddressCommand.name: NetworkAddressCommand,
}
"""Subcommand name -> handler class."""
