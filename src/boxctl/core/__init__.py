"""Core layer — argument splitting, data model and target resolution.

Rules
-----
* No ``print()`` calls; output goes through a :class:`UI` sink.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from boxctl.core.arg_splitter import split_main_and_subcommand
from boxctl.core.environment import Machine, SilentUI, StaticEnvironment
from boxctl.core.models import (
    ActiveMachineEntry,
    MachineRef,
    ParsedInvocation,
    ResolutionOptions,
    normalize_identifier,
)
from boxctl.core.protocols import UI, Environment, MachineHandle
from boxctl.core.target_resolver import TargetResolver

__all__: list[str] = [
    "ActiveMachineEntry",
    "Environment",
    "Machine",
    "MachineHandle",
    "MachineRef",
    "ParsedInvocation",
    "ResolutionOptions",
    "SilentUI",
    "StaticEnvironment",
    "TargetResolver",
    "UI",
    "normalize_identifier",
    "split_main_and_subcommand",
]
