"""Protocols (interfaces) consumed by the core layer.

These define the contracts that environments, machines and output
sinks must satisfy.  Core code depends ONLY on these protocols — never
on concrete implementations — so a production environment and an
ad hoc test double are interchangeable.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from boxctl.core.models import ActiveMachineEntry


class UI(Protocol):
    """Output sink for user-facing messages."""

    def info(self, message: str) -> None:
        ...  # pragma: no cover

    def warn(self, message: str) -> None:
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        ...  # pragma: no cover

    def success(self, message: str) -> None:
        ...  # pragma: no cover


class MachineHandle(Protocol):
    """A live machine object owned by the environment.

    The core only borrows handles for the duration of a single
    per-machine action.
    """

    @property
    def name(self) -> str:
        ...  # pragma: no cover

    @property
    def provider(self) -> str:
        ...  # pragma: no cover

    @property
    def ui(self) -> UI:
        ...  # pragma: no cover


class Environment(Protocol):
    """The capability set target resolution needs from a project.

    Implementations may report names and providers as any hashable
    token; the resolver normalises them before comparing.
    """

    @property
    def root_path(self) -> Path | None:
        """Project root, or ``None`` outside a recognised project."""
        ...  # pragma: no cover

    @property
    def active_machines(self) -> Sequence[ActiveMachineEntry | tuple[object, object]]:
        """Machines currently instantiated, as ``(name, provider)`` pairs."""
        ...  # pragma: no cover

    @property
    def machine_names(self) -> Sequence[object]:
        """Every defined machine name, in definition order."""
        ...  # pragma: no cover

    @property
    def default_provider(self) -> object:
        ...  # pragma: no cover

    @property
    def primary_machine_name(self) -> object | None:
        ...  # pragma: no cover

    def machine(self, name: str, provider: str) -> MachineHandle | None:
        """Return the handle for *name* under *provider*, or ``None``."""
        ...  # pragma: no cover
