"""In-memory :class:`~boxctl.core.protocols.Environment` implementation.

Holds the machine definitions for one invocation as plain data.  It is
the variant the dispatcher builds from :class:`~boxctl.config.Settings`
and the one tests use when they need a real environment rather than a
mock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from boxctl.core.models import ActiveMachineEntry, MachineRef, normalize_identifier
from boxctl.core.protocols import UI
from boxctl.exceptions import ConfigurationError

if TYPE_CHECKING:
    from boxctl.config import Settings


class SilentUI:
    """A :class:`UI` that discards every message."""

    def info(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass


@dataclass(frozen=True, slots=True)
class Machine:
    """A machine handle: a name bound to a provider and an output sink."""

    name: str
    provider: str
    ui: UI = field(default_factory=SilentUI, compare=False, repr=False)


class StaticEnvironment:
    """Environment backed by an explicit list of machine definitions.

    Parameters
    ----------
    root_path:
        Project root.  ``None`` means "not inside a project".
    machine_names:
        Defined machine names, in definition order.
    default_provider:
        Provider used for machines that are not active.
    active_machines:
        ``(name, provider)`` pairs for machines already instantiated.
    primary:
        Explicit primary machine name.
    ui:
        Output sink handed to every machine handle.
    """

    def __init__(
        self,
        root_path: Path | str | None,
        machine_names: Iterable[object],
        default_provider: object,
        active_machines: Iterable[ActiveMachineEntry | tuple[object, object]] = (),
        primary: object | None = None,
        ui: UI | None = None,
    ) -> None:
        self._root_path: Path | None = Path(root_path) if root_path is not None else None
        self._machine_names: tuple[str, ...] = tuple(
            dict.fromkeys(normalize_identifier(name) for name in machine_names)
        )
        self._default_provider: str = normalize_identifier(default_provider)
        self._active: tuple[ActiveMachineEntry, ...] = self._validate_active(active_machines)
        self._primary: str | None = (
            normalize_identifier(primary) if primary is not None else None
        )
        self._ui: UI = ui or SilentUI()
        self._machines: dict[MachineRef, Machine] = {}

    @classmethod
    def from_settings(cls, settings: Settings, ui: UI | None = None) -> StaticEnvironment:
        """Build an environment from validated :class:`Settings`."""
        return cls(
            root_path=settings.project_root,
            machine_names=settings.machines,
            default_provider=settings.default_provider,
            active_machines=settings.active_machines.items(),
            primary=settings.primary_machine,
            ui=ui,
        )

    @staticmethod
    def _validate_active(
        entries: Iterable[ActiveMachineEntry | tuple[object, object]],
    ) -> tuple[ActiveMachineEntry, ...]:
        active = tuple(ActiveMachineEntry.coerce(entry) for entry in entries)
        seen: set[str] = set()
        for entry in active:
            if entry.name in seen:
                raise ConfigurationError(
                    f"Machine '{entry.name}' is listed as active more than once.",
                )
            seen.add(entry.name)
        return active

    # ------------------------------------------------------------------
    # Environment protocol
    # ------------------------------------------------------------------

    @property
    def root_path(self) -> Path | None:
        return self._root_path

    @property
    def active_machines(self) -> tuple[ActiveMachineEntry, ...]:
        return self._active

    @property
    def machine_names(self) -> tuple[str, ...]:
        return self._machine_names

    @property
    def default_provider(self) -> str:
        return self._default_provider

    @property
    def primary_machine_name(self) -> str | None:
        """The explicit primary, else the only machine when there is one."""
        if self._primary is not None:
            return self._primary
        if len(self._machine_names) == 1:
            return self._machine_names[0]
        return None

    def machine(self, name: str, provider: str) -> Machine | None:
        """Return a cached handle for *name* under *provider*.

        Names the environment does not define yield ``None``.
        """
        ref = MachineRef.of(name, provider)
        if ref.name not in self._machine_names:
            return None
        if ref not in self._machines:
            self._machines[ref] = Machine(ref.name, ref.provider, self._ui)
        return self._machines[ref]
