"""Domain models for boxctl.

All models are **frozen** dataclasses — immutable value objects created
fresh for one CLI invocation and discarded afterwards.  Machine names
and provider identifiers are always stored in the canonical form
produced by :func:`normalize_identifier`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


def normalize_identifier(value: object) -> str:
    """Return the canonical string form of a machine or provider identifier.

    Enum members contribute their ``value``; everything else goes
    through ``str``.  Callers may therefore mix plain strings, enums
    and other hashable tokens without breaking equality checks.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


# ---------------------------------------------------------------------------
# Machine identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MachineRef:
    """Identifies one machine under one provider."""

    name: str
    """Machine name, unique within an environment."""

    provider: str
    """Backend identifier (e.g. ``virtualbox``)."""

    @classmethod
    def of(cls, name: object, provider: object) -> MachineRef:
        return cls(normalize_identifier(name), normalize_identifier(provider))

    def __str__(self) -> str:
        return f"{self.name} ({self.provider})"


@dataclass(frozen=True, slots=True)
class ActiveMachineEntry:
    """A machine currently instantiated under a specific provider."""

    name: str
    provider: str

    @classmethod
    def coerce(cls, entry: ActiveMachineEntry | tuple[object, object]) -> ActiveMachineEntry:
        """Accept an entry or a raw ``(name, provider)`` pair, normalised."""
        if isinstance(entry, cls):
            name, provider = entry.name, entry.provider
        else:
            name, provider = entry
        return cls(normalize_identifier(name), normalize_identifier(provider))


# ---------------------------------------------------------------------------
# Resolution options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolutionOptions:
    """Knobs controlling which machines a subcommand targets."""

    provider: str | None = None
    """Force resolution to this provider."""

    single_target: bool = False
    """Resolve only the primary machine when no name is given."""

    reverse: bool = False
    """Yield candidates in reverse order."""

    @property
    def requested_provider(self) -> str | None:
        if self.provider is None:
            return None
        return normalize_identifier(self.provider)


# ---------------------------------------------------------------------------
# Argument splitting result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """A raw argument vector split into its three positional parts.

    Iterating yields ``main_args``, ``subcommand`` and
    ``subcommand_args`` so the result unpacks like a 3-tuple.
    """

    main_args: tuple[str, ...]
    subcommand: str | None
    subcommand_args: tuple[str, ...]

    def __iter__(self) -> Iterator[object]:
        yield list(self.main_args)
        yield self.subcommand
        yield list(self.subcommand_args)
