"""Resolve which machines a subcommand invocation targets.

Given an optional machine name (or names) and
:class:`~boxctl.core.models.ResolutionOptions`, the resolver consults an
:class:`~boxctl.core.protocols.Environment` and produces machine
handles one at a time, in candidate order.

Provider precedence per candidate
---------------------------------
1. An explicitly requested provider, unless the machine is already
   active under a different one (that is an error).
2. The provider the machine is currently active under.
3. The environment's default provider.

Guarantees
----------
* The environment is only read, never mutated.
* Candidate *i+1* is not resolved until the consumer is done with
  candidate *i*.
* Only :class:`~boxctl.exceptions.BoxctlError` subclasses are raised.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Sequence

from boxctl.core.models import ActiveMachineEntry, ResolutionOptions, normalize_identifier
from boxctl.core.protocols import Environment, MachineHandle
from boxctl.exceptions import (
    ActiveMachineWithDifferentProvider,
    NoEnvironmentError,
    VMNotFoundError,
)

logger = logging.getLogger(__name__)

Names = str | Sequence[object] | None


def _as_pattern(name: str) -> re.Pattern[str] | None:
    """Return a compiled regex for ``/pattern/`` names, else ``None``."""
    if len(name) > 2 and name.startswith("/") and name.endswith("/"):
        try:
            return re.compile(name[1:-1])
        except re.error as exc:
            raise VMNotFoundError(name) from exc
    return None


class TargetResolver:
    """Turns a target request into an ordered stream of machine handles.

    Parameters
    ----------
    environment:
        Any object satisfying the :class:`Environment` protocol, or
        ``None`` when the invocation has no environment at all.
    """

    def __init__(self, environment: Environment | None) -> None:
        self._environment: Environment | None = environment

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def with_target_vms(
        self,
        action: Callable[[MachineHandle], object],
        names: Names = None,
        options: ResolutionOptions | None = None,
    ) -> None:
        """Invoke *action* once per resolved machine, in order.

        The return value of *action* is ignored.

        Raises
        ------
        NoEnvironmentError
            If the environment has no root path.
        VMNotFoundError
            If a candidate has no machine under its resolved provider.
        ActiveMachineWithDifferentProvider
            If an explicit provider conflicts with an active machine.
        """
        for machine in self.iter_target_vms(names, options):
            action(machine)

    def iter_target_vms(
        self,
        names: Names = None,
        options: ResolutionOptions | None = None,
    ) -> Iterator[MachineHandle]:
        """Return a lazy iterator over the target machine handles.

        The root-path check and the candidate list are evaluated
        immediately; each handle is resolved only when requested.
        """
        options = options or ResolutionOptions()
        environment = self._require_environment()
        candidates = self.candidate_names(names, options)
        logger.debug("Target candidates: %s", ", ".join(candidates) or "(none)")
        return self._resolve_each(environment, candidates, options)

    # ------------------------------------------------------------------
    # Candidate selection
    # ------------------------------------------------------------------

    def candidate_names(
        self,
        names: Names,
        options: ResolutionOptions,
    ) -> list[str]:
        """Return the ordered list of machine names to resolve."""
        environment = self._require_environment()

        if names is not None:
            candidates = self._expand_names(environment, names)
        elif options.single_target:
            primary = environment.primary_machine_name
            if primary is None:
                raise VMNotFoundError(None)
            candidates = [normalize_identifier(primary)]
        else:
            candidates = [normalize_identifier(name) for name in environment.machine_names]

        if options.reverse:
            candidates.reverse()
        return candidates

    @staticmethod
    def _expand_names(environment: Environment, names: str | Sequence[object]) -> list[str]:
        """Normalise explicit names, expanding ``/regex/`` patterns."""
        requested = [names] if isinstance(names, str) else list(names)

        expanded: list[str] = []
        for raw in requested:
            name = normalize_identifier(raw)
            pattern = _as_pattern(name)
            if pattern is None:
                expanded.append(name)
                continue
            matches = [
                candidate
                for candidate in map(normalize_identifier, environment.machine_names)
                if pattern.search(candidate)
            ]
            if not matches:
                raise VMNotFoundError(name)
            expanded.extend(matches)

        # First occurrence wins.
        return list(dict.fromkeys(expanded))

    # ------------------------------------------------------------------
    # Per-candidate resolution
    # ------------------------------------------------------------------

    def _resolve_each(
        self,
        environment: Environment,
        candidates: list[str],
        options: ResolutionOptions,
    ) -> Iterator[MachineHandle]:
        for name in candidates:
            yield self._resolve(environment, name, options)

    def _resolve(
        self,
        environment: Environment,
        name: str,
        options: ResolutionOptions,
    ) -> MachineHandle:
        provider = self.resolve_provider(name, options)
        machine = environment.machine(name, provider)
        if machine is None:
            raise VMNotFoundError(name)
        logger.debug("Resolved machine %s with provider %s", name, provider)
        return machine

    def resolve_provider(self, name: str, options: ResolutionOptions) -> str:
        """Pick the provider *name* should be resolved under."""
        environment = self._require_environment()
        active = self.active_provider(name)
        requested = options.requested_provider

        if requested is not None:
            if active is not None and active != requested:
                raise ActiveMachineWithDifferentProvider(name, active, requested)
            return requested
        if active is not None:
            return active
        return normalize_identifier(environment.default_provider)

    def active_provider(self, name: str) -> str | None:
        """Return the provider *name* is active under, if any."""
        environment = self._require_environment()
        for raw in environment.active_machines:
            entry = ActiveMachineEntry.coerce(raw)
            if entry.name == name:
                return entry.provider
        return None

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_environment(self) -> Environment:
        environment = self._environment
        if environment is None or environment.root_path is None:
            raise NoEnvironmentError()
        return environment
