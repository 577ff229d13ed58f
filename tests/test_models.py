"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
identifier normalisation and unpacking behaviour.
"""

from __future__ import annotations

from enum import Enum

import pytest

from boxctl.core.models import (
    ActiveMachineEntry,
    MachineRef,
    ParsedInvocation,
    ResolutionOptions,
    normalize_identifier,
)


class _Provider(Enum):
    DOCKER = "docker"


# ---------------------------------------------------------------------------
# normalize_identifier
# ---------------------------------------------------------------------------

class TestNormalizeIdentifier:
    def test_string_passes_through(self) -> None:
        assert normalize_identifier("web") == "web"

    def test_enum_uses_value(self) -> None:
        assert normalize_identifier(_Provider.DOCKER) == "docker"

    def test_other_values_stringified(self) -> None:
        assert normalize_identifier(3) == "3"


# ---------------------------------------------------------------------------
# MachineRef / ActiveMachineEntry
# ---------------------------------------------------------------------------

class TestMachineRef:
    def test_of_normalises(self) -> None:
        assert MachineRef.of("web", _Provider.DOCKER) == MachineRef("web", "docker")

    def test_str(self) -> None:
        assert str(MachineRef("web", "docker")) == "web (docker)"

    def test_frozen(self) -> None:
        ref = MachineRef("web", "docker")
        with pytest.raises(AttributeError):
            ref.name = "db"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({MachineRef("a", "p"), MachineRef("a", "p")}) == 1


class TestActiveMachineEntry:
    def test_coerce_pair(self) -> None:
        assert ActiveMachineEntry.coerce(("web", _Provider.DOCKER)) == ActiveMachineEntry(
            "web", "docker",
        )

    def test_coerce_entry_keeps_plain_values(self) -> None:
        entry = ActiveMachineEntry("web", "docker")
        assert ActiveMachineEntry.coerce(entry) == entry

    def test_coerce_entry_normalises_enum_provider(self) -> None:
        entry = ActiveMachineEntry("web", _Provider.DOCKER)  # type: ignore[arg-type]
        assert ActiveMachineEntry.coerce(entry).provider == "docker"


# ---------------------------------------------------------------------------
# ResolutionOptions
# ---------------------------------------------------------------------------

class TestResolutionOptions:
    def test_defaults(self) -> None:
        options = ResolutionOptions()
        assert options.provider is None
        assert options.single_target is False
        assert options.reverse is False
        assert options.requested_provider is None

    def test_requested_provider_normalised(self) -> None:
        assert ResolutionOptions(provider=_Provider.DOCKER).requested_provider == "docker"  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# ParsedInvocation
# ---------------------------------------------------------------------------

class TestParsedInvocation:
    def test_unpacks_as_lists(self) -> None:
        main_args, subcommand, subcommand_args = ParsedInvocation(("-v",), "up", ("web",))
        assert main_args == ["-v"]
        assert subcommand == "up"
        assert subcommand_args == ["web"]

    def test_frozen(self) -> None:
        invocation = ParsedInvocation((), None, ())
        with pytest.raises(AttributeError):
            invocation.subcommand = "up"  # type: ignore[misc]
