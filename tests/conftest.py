"""Shared pytest fixtures and configuration for the boxctl test suite.

Guidelines
----------
* No real providers — machines are in-memory or mocked.
* Core tests must be pure — no side effects.
* Tests must not depend on ``BOXCTL_*`` variables from the host.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from boxctl.core.environment import SilentUI


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Drop host ``BOXCTL_*`` variables and any stray ``.env`` file."""
    for key in list(os.environ):
        if key.upper().startswith("BOXCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def default_provider() -> str:
    return "virtualbox"


@pytest.fixture
def environment(default_provider: str) -> MagicMock:
    """A mock environment rooted in a project with no active machines."""
    env = MagicMock(name="environment")
    env.active_machines = []
    env.default_provider = default_provider
    env.root_path = "foo"
    env.machine_names = []
    env.primary_machine_name = None
    return env


@pytest.fixture
def make_vm() -> Callable[[str, str], MagicMock]:
    """Factory for mock machine handles."""

    def _make(name: str, provider: str) -> MagicMock:
        vm = MagicMock(name=f"vm:{name}")
        vm.name = name
        vm.provider = provider
        vm.ui = SilentUI()
        return vm

    return _make
