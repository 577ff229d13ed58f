"""Application settings.

Centralises environment-variable configuration (``BOXCTL_*``) via
pydantic-settings so that the CLI and the in-memory environment read
one validated contract.  Complex fields (``machines``,
``active_machines``) are given as JSON in the environment, e.g.::

    BOXCTL_MACHINES='["web", "db"]'
    BOXCTL_ACTIVE_MACHINES='{"web": "vmware"}'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from boxctl.exceptions import ConfigurationError

_LEVEL_NAMES: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Validated configuration for one boxctl invocation."""

    model_config = SettingsConfigDict(
        env_prefix="BOXCTL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    project_root: Path | None = Field(
        default=None,
        description="Project root directory. Unset means no project.",
    )
    machines: list[str] = Field(
        default_factory=lambda: ["default"],
        description="Defined machine names, in order.",
    )
    primary_machine: str | None = Field(
        default=None,
        description="Machine used by single-target commands.",
    )
    default_provider: str = Field(
        default="virtualbox",
        min_length=1,
        description="Provider for machines that are not active.",
    )
    active_machines: dict[str, str] = Field(
        default_factory=dict,
        description="Machines already running, as name -> provider.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Baseline log level before -v flags are applied.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level: {value}")
        return normalized


def load_settings(**overrides: Any) -> Settings:
    """Build :class:`Settings`, mapping validation failures to our errors.

    Raises
    ------
    ConfigurationError
        If any ``BOXCTL_*`` variable (or override) fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid boxctl configuration: {exc.error_count()} error(s).",
            hint=str(exc),
        ) from exc
