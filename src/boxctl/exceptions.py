"""Custom exception hierarchy for boxctl.

All exceptions that cross layer boundaries must inherit from
:class:`BoxctlError`.  Each carries enough context (machine name,
providers, offending value) for the CLI error boundary to render a
human-readable message.

Hierarchy
---------
BoxctlError
├── InvalidFormat
├── CLIInvalidOptions
├── CLIInvalidUsage
├── UnknownCommandError
├── NoEnvironmentError
├── VMNotFoundError
├── ActiveMachineWithDifferentProvider
└── ConfigurationError
"""

from __future__ import annotations

from collections.abc import Iterable


class BoxctlError(Exception):
    """Base exception for all boxctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Network utilities -----------------------------------------------------

class InvalidFormat(BoxctlError):
    """Raised when an IPv4 address or mask is not a valid dotted quad."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid IPv4 address format: {value!r}",
            hint="Expected four decimal octets between 0 and 255, e.g. 192.168.1.10",
        )
        self.value: object = value


# --- Command-line parsing --------------------------------------------------

class CLIInvalidOptions(BoxctlError):
    """Raised when the option parser rejects a token."""

    def __init__(self, message: str, help_text: str) -> None:
        super().__init__(
            f"An invalid option was specified: {message}",
            hint=help_text or None,
        )
        self.help_text: str = help_text


class CLIInvalidUsage(BoxctlError):
    """Raised when a subcommand receives the wrong positional arguments."""

    def __init__(self, help_text: str) -> None:
        super().__init__(
            "This command was not invoked properly.",
            hint=help_text or None,
        )
        self.help_text: str = help_text


class UnknownCommandError(BoxctlError):
    """Raised when the dispatcher has no handler for a subcommand."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.available: tuple[str, ...] = tuple(sorted(available))
        super().__init__(
            f"'{name}' is not a boxctl command.",
            hint="Available commands: " + ", ".join(self.available),
        )
        self.name: str = name


# --- Target resolution -----------------------------------------------------

class NoEnvironmentError(BoxctlError):
    """Raised when target resolution runs outside a project root."""

    def __init__(self) -> None:
        super().__init__(
            "A boxctl project root is required to run this command.",
            hint="Set BOXCTL_PROJECT_ROOT or run from inside a project.",
        )


class VMNotFoundError(BoxctlError):
    """Raised when a candidate resolves to no machine.

    ``name`` is ``None`` when single-target resolution found no primary
    machine to fall back on.
    """

    def __init__(self, name: str | None) -> None:
        if name is None:
            message = "No primary machine is defined for this environment."
            hint = "Name a machine explicitly or configure a primary machine."
        else:
            message = f"The machine with the name '{name}' was not found."
            hint = None
        super().__init__(message, hint=hint)
        self.name: str | None = name


class ActiveMachineWithDifferentProvider(BoxctlError):
    """Raised when an explicit provider conflicts with a running machine."""

    def __init__(
        self,
        name: str,
        active_provider: str,
        requested_provider: str,
    ) -> None:
        super().__init__(
            f"An active machine was found with a different provider. "
            f"'{name}' is running under '{active_provider}' but "
            f"'{requested_provider}' was requested.",
            hint=(
                f"Destroy '{name}' first, or run the command again with "
                f"--provider {active_provider}."
            ),
        )
        self.name: str = name
        self.active_provider: str = active_provider
        self.requested_provider: str = requested_provider


# --- Configuration ---------------------------------------------------------

class ConfigurationError(BoxctlError):
    """Raised when settings or environment data fail validation."""
