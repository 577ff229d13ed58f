"""Process exit statuses returned by the ``boxctl`` executable.

:func:`~boxctl.cli.app.main` returns :data:`SUCCESS` for a completed
subcommand, including one that only printed its help text.  Every other
status is chosen by :func:`for_exception` at the error boundary in
:func:`~boxctl.cli.app.cli`.
"""

from __future__ import annotations

from boxctl.exceptions import BoxctlError

SUCCESS: int = 0
"""Subcommand finished, or ``-h``/``--help`` printed usage and stopped."""

GENERAL_ERROR: int = 1
"""Resolution or parsing failed: unknown VM, bad option, no environment."""

UNEXPECTED_ERROR: int = 2
"""Anything that is not a :class:`BoxctlError`; reported as a bug."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted while targeting machines (128 + SIGINT)."""


def for_exception(exc: BaseException) -> int:
    """Map an exception escaping :func:`~boxctl.cli.app.main` to a status."""
    if isinstance(exc, BoxctlError):
        return GENERAL_ERROR
    if isinstance(exc, KeyboardInterrupt):
        return KEYBOARD_INTERRUPT
    return UNEXPECTED_ERROR
