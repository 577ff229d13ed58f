"""Allow ``python -m boxctl`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m boxctl`` behaves identically to the ``boxctl``
console script.
"""

from __future__ import annotations

from boxctl.cli.app import cli

if __name__ == "__main__":
    cli()
