"""CLI layer — argument parsing, subcommand handlers, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``utils`` and ``config``, but no other layer may import
from ``cli``.
"""
