"""boxctl — command dispatch and target resolution for named machines.

Splits raw arguments into global flags and a subcommand, parses
subcommand options, and resolves which (machine, provider) pairs a
subcommand operates on.
"""

from boxctl.version import __version__

__all__: list[str] = ["__version__"]
