"""Shared utilities — small pure helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from boxctl.utils.network_ip import network_address

__all__: list[str] = ["network_address"]
