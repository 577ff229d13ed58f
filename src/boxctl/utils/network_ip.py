"""IPv4 network-address arithmetic.

Every function here is pure: no I/O and no state.
"""

from __future__ import annotations

from boxctl.exceptions import InvalidFormat

Octets = tuple[int, int, int, int]


def parse_octets(address: object) -> Octets:
    """Parse a dotted-quad string into four integer octets.

    Raises
    ------
    InvalidFormat
        If *address* is not a string of four decimal octets in 0-255.
    """
    if not isinstance(address, str):
        raise InvalidFormat(address)
    parts = address.strip().split(".")
    if len(parts) != 4:
        raise InvalidFormat(address)
    octets: list[int] = []
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise InvalidFormat(address)
        value = int(part)
        if value > 255:
            raise InvalidFormat(address)
        octets.append(value)
    return octets[0], octets[1], octets[2], octets[3]


def network_address(ip: str, mask: str) -> str:
    """Return the network address of *ip* under *mask*.

    Each octet of the result is ``ip_octet & mask_octet``.

    >>> network_address("192.168.2.234", "255.255.255.0")
    '192.168.2.0'
    """
    ip_octets = parse_octets(ip)
    mask_octets = parse_octets(mask)
    return ".".join(str(a & b) for a, b in zip(ip_octets, mask_octets))
