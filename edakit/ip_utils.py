"""IPv4 addresses: parsing, formatting and integer conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FORMAT_ERROR = "Ip: wrong input format."
_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, order=True)
class IP:
    """An IPv4 address; ordering is lexicographic on its four bytes."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __post_init__(self) -> None:
        if not all(0 <= byte <= 255 for byte in self.octets):
            raise ValueError(_FORMAT_ERROR)

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    @classmethod
    def parse(cls, text: str) -> "IP":
        """Read an address such as "150.214.110.3" from the first word of text.

        Raises ValueError("Ip: wrong input format.") on malformed input.
        """
        words = text.split()
        spaced = words[0].replace(".", " ") if words else ""
        values = []
        pos = 0
        for _ in range(4):
            match = _INT.match(spaced, pos)
            if match is None:
                raise ValueError(_FORMAT_ERROR)
            values.append(int(match.group(1)))
            pos = match.end()
        return cls(*values)

    def __str__(self) -> str:
        return ".".join(str(byte) for byte in self.octets)


def ip_to_int(ip: IP) -> int:
    """The address as a 32 bit unsigned integer."""
    return (ip.a << 24) + (ip.b << 16) + (ip.c << 8) + ip.d