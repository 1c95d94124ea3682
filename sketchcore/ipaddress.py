"""A mutable IPv4 address of four octets."""

from __future__ import annotations

__all__ = ["IPAddress", "INADDR_NONE"]


class IPAddress:
    """IPv4 address stored as four octets.

    Construct with no arguments (0.0.0.0), four octets, a 32-bit integer in
    the target's little-endian layout, four or more bytes, or another
    address.
    """

    __slots__ = ("_bytes",)

    def __init__(self, *args) -> None:
        if not args:
            self._bytes = bytearray(4)
        elif len(args) == 4:
            self._bytes = bytearray(args)
        elif len(args) == 1:
            arg = args[0]
            if isinstance(arg, IPAddress):
                self._bytes = bytearray(arg._bytes)
            elif isinstance(arg, int):
                self._bytes = bytearray((arg & 0xFFFFFFFF).to_bytes(4, "little"))
            else:
                data = bytes(arg)
                if len(data) < 4:
                    raise ValueError("an address needs four bytes")
                self._bytes = bytearray(data[:4])
        else:
            raise TypeError(f"IPAddress takes 0, 1 or 4 arguments, got {len(args)}")

    @classmethod
    def from_string(cls, text: str) -> IPAddress:
        """Parse dotted-quad notation; raises ValueError on malformed input."""
        octets = []
        acc = -1
        for c in text:
            if c in "0123456789":
                acc = int(c) if acc < 0 else acc * 10 + int(c)
                if acc > 255:
                    raise ValueError(f"octet out of range in {text!r}")
            elif c == ".":
                if len(octets) == 3:
                    raise ValueError(f"too many dots in {text!r}")
                if acc < 0:
                    raise ValueError(f"empty octet in {text!r}")
                octets.append(acc)
                acc = -1
            else:
                raise ValueError(f"invalid character {c!r} in {text!r}")
        if len(octets) != 3:
            raise ValueError(f"too few dots in {text!r}")
        if acc < 0:
            raise ValueError(f"empty octet in {text!r}")
        octets.append(acc)
        return cls(*octets)

    def __int__(self) -> int:
        return int.from_bytes(self._bytes, "little")

    def __eq__(self, other) -> bool:
        if isinstance(other, IPAddress):
            return self._bytes == other._bytes
        if isinstance(other, int):
            return int(self) == other
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(other[:4]) == bytes(self._bytes)
        return NotImplemented

    __hash__ = None  # mutable

    def __getitem__(self, index: int) -> int:
        return self._bytes[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._bytes[index] = value

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def print_to(self, p) -> int:
        """Print the dotted form through ``p`` and return the count written."""
        n = 0
        for octet in self._bytes[:3]:
            n += p.print(octet, 10)
            n += p.print(".")
        n += p.print(self._bytes[3], 10)
        return n

    def __str__(self) -> str:
        return ".".join(str(b) for b in self._bytes)

    def __repr__(self) -> str:
        return f"IPAddress({str(self)!r})"


INADDR_NONE = IPAddress(0, 0, 0, 0)