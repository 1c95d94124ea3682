"""Byte-oriented printing of text, integers and floats."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .arduino_string import ArduinoString

__all__ = ["DEC", "HEX", "OCT", "BIN", "Printable", "Print", "BytesPrint"]

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_LONG_MIN = -(1 << 31)
_ULONG_MAX = (1 << 32) - 1
_LLONG_MIN = -(1 << 63)
_ULLONG_MAX = (1 << 64) - 1
_FLOAT_LIMIT = 4294967040.0


def _number_text(n: int, base: int) -> str:
    """Render a non-negative integer with upper-case digits."""
    base &= 0xFF
    if base < 2:
        base = 10
    out = []
    while True:
        n, c = divmod(n, base)
        out.append(chr(ord("0") + c) if c < 10 else chr(ord("A") + c - 10))
        if not n:
            break
    return "".join(reversed(out))


class Printable(ABC):
    """An object that knows how to print itself through a :class:`Print`."""

    @abstractmethod
    def print_to(self, p: Print) -> int:
        """Print through ``p`` and return the number of bytes written."""


class Print(ABC):
    """Base class for byte sinks that can print values as text."""

    _write_error = 0

    @property
    def write_error(self) -> int:
        return self._write_error

    def _set_write_error(self, err: int = 1) -> None:
        self._write_error = err

    def clear_write_error(self) -> None:
        self._set_write_error(0)

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Write one byte; return 1 on success and 0 on failure."""

    def write(self, data) -> int:
        """Write a byte, text (UTF-8) or bytes; stop at the first failed byte."""
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, str):
            data = data.encode("utf-8")
        n = 0
        for b in bytes(data):
            if not self.write_byte(b):
                break
            n += 1
        return n

    def available_for_write(self) -> int:
        """Bytes writable without blocking; 0 means a write may block."""
        return 0

    def print(self, value, base: int | None = None) -> int:
        """Print ``value`` as text and return the number of bytes written.

        For integers ``base`` is the radix (default 10, 0 writes the low
        byte raw); for floats it is the number of decimals (default 2).
        """
        if isinstance(value, Printable):
            return value.print_to(self)
        if isinstance(value, (str, ArduinoString)):
            return self.write(str(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.write(value)
        if isinstance(value, float):
            return self._print_float(value, 2 if base is None else base)
        if isinstance(value, int):
            return self._print_int(int(value), DEC if base is None else base)
        if value is None:
            return 0
        print_to = getattr(value, "print_to", None)
        if callable(print_to):
            return print_to(self)
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value=None, base: int | None = None) -> int:
        """As :meth:`print`, followed by CR LF."""
        if value is None:
            return self.write("\r\n")
        n = self.print(value, base)
        return n + self.println()

    def printf(self, fmt: str, *args) -> int:
        """Write ``fmt % args`` and return the number of bytes written."""
        return self.write(fmt % args)

    def flush(self) -> None:
        """Wait for buffered output; nothing is buffered by default."""

    def _print_int(self, n: int, base: int) -> int:
        if not _LLONG_MIN <= n <= _ULLONG_MAX:
            raise OverflowError(f"{n} does not fit in 64 bits")
        wide = not _LONG_MIN <= n <= _ULONG_MAX
        mask = _ULLONG_MAX if wide else _ULONG_MAX
        if base == 0:
            return self.write_byte(n & 0xFF)
        if base == 10 and n < 0:
            t = self.print("-")
            return self.write(_number_text(-n, 10)) + t
        return self.write(_number_text(n & mask, base))

    def _print_float(self, number: float, digits: int) -> int:
        if digits < 0:
            digits = 2
        if math.isnan(number):
            return self.print("nan")
        if math.isinf(number):
            return self.print("inf")
        if number > _FLOAT_LIMIT or number < -_FLOAT_LIMIT:
            return self.print("ovf")

        n = 0
        if number < 0.0:
            n += self.print("-")
            number = -number

        rounding = 0.5
        for _ in range(digits):
            rounding /= 10.0
        number += rounding

        int_part = int(number)
        remainder = number - int_part
        n += self.print(int_part)

        if digits > 0:
            n += self.print(".")

        for _ in range(digits):
            remainder *= 10.0
            to_print = int(remainder)
            n += self.print(to_print)
            remainder -= to_print
        return n


class BytesPrint(Print):
    """A :class:`Print` that collects output in memory, optionally bounded."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit
        self._buffer = bytearray()

    def write_byte(self, value: int) -> int:
        if self.limit is not None and len(self._buffer) >= self.limit:
            self._set_write_error()
            return 0
        self._buffer.append(value & 0xFF)
        return 1

    def available_for_write(self) -> int:
        if self.limit is None:
            return 0
        return max(self.limit - len(self._buffer), 0)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)