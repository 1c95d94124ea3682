"""Non-standard number/string conversion helpers."""

from __future__ import annotations

import math
import sys

__all__ = [
    "ulltoa",
    "lltoa",
    "itoa",
    "ltoa",
    "utoa",
    "ultoa",
    "dtostrf",
    "strrstr",
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= len(_DIGITS):
        raise ValueError(f"radix must be between 2 and {len(_DIGITS)}, got {radix}")


def _to_int32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value & (1 << 31) else value


def _to_int64(value: int) -> int:
    value &= _U64
    return value - (1 << 64) if value & (1 << 63) else value


def _to_int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _digits(value: int, radix: int) -> str:
    """Render a non-negative integer in the given radix, lower-case letters."""
    out = []
    while True:
        value, mod = divmod(value, radix)
        out.append(_DIGITS[mod])
        if not value:
            break
    return "".join(reversed(out))


def ulltoa(val: int, slen: int, radix: int) -> str | None:
    """Format an unsigned 64-bit value into a buffer of ``slen`` bytes.

    The buffer includes the terminating NUL, so at most ``slen - 1`` digits
    fit. Returns ``None`` when the value does not fit.
    """
    _check_radix(radix)
    val &= _U64
    room = slen - 1
    if room < 1:
        return None
    out = []
    while True:
        val, mod = divmod(val, radix)
        out.append(_DIGITS[mod])
        room -= 1
        if not (room and val):
            break
    if val:
        return None
    return "".join(reversed(out))


def lltoa(val: int, slen: int, radix: int) -> str | None:
    """Signed 64-bit variant of :func:`ulltoa`; ``None`` if it does not fit."""
    val = _to_int64(val)
    negative = val < 0
    text = ulltoa(-val if negative else val, slen, radix)
    if negative:
        if text is None or len(text) >= slen - 1:
            return None
        return "-" + text
    return text


def itoa(value: int, base: int) -> str:
    """Format a 32-bit int; only base 10 shows a sign, others use two's complement."""
    _check_radix(base)
    value = _to_int32(value)
    if base == 10 and value < 0:
        return "-" + _digits(-value, 10)
    return _digits(value & _U32, base)


def ltoa(value: int, base: int) -> str:
    """Format a long (32 bits wide on this target)."""
    return itoa(_to_int32(value), base)


def utoa(value: int, base: int) -> str:
    """Format an unsigned 32-bit value."""
    _check_radix(base)
    return _digits(value & _U32, base)


def ultoa(value: int, base: int) -> str:
    """Format an unsigned long (32 bits wide on this target)."""
    return utoa(value & _U32, base)


def dtostrf(number: float, width: int, prec: int) -> str:
    """Format ``number`` with ``prec`` decimals, right-aligned to ``width``."""
    number = float(number)
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf"

    width = _to_int8(width)
    prec &= 0xFF

    fillme = width
    if prec > 0:
        fillme -= prec + 1

    negative = number < 0.0
    if negative:
        fillme -= 1
        number = -number

    rounding = 2.0
    for _ in range(prec):
        rounding *= 10.0
    number += 1.0 / rounding

    tenpow = 1.0
    digitcount = 1
    while number >= 10.0 * tenpow:
        tenpow *= 10.0
        digitcount += 1

    number *= 1 + sys.float_info.epsilon
    number /= tenpow
    fillme -= digitcount

    parts = [" " * max(fillme, 0)]
    if negative:
        parts.append("-")

    digitcount += prec
    while digitcount > 0:
        digitcount -= 1
        digit = min(int(number), 9)
        parts.append(_DIGITS[digit])
        if digitcount == prec and prec > 0:
            parts.append(".")
        number -= digit
        number *= 10.0

    return "".join(parts)


def strrstr(string: str | None, pattern: str | None) -> int | None:
    """Return the index of the last occurrence of ``pattern``, or ``None``."""
    if not string or not pattern or len(pattern) > len(string):
        return None
    index = string.rfind(pattern)
    return index if index >= 0 else None