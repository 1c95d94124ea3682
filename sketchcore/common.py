"""Pin enumerations, math constants and bit helpers."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "PinStatus",
    "PinMode",
    "BitOrder",
    "PI",
    "HALF_PI",
    "TWO_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "EULER",
    "SERIAL",
    "DISPLAY",
    "constrain",
    "radians",
    "degrees",
    "sq",
    "low_byte",
    "high_byte",
    "bit_read",
    "bit_set",
    "bit_clear",
    "bit_toggle",
    "bit_write",
    "bit",
    "make_word",
    "map_range",
]


class PinStatus(IntEnum):
    LOW = 0
    HIGH = 1
    CHANGE = 2
    FALLING = 3
    RISING = 4


class PinMode(IntEnum):
    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2
    INPUT_PULLDOWN = 0x3


class BitOrder(IntEnum):
    LSBFIRST = 0
    MSBFIRST = 1


PI = 3.1415926535897932384626433832795
HALF_PI = 1.5707963267948966192313216916398
TWO_PI = 6.283185307179586476925286766559
DEG_TO_RAD = 0.017453292519943295769236907684886
RAD_TO_DEG = 57.295779513082320876798154814105
EULER = 2.718281828459045235360287471352

SERIAL = 0x0
DISPLAY = 0x1


def constrain(amt, low, high):
    """Clamp ``amt`` into ``[low, high]``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def radians(deg):
    return deg * DEG_TO_RAD


def degrees(rad):
    return rad * RAD_TO_DEG


def sq(x):
    return x * x


def low_byte(w: int) -> int:
    return w & 0xFF


def high_byte(w: int) -> int:
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    return 1 << b


def bit_read(value: int, bit: int) -> int:
    return (value >> bit) & 0x01


def bit_set(value: int, bit: int) -> int:
    """Return ``value`` with the given bit set."""
    return value | (1 << bit)


def bit_clear(value: int, bit: int) -> int:
    """Return ``value`` with the given bit cleared."""
    return value & ~(1 << bit)


def bit_toggle(value: int, bit: int) -> int:
    """Return ``value`` with the given bit flipped."""
    return value ^ (1 << bit)


def bit_write(value: int, bit: int, bitvalue) -> int:
    """Return ``value`` with the given bit set or cleared per ``bitvalue``."""
    return bit_set(value, bit) if bitvalue else bit_clear(value, bit)


def make_word(*args: int) -> int:
    """Build a 16-bit word from one word or from a high and a low byte."""
    if len(args) == 1:
        return args[0] & 0xFFFF
    if len(args) == 2:
        high, low = args
        return ((high & 0xFF) << 8) | (low & 0xFF)
    raise TypeError(f"make_word takes 1 or 2 arguments, got {len(args)}")


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` linearly from one range to another using integer math.

    Division truncates toward zero. Raises ZeroDivisionError when the input
    range is empty.
    """
    numerator = (x - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min