"""A mutable text string with the embedded String class's semantics.

A string may be *invalid* (made from ``None`` or spoiled by a failed
concatenation); it is then falsy and behaves as empty for most queries.
"""

from __future__ import annotations

import math
import re
import string as _string
import struct

from . import strsearch
from .noniso import dtostrf, ltoa, ultoa

__all__ = ["ArduinoString"]

_UINT = 0xFFFFFFFF
_MAX_DECIMAL_PLACES = 10
_LONG_MIN = -(1 << 31)
_LONG_MAX = (1 << 31) - 1

_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE,
)


def _format_int(value: int, base: int) -> str:
    if value < 0:
        return ltoa(value, base)
    return ultoa(value, base)


def _cstr(text: str) -> str:
    """The part of ``text`` a C string function would see."""
    return text.split("\0", 1)[0]


def _strcmp(a: str, b: str) -> int:
    a, b = _cstr(a), _cstr(b)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(a) < len(b):
        return -ord(b[len(a)])
    return 0


def _raw(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, ArduinoString):
        return value._buf
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _search_text(value) -> str:
    raw = _raw(value)
    return "" if raw is None else raw


class ArduinoString:
    """Mutable string whose operations follow the embedded String rules."""

    __slots__ = ("_buf",)

    def __init__(self, value="", base: int | None = None) -> None:
        self._buf: str | None
        if value is None:
            self._buf = None
        elif isinstance(value, ArduinoString):
            self._buf = value._buf
        elif isinstance(value, str):
            self._buf = value
        elif isinstance(value, (bytes, bytearray)):
            self._buf = bytes(value).decode("latin-1")
        elif isinstance(value, float):
            places = 2 if base is None else base & 0xFF
            places = min(places, _MAX_DECIMAL_PLACES)
            self._buf = dtostrf(value, places + 2, places)
        elif isinstance(value, int):
            self._buf = _format_int(value, 10 if base is None else base)
        else:
            raise TypeError(f"cannot make a string from {type(value).__name__}")

    # size -----------------------------------------------------------------

    def length(self) -> int:
        return 0 if self._buf is None else len(self._buf)

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return self._buf is not None

    def __str__(self) -> str:
        return "" if self._buf is None else self._buf

    def __repr__(self) -> str:
        if self._buf is None:
            return "ArduinoString(None)"
        return f"ArduinoString({self._buf!r})"

    # concatenation --------------------------------------------------------

    def _append(self, text: str | None) -> bool:
        if text is None:
            return False
        if not text:
            return True
        self._buf = (self._buf or "") + text
        return True

    def concat(self, value) -> bool:
        """Append ``value``; return False (leaving the string unchanged) on failure."""
        if value is None:
            return False
        if isinstance(value, (ArduinoString, str)):
            return self._append(_raw(value))
        if isinstance(value, float):
            return self._append(dtostrf(value, 4, 2))
        if isinstance(value, int):
            return self._append(_format_int(value, 10))
        raise TypeError(f"cannot concatenate {type(value).__name__}")

    def __iadd__(self, value) -> ArduinoString:
        self.concat(value)
        return self

    def __add__(self, value) -> ArduinoString:
        result = ArduinoString(self)
        if not result.concat(value):
            result._buf = None
        return result

    def __radd__(self, value) -> ArduinoString:
        if not isinstance(value, str):
            return NotImplemented
        result = ArduinoString(value)
        if not result.concat(self):
            result._buf = None
        return result

    # comparison -----------------------------------------------------------

    def compare_to(self, other) -> int:
        """Negative, zero or positive as in ``strcmp``."""
        mine = self._buf
        theirs = _raw(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other) -> bool:
        if isinstance(other, ArduinoString):
            return len(self) == len(other) and self.compare_to(other) == 0
        theirs = _raw(other)
        if len(self) == 0:
            return theirs is None or not _cstr(theirs)
        if theirs is None:
            return self._buf[0] == "\0"
        return _strcmp(self._buf, theirs) == 0

    def equals_ignore_case(self, other) -> bool:
        if other is self:
            return True
        theirs = _search_text(other)
        mine = str(self)
        if len(mine) != len(theirs):
            return False
        return mine.translate(_LOWER) == theirs.translate(_LOWER)

    def starts_with(self, prefix, offset: int | None = None) -> bool:
        theirs = _raw(prefix)
        if offset is None:
            if len(self) < len(_search_text(prefix)):
                return False
            offset = 0
        offset &= _UINT
        if self._buf is None or theirs is None:
            return False
        if offset > len(self._buf) - len(theirs):
            return False
        return self._buf[offset:offset + len(theirs)] == theirs

    def ends_with(self, suffix) -> bool:
        theirs = _raw(suffix)
        if self._buf is None or theirs is None or len(self._buf) < len(theirs):
            return False
        return _strcmp(self._buf[len(self._buf) - len(theirs):], theirs) == 0

    def __eq__(self, other) -> bool:
        if isinstance(other, (ArduinoString, str)):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __lt__(self, other) -> bool:
        if not isinstance(other, (ArduinoString, str)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, (ArduinoString, str)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other) -> bool:
        if not isinstance(other, (ArduinoString, str)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, (ArduinoString, str)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # character access -----------------------------------------------------

    def __getitem__(self, index: int) -> str:
        """The character at ``index``, or ``"\\0"`` when out of range."""
        index &= _UINT
        if self._buf is None or index >= len(self._buf):
            return "\0"
        return self._buf[index]

    def char_at(self, index: int) -> str:
        return self[index]

    def set_char_at(self, index: int, c: str) -> None:
        if len(c) != 1:
            raise ValueError("expected a single character")
        index &= _UINT
        if self._buf is not None and index < len(self._buf):
            self._buf = self._buf[:index] + c + self._buf[index + 1:]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Up to ``bufsize - 1`` characters from ``index``, as Latin-1 bytes."""
        index &= _UINT
        if bufsize <= 0 or self._buf is None or index >= len(self._buf):
            return b""
        n = min(bufsize - 1, len(self._buf) - index)
        return self._buf[index:index + n].encode("latin-1")

    # search ---------------------------------------------------------------

    def index_of(self, target, from_index: int = 0) -> int:
        if self._buf is None:
            return -1
        return strsearch.index_of(self._buf, _search_text(target), from_index)

    def last_index_of(self, target, from_index: int | None = None) -> int:
        if self._buf is None:
            return -1
        return strsearch.last_index_of(self._buf, _search_text(target), from_index)

    def substring(self, begin: int, end: int | None = None) -> ArduinoString:
        return ArduinoString(strsearch.substring(str(self), begin, end))

    # modification ---------------------------------------------------------

    def replace(self, find, replacement) -> None:
        if self._buf is None:
            return
        self._buf = strsearch.replace(
            self._buf, _search_text(find), _search_text(replacement)
        )

    def remove(self, index: int, count: int | None = None) -> None:
        if self._buf is None:
            return
        self._buf = strsearch.remove(self._buf, index, count)

    def to_lower_case(self) -> None:
        if self._buf is not None:
            self._buf = self._buf.translate(_LOWER)

    def to_upper_case(self) -> None:
        if self._buf is not None:
            self._buf = self._buf.translate(_UPPER)

    def trim(self) -> None:
        if self._buf:
            self._buf = strsearch.trim(self._buf)

    # conversion -----------------------------------------------------------

    def to_int(self) -> int:
        """Leading integer as ``atol`` reads it, clamped to 32 bits; 0 if none."""
        if self._buf is None:
            return 0
        match = _INT_RE.match(self._buf)
        if not match:
            return 0
        return max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))

    def to_double(self) -> float:
        """Leading number as ``atof`` reads it; 0.0 if none."""
        if self._buf is None:
            return 0.0
        match = _FLOAT_RE.match(self._buf)
        if not match:
            return 0.0
        return float(match.group(1))

    def to_float(self) -> float:
        """As :meth:`to_double`, rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)