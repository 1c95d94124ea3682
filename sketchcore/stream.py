"""Character streams with timed reads, searching and number parsing."""

from __future__ import annotations

import math
import struct
import time
from abc import abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum

from .printing import Print

__all__ = ["LookaheadMode", "Stream", "BytesStream", "DEFAULT_TIMEOUT"]

DEFAULT_TIMEOUT = 1000
_WHITESPACE = frozenset(b" \t\r\n")
_DIGITS = range(ord("0"), ord("9") + 1)
_MINUS = ord("-")
_DOT = ord(".")


class LookaheadMode(Enum):
    """How number parsing treats characters before the first valid one."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _as_bytes(value) -> bytes:
    if isinstance(value, str):
        return value.encode("latin-1")
    if isinstance(value, int):
        return bytes([value & 0xFF])
    return bytes(value)


def _as_code(value) -> int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value & 0xFF
    data = _as_bytes(value)
    if len(data) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return data[0]


def _single_precision(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class Stream(Print):
    """A byte source that waits up to ``timeout`` milliseconds for data.

    Subclasses provide :meth:`available`, :meth:`read`, :meth:`peek` and
    :meth:`write_byte`. ``read`` and ``peek`` return -1 when no byte waits.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    @property
    def timeout(self) -> int:
        """Milliseconds to wait for the next byte before giving up."""
        return self._timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        value = int(value)
        if value < 0:
            raise ValueError(f"timeout must not be negative, got {value}")
        self._timeout = value

    @abstractmethod
    def available(self) -> int:
        """Number of bytes ready to read."""

    @abstractmethod
    def read(self) -> int:
        """Next byte, consumed, or -1 if none is ready."""

    @abstractmethod
    def peek(self) -> int:
        """Next byte, not consumed, or -1 if none is ready."""

    # timed access ---------------------------------------------------------

    def _timed(self, fetch) -> int:
        start = _now_ms()
        while True:
            c = fetch()
            if c >= 0:
                return c
            if _now_ms() - start >= self._timeout:
                return -1

    def _timed_read(self) -> int:
        return self._timed(self.read)

    def _timed_peek(self) -> int:
        return self._timed(self.peek)

    def _peek_next_digit(self, lookahead: LookaheadMode, detect_decimal: bool) -> int:
        while True:
            c = self._timed_peek()
            if c < 0 or c == _MINUS or c in _DIGITS or (detect_decimal and c == _DOT):
                return c
            if lookahead is LookaheadMode.SKIP_NONE:
                return -1
            if lookahead is LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return -1
            self.read()

    # searching ------------------------------------------------------------

    def find(self, target) -> bool:
        """Read until ``target`` has been seen; False on timeout."""
        return self.find_multi([target]) == 0

    def find_until(self, target, terminator) -> bool:
        """As :meth:`find`, but give up once ``terminator`` has been seen."""
        if terminator is None:
            return self.find(target)
        return self.find_multi([target, terminator]) == 0

    def find_multi(self, targets: Sequence) -> int:
        """Read until one of ``targets`` is seen and return its position.

        An empty target matches at once. Returns -1 on timeout.
        """
        patterns = [_as_bytes(t) for t in targets]
        for i, pattern in enumerate(patterns):
            if not pattern:
                return i
        indexes = [0] * len(patterns)
        while True:
            c = self._timed_read()
            if c < 0:
                return -1
            for i, pattern in enumerate(patterns):
                index = indexes[i]
                if c == pattern[index]:
                    index += 1
                    if index == len(pattern):
                        return i
                    indexes[i] = index
                    continue
                if index == 0:
                    continue
                # Fall back to the longest shorter prefix still consistent
                # with what has been read.
                orig = index
                while True:
                    index -= 1
                    if c == pattern[index]:
                        if index == 0:
                            index = 1
                            break
                        diff = orig - index
                        if pattern[:index] == pattern[diff:diff + index]:
                            index += 1
                            break
                    if index == 0:
                        break
                indexes[i] = index

    # number parsing -------------------------------------------------------

    def parse_int(
        self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=None
    ) -> int:
        """Read the first integer from the stream; 0 if none arrives in time."""
        ignore_code = _as_code(ignore)
        c = self._peek_next_digit(lookahead, False)
        if c < 0:
            return 0
        negative = False
        value = 0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif c in _DIGITS:
                value = value * 10 + c - ord("0")
            self.read()
            c = self._timed_peek()
            if not (c in _DIGITS or (c >= 0 and c == ignore_code)):
                break
        return -value if negative else value

    def parse_float(
        self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=None
    ) -> float:
        """Read the first decimal number, at single precision; 0.0 if none."""
        ignore_code = _as_code(ignore)
        c = self._peek_next_digit(lookahead, True)
        if c < 0:
            return 0.0
        negative = False
        is_fraction = False
        value = 0.0
        fraction = 1.0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                is_fraction = True
            elif c in _DIGITS:
                if is_fraction:
                    fraction *= 0.1
                    value += fraction * (c - ord("0"))
                else:
                    value = value * 10 + c - ord("0")
            self.read()
            c = self._timed_peek()
            if not (
                c in _DIGITS
                or (c == _DOT and not is_fraction)
                or (c >= 0 and c == ignore_code)
            ):
                break
        return _single_precision(-value if negative else value)

    # bulk reads -----------------------------------------------------------

    def _read_while(self, length: int | None, terminator: int | None) -> bytes:
        out = bytearray()
        while length is None or len(out) < length:
            c = self._timed_read()
            if c < 0 or c == terminator:
                break
            out.append(c)
        return bytes(out)

    def read_bytes(self, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping early on timeout."""
        return self._read_while(max(int(length), 0), None)

    def read_bytes_until(self, terminator, length: int) -> bytes:
        """As :meth:`read_bytes`, also stopping at (and consuming) ``terminator``."""
        return self._read_while(max(int(length), 0), _as_code(terminator))

    def read_string(self) -> str:
        """Read until timeout; bytes are taken as Latin-1 characters."""
        return self._read_while(None, None).decode("latin-1")

    def read_string_until(self, terminator) -> str:
        """Read until ``terminator`` (consumed, not returned) or timeout."""
        return self._read_while(None, _as_code(terminator)).decode("latin-1")


class BytesStream(Stream):
    """An in-memory stream: reads come from fed bytes, writes go to ``output``.

    The timeout defaults to 0, since nothing arrives unless fed.
    """

    def __init__(self, data: bytes | str | Iterable[int] = b"", timeout: int = 0) -> None:
        super().__init__(timeout)
        self._incoming: deque[int] = deque()
        self.output = bytearray()
        self.feed(data)

    def feed(self, data) -> None:
        """Append bytes (or Latin-1 text) to what can be read."""
        self._incoming.extend(_as_bytes(data))

    def available(self) -> int:
        return len(self._incoming)

    def read(self) -> int:
        return self._incoming.popleft() if self._incoming else -1

    def peek(self) -> int:
        return self._incoming[0] if self._incoming else -1

    def write_byte(self, value: int) -> int:
        self.output.append(value & 0xFF)
        return 1