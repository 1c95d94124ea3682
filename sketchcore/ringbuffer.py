"""A fixed-size byte ring buffer that drops bytes when full."""

from __future__ import annotations

__all__ = ["RingBuffer", "SERIAL_BUFFER_SIZE"]

SERIAL_BUFFER_SIZE = 64


class RingBuffer:
    """Holds up to ``size`` bytes; reads return -1 when empty."""

    def __init__(self, size: int = SERIAL_BUFFER_SIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._buffer = bytearray(size)
        self.clear()

    def _next(self, index: int) -> int:
        return (index + 1) % self.size

    def store_char(self, c: int) -> bool:
        """Store one byte; return False (dropping it) if the buffer is full."""
        if self.is_full():
            return False
        self._buffer[self._head] = c & 0xFF
        self._head = self._next(self._head)
        self._count += 1
        return True

    def clear(self) -> None:
        self._head = 0
        self._tail = 0
        self._count = 0

    def read_char(self) -> int:
        """Remove and return the oldest byte, or -1 if empty."""
        if not self._count:
            return -1
        value = self._buffer[self._tail]
        self._tail = self._next(self._tail)
        self._count -= 1
        return value

    def available(self) -> int:
        return self._count

    def available_for_store(self) -> int:
        return self.size - self._count

    def peek(self) -> int:
        """Return the oldest byte without removing it, or -1 if empty."""
        if not self._count:
            return -1
        return self._buffer[self._tail]

    def is_full(self) -> bool:
        return self._count == self.size

    def __len__(self) -> int:
        return self._count