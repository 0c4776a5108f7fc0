"""Fixed-size byte ring buffer used for buffering serial data."""

from __future__ import annotations

from collections import deque

SERIAL_BUFFER_SIZE = 64


class RingBuffer:
    """A FIFO of bytes with ``size`` slots, one of which always stays free.

    Storing into a full buffer silently drops the new byte.
    """

    def __init__(self, size: int = SERIAL_BUFFER_SIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._data: deque[int] = deque()

    @property
    def _capacity(self) -> int:
        return self.size - 1

    def store(self, value: int) -> bool:
        """Append a byte; return False if the buffer was full and it was dropped."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        if self.is_full():
            return False
        self._data.append(value)
        return True

    def clear(self) -> None:
        """Discard every stored byte."""
        self._data.clear()

    def read(self) -> int | None:
        """Remove and return the oldest byte, or None if the buffer is empty."""
        return self._data.popleft() if self._data else None

    def available(self) -> int:
        """Return the number of bytes waiting to be read."""
        return len(self._data)

    def available_for_store(self) -> int:
        """Return how many more bytes can be stored."""
        return self._capacity - len(self._data)

    def peek(self) -> int | None:
        """Return the oldest byte without removing it, or None if empty."""
        return self._data[0] if self._data else None

    def is_full(self) -> bool:
        """Return True if no more bytes can be stored."""
        return len(self._data) >= self._capacity

    def __len__(self) -> int:
        return self.available()