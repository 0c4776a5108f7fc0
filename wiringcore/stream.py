"""Byte streams with timed reads, searching and number parsing."""

from __future__ import annotations

import struct
import time
from abc import abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Union

from wiringcore.printing import Print

PARSE_TIMEOUT = 1000
NO_IGNORE_CHAR = "\x01"

_WHITESPACE = frozenset(b" \t\r\n")
_MINUS = ord("-")
_DOT = ord(".")

Target = Union[str, bytes, bytearray, int]


class LookaheadMode(Enum):
    """How number parsing skips characters before the first valid one."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _byte_of(char: str | int) -> int:
    if isinstance(char, int) and not isinstance(char, bool):
        if not 0 <= char <= 0xFF:
            raise ValueError(f"byte value out of range: {char}")
        return char
    if isinstance(char, str) and len(char) == 1 and ord(char) <= 0xFF:
        return ord(char)
    raise ValueError(f"expected a single byte-sized character, got {char!r}")


def _target_bytes(target: Target) -> bytes:
    if isinstance(target, str):
        return target.encode("utf-8")
    if isinstance(target, (bytes, bytearray)):
        return bytes(target)
    if isinstance(target, int) and not isinstance(target, bool):
        return bytes([_byte_of(target)])
    raise TypeError(f"cannot search for {type(target).__name__}")


def _is_digit(c: int | None) -> bool:
    return c is not None and ord("0") <= c <= ord("9")


def _single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Stream(Print):
    """A :class:`Print` that can also be read from, one byte at a time.

    Reads wait up to the timeout, in milliseconds, for data to arrive.
    """

    def __init__(self) -> None:
        super().__init__()
        self._timeout = PARSE_TIMEOUT

    @abstractmethod
    def available(self) -> int:
        """Return the number of bytes that can be read right now."""

    @abstractmethod
    def read(self) -> int | None:
        """Remove and return the next byte, or None if there is none."""

    @abstractmethod
    def peek(self) -> int | None:
        """Return the next byte without removing it, or None if there is none."""

    @property
    def timeout(self) -> int:
        """Milliseconds to wait for the next byte."""
        return self._timeout

    def set_timeout(self, timeout: int) -> None:
        """Set the number of milliseconds to wait for the next byte."""
        if timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")
        self._timeout = timeout

    @staticmethod
    def _millis() -> float:
        return time.monotonic() * 1000.0

    def _timed(self, fetch) -> int | None:
        start = self._millis()
        while True:
            c = fetch()
            if c is not None:
                return c
            if self._millis() - start >= self._timeout:
                return None

    def _timed_read(self) -> int | None:
        return self._timed(self.read)

    def _timed_peek(self) -> int | None:
        return self._timed(self.peek)

    def _peek_next_digit(self, lookahead: LookaheadMode, detect_decimal: bool) -> int | None:
        while True:
            c = self._timed_peek()
            if c is None or c == _MINUS or _is_digit(c) or (detect_decimal and c == _DOT):
                return c
            if lookahead is LookaheadMode.SKIP_NONE:
                return None
            if lookahead is LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return None
            self.read()

    def find(self, target: Target) -> bool:
        """Read until ``target`` has been seen; False if the stream timed out."""
        return self.find_multi([target]) == 0

    def find_until(self, target: Target, terminator: Target | None) -> bool:
        """Like :meth:`find`, but also give up when ``terminator`` is seen."""
        if terminator is None:
            return self.find(target)
        return self.find_multi([target, terminator]) == 0

    def find_multi(self, targets: Sequence[Target]) -> int | None:
        """Read until one of ``targets`` has been seen and return its index.

        An empty target matches at once. Returns None on timeout.
        """
        patterns = [_target_bytes(t) for t in targets]
        for position, pattern in enumerate(patterns):
            if not pattern:
                return position
        indices = [0] * len(patterns)
        while True:
            c = self._timed_read()
            if c is None:
                return None
            for position, pattern in enumerate(patterns):
                index = indices[position]
                if c == pattern[index]:
                    index += 1
                    if index == len(pattern):
                        return position
                    indices[position] = index
                    continue
                original = index
                # Fall back to the longest shorter match that c extends.
                while index:
                    index -= 1
                    if c != pattern[index]:
                        continue
                    shift = original - index
                    if pattern[:index] == pattern[shift:shift + index]:
                        index += 1
                        break
                indices[position] = index

    def _ignore_byte(self, ignore: str | int | None) -> int | None:
        return None if ignore is None else _byte_of(ignore)

    def parse_int(
        self,
        lookahead: LookaheadMode = LookaheadMode.SKIP_ALL,
        ignore: str | int | None = NO_IGNORE_CHAR,
    ) -> int:
        """Read an integer, skipping leading characters as ``lookahead`` says.

        Bytes equal to ``ignore`` are skipped once parsing has begun.
        Returns 0 if no number is found before the timeout.
        """
        skip = self._ignore_byte(ignore)
        c = self._peek_next_digit(lookahead, False)
        if c is None:
            return 0
        negative = False
        value = 0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif _is_digit(c):
                value = value * 10 + (c - ord("0"))
            self.read()
            c = self._timed_peek()
            if not (_is_digit(c) or (c is not None and c == skip)):
                break
        return -value if negative else value

    def parse_float(
        self,
        lookahead: LookaheadMode = LookaheadMode.SKIP_ALL,
        ignore: str | int | None = NO_IGNORE_CHAR,
    ) -> float:
        """Read a decimal number in single precision, like :meth:`parse_int`."""
        skip = self._ignore_byte(ignore)
        c = self._peek_next_digit(lookahead, True)
        if c is None:
            return 0.0
        negative = False
        is_fraction = False
        value = 0
        fraction = 1.0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                is_fraction = True
            elif _is_digit(c):
                value = value * 10 + (c - ord("0"))
                if is_fraction:
                    fraction = _single(fraction * _single(0.1))
            self.read()
            c = self._timed_peek()
            if not (
                _is_digit(c)
                or (c == _DOT and not is_fraction)
                or (c is not None and c == skip)
            ):
                break
        if negative:
            value = -value
        if is_fraction:
            return _single(_single(float(value)) * fraction)
        return _single(float(value))

    def read_bytes(self, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping early on timeout."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return bytes(self._collect(length, None))

    def read_bytes_until(self, terminator: str | int, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping at ``terminator`` or timeout.

        The terminator is consumed but not returned.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return bytes(self._collect(length, _byte_of(terminator)))

    def _collect(self, length: int | None, terminator: int | None) -> Iterable[int]:
        count = 0
        while length is None or count < length:
            c = self._timed_read()
            if c is None or c == terminator:
                return
            yield c
            count += 1

    def read_string(self) -> str:
        """Read until timeout and decode the bytes as UTF-8."""
        return bytes(self._collect(None, None)).decode("utf-8", errors="replace")

    def read_string_until(self, terminator: str | int) -> str:
        """Read until ``terminator`` or timeout; the terminator is consumed."""
        data = bytes(self._collect(None, _byte_of(terminator)))
        return data.decode("utf-8", errors="replace")


class MemoryStream(Stream):
    """A stream that reads from bytes given up front and records what is written."""

    def __init__(self, data: bytes | bytearray | str = b"", timeout: int = 0) -> None:
        super().__init__()
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._input: deque[int] = deque(bytes(data))
        self._output = bytearray()
        self.set_timeout(timeout)

    def available(self) -> int:
        return len(self._input)

    def read(self) -> int | None:
        return self._input.popleft() if self._input else None

    def peek(self) -> int | None:
        return self._input[0] if self._input else None

    def write_byte(self, value: int) -> int:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self._output.append(value)
        return 1

    def getvalue(self) -> bytes:
        """Return everything written to the stream so far."""
        return bytes(self._output)