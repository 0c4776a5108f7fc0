"""A mutable string with the semantics of the microcontroller string class.

A string is either valid (holding text, possibly empty) or invalid (holding
nothing, as after being built from ``None``). An invalid string is false in a
boolean context and behaves like an empty string in most other operations.
Integers are formatted as 32-bit machine words, and case conversions and
whitespace follow the C locale.
"""

from __future__ import annotations

import math
import string
import struct
from collections.abc import Iterator
from typing import Union

from wiringcore.conversions import dtostrf, ltoa, ultoa
from wiringcore.string_algorithms import (
    index_of as _index_of,
    last_index_of as _last_index_of,
    parse_double,
    parse_long,
    trim_whitespace,
)

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_DEFAULT_DECIMAL_PLACES = 2

TextLike = Union["ArduinoString", str]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _format_int(value: int, base: int) -> str:
    if value < 0:
        return ltoa(value, base)
    return ultoa(value, base)


def _format_float(value: float, decimal_places: int) -> str:
    _check_non_negative("decimal places", decimal_places)
    return dtostrf(value, decimal_places + 2, decimal_places)


def _buffer_of(value: object) -> str | None:
    """Return the text held by ``value``, or None for an invalid or null value."""
    if isinstance(value, ArduinoString):
        return value._buffer
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _target_text(value: object) -> str:
    text = _buffer_of(value)
    return "" if text is None else text


def _concat_text(value: object) -> str | None:
    if isinstance(value, (ArduinoString, str)) or value is None:
        return _buffer_of(value)
    if isinstance(value, int):
        return _format_int(value, 10)
    if isinstance(value, float):
        return dtostrf(value, 4, 2)
    raise TypeError(f"cannot concatenate object of type {type(value).__name__}")


def _strcmp(a: str, b: str) -> int:
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(a) < len(b):
        return -ord(b[len(a)])
    return 0


class ArduinoString:
    """Mutable text with validity tracking and index-based editing."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: object = "", base: int | None = None) -> None:
        """Build a string from text, another string, an integer or a float.

        ``None`` gives an invalid string. For integers ``base`` is the radix
        (default 10); for floats it is the number of decimal places
        (default 2). Text takes no ``base``.
        """
        self._buffer: str | None
        if isinstance(value, ArduinoString) or value is None or isinstance(value, str):
            if base is not None:
                raise TypeError("a base applies only to numbers")
            self._buffer = _buffer_of(value)
        elif isinstance(value, float):
            places = _DEFAULT_DECIMAL_PLACES if base is None else base
            self._buffer = _format_float(value, places)
        elif isinstance(value, int):
            self._buffer = _format_int(value, 10 if base is None else base)
        else:
            raise TypeError(f"cannot build a string from {type(value).__name__}")

    @classmethod
    def from_float(
        cls, value: float, decimal_places: int = _DEFAULT_DECIMAL_PLACES
    ) -> "ArduinoString":
        """Format ``value`` with ``decimal_places`` decimals, right-aligned in
        a field of ``decimal_places + 2`` characters."""
        return cls(float(value), decimal_places)

    def _invalidate(self) -> None:
        self._buffer = None

    def __len__(self) -> int:
        return len(self._buffer) if self._buffer is not None else 0

    def __bool__(self) -> bool:
        return self._buffer is not None

    def __str__(self) -> str:
        return self._buffer if self._buffer is not None else ""

    def __repr__(self) -> str:
        if self._buffer is None:
            return f"{type(self).__name__}(None)"
        return f"{type(self).__name__}({self._buffer!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    # concatenation

    def concat(self, value: object) -> bool:
        """Append ``value``; return False, leaving the string unchanged, if it is
        ``None`` or an invalid string."""
        text = _concat_text(value)
        if text is None:
            return False
        if not text:
            return True
        self._buffer = (self._buffer or "") + text
        return True

    def __iadd__(self, value: object) -> "ArduinoString":
        self.concat(value)
        return self

    def __add__(self, value: object) -> "ArduinoString":
        try:
            _concat_text(value)
        except TypeError:
            return NotImplemented
        result = ArduinoString(self)
        if not result.concat(value):
            result._invalidate()
        return result

    def __radd__(self, other: object) -> "ArduinoString":
        if other is None or not isinstance(other, (str, int, float)):
            return NotImplemented
        result = ArduinoString(other)
        if not result.concat(self):
            result._invalidate()
        return result

    # comparison

    def compare_to(self, other: TextLike | None) -> int:
        """Compare character codes: negative, zero or positive like ``strcmp``."""
        mine = self._buffer
        theirs = _buffer_of(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other: TextLike | None) -> bool:
        """Return True if both hold the same text; invalid counts as empty."""
        return str(self) == _target_text(other)

    def __eq__(self, other: object) -> bool:
        if other is None or isinstance(other, (ArduinoString, str)):
            return self.equals(other)
        return NotImplemented

    def _ordering(self, other: object) -> int | None:
        if isinstance(other, (ArduinoString, str)):
            return self.compare_to(other)
        return None

    def __lt__(self, other: object) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result >= 0

    def equals_ignore_case(self, other: TextLike | None) -> bool:
        """Compare ignoring ASCII letter case."""
        mine = str(self)
        theirs = _target_text(other)
        if len(mine) != len(theirs):
            return False
        return mine.translate(_TO_LOWER) == theirs.translate(_TO_LOWER)

    def starts_with(self, prefix: TextLike | None, offset: int | None = None) -> bool:
        """Return True if ``prefix`` occurs at ``offset`` (default 0)."""
        needle = _buffer_of(prefix)
        if offset is None:
            if len(self) < (len(needle) if needle else 0):
                return False
            offset = 0
        _check_non_negative("offset", offset)
        if self._buffer is None or needle is None:
            return False
        if offset > len(self._buffer) - len(needle):
            return False
        return self._buffer.startswith(needle, offset)

    def ends_with(self, suffix: TextLike | None) -> bool:
        """Return True if the string ends with ``suffix``."""
        needle = _buffer_of(suffix)
        if self._buffer is None or needle is None or len(self._buffer) < len(needle):
            return False
        return self._buffer.endswith(needle)

    # character access

    def char_at(self, index: int) -> str:
        """Return the character at ``index``, or ``"\\0"`` when out of range."""
        if self._buffer is None or index < 0 or index >= len(self._buffer):
            return "\0"
        return self._buffer[index]

    def set_char_at(self, index: int, char: str) -> None:
        """Replace the character at ``index``; ignored when out of range."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if self._buffer is None or index < 0 or index >= len(self._buffer):
            return
        self._buffer = self._buffer[:index] + char + self._buffer[index + 1:]

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        return self.char_at(index)

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Return up to ``bufsize - 1`` characters from ``index`` as UTF-8,
        leaving room for a terminator as a fixed buffer would."""
        _check_non_negative("bufsize", bufsize)
        _check_non_negative("index", index)
        text = str(self)
        if bufsize == 0 or index >= len(text):
            return b""
        count = min(bufsize - 1, len(text) - index)
        return text[index:index + count].encode("utf-8")

    # search

    def index_of(self, target: TextLike, from_index: int = 0) -> int:
        """Return the first position of ``target`` at or after ``from_index``, or -1."""
        return _index_of(str(self), _target_text(target), from_index)

    def last_index_of(self, target: TextLike, from_index: int | None = None) -> int:
        """Return the last position of ``target`` starting at or before
        ``from_index``, or -1.

        A one-character ``str`` uses character rules, a string object uses
        substring rules, where a start past the end is moved back.
        """
        text = str(self)
        needle = _target_text(target)
        if isinstance(target, ArduinoString) and len(needle) == 1:
            if not text:
                return -1
            if from_index is None:
                from_index = len(text) - 1
            _check_non_negative("index", from_index)
            from_index = min(from_index, len(text) - 1)
        return _last_index_of(text, needle, from_index)

    def substring(self, left: int, right: int | None = None) -> "ArduinoString":
        """Return characters ``left`` up to ``right``; the bounds may be swapped."""
        text = str(self)
        if right is None:
            right = len(text)
        _check_non_negative("index", left)
        _check_non_negative("index", right)
        if left > right:
            left, right = right, left
        if left >= len(text):
            return ArduinoString("")
        return ArduinoString(text[left:min(right, len(text))])

    # modification

    def replace(self, find: TextLike, replacement: TextLike) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place.

        A longer replacement is applied from the end of the string backwards.
        """
        old = _target_text(find)
        new = _target_text(replacement)
        text = self._buffer
        if not text or not old:
            return
        if len(new) <= len(old):
            self._buffer = text.replace(old, new)
            return
        if old not in text:
            return
        index = len(text) - 1
        while index >= 0:
            index = _last_index_of(text, old, index)
            if index < 0:
                break
            text = text[:index] + new + text[index + len(old):]
            index -= 1
        self._buffer = text

    def remove(self, index: int, count: int | None = None) -> None:
        """Delete ``count`` characters from ``index`` (default: to the end)."""
        _check_non_negative("index", index)
        text = self._buffer
        if text is None or index >= len(text):
            return
        if count is None:
            count = len(text)
        _check_non_negative("count", count)
        if count == 0:
            return
        count = min(count, len(text) - index)
        self._buffer = text[:index] + text[index + count:]

    def to_lower_case(self) -> None:
        """Convert ASCII letters to lower case in place."""
        if self._buffer is not None:
            self._buffer = self._buffer.translate(_TO_LOWER)

    def to_upper_case(self) -> None:
        """Convert ASCII letters to upper case in place."""
        if self._buffer is not None:
            self._buffer = self._buffer.translate(_TO_UPPER)

    def trim(self) -> None:
        """Remove leading and trailing C-locale whitespace in place."""
        if self._buffer:
            self._buffer = trim_whitespace(self._buffer)

    # parsing

    def to_int(self) -> int:
        """Parse a leading decimal integer; 0 if there is none."""
        return parse_long(self._buffer) if self._buffer is not None else 0

    def to_double(self) -> float:
        """Parse a leading floating-point number; 0.0 if there is none."""
        return parse_double(self._buffer) if self._buffer is not None else 0.0

    def to_float(self) -> float:
        """Parse like :meth:`to_double`, rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)