"""Byte sinks that format numbers, text and printable objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Union

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_CRLF = b"\r\n"
_OVERFLOW_LIMIT = 4294967040.0
_LONG_MIN = -(1 << 31)
_LLONG_MIN = -(1 << 63)
_ULLONG_LIMIT = 1 << 64

Writable = Union[str, bytes, bytearray, memoryview]


class Printable(ABC):
    """An object that knows how to print itself to a :class:`Print`."""

    @abstractmethod
    def print_to(self, printer: "Print") -> int:
        """Print this object to ``printer`` and return the bytes written."""


def _to_unsigned(value: int) -> int:
    if value >= 0:
        return value
    width = 32 if value >= _LONG_MIN else 64
    return value & ((1 << width) - 1)


def _digit(d: int) -> str:
    return chr(ord("0") + d) if d < 10 else chr(ord("A") + d - 10)


def _format_unsigned(value: int, base: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_digit(remainder))
    return "".join(reversed(digits))


class Print(ABC):
    """Base class for anything that accepts bytes one at a time."""

    def __init__(self) -> None:
        self._write_error = 0
        self._unflushed = 0

    @property
    def write_error(self) -> int:
        """The last write error code; 0 when there was none."""
        return self._write_error

    @property
    def unflushed(self) -> int:
        """Bytes written through this printer since the last :meth:`flush`."""
        return self._unflushed

    def _set_write_error(self, err: int = 1) -> None:
        self._write_error = err

    def clear_write_error(self) -> None:
        """Reset the write error code to 0."""
        self._set_write_error(0)

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Write one byte; return 1 on success, 0 on failure."""

    def write(self, data: Writable | None) -> int:
        """Write text or bytes, stopping at the first byte that fails.

        Text is encoded as UTF-8. Returns the number of bytes written.
        """
        if data is None:
            return 0
        if isinstance(data, str):
            data = data.encode("utf-8")
        count = 0
        for byte in bytes(data):
            if not self.write_byte(byte):
                break
            count += 1
        self._unflushed += count
        return count

    def available_for_write(self) -> int:
        """Return how many bytes can be written without blocking; 0 if unknown."""
        return 0

    def flush(self) -> None:
        """Mark everything written so far as pushed out."""
        self._unflushed = 0

    def print(self, value: object = None, fmt: int | None = None) -> int:
        """Print ``value`` and return the number of bytes written.

        Integers take a base in ``fmt`` (default :data:`DEC`; 0 writes the
        low byte raw); floats take a number of decimal places (default 2).
        Text, bytes and :class:`Printable` objects take no ``fmt``.
        """
        if value is None:
            return 0
        if isinstance(value, (Printable, str, bytes, bytearray, memoryview)):
            if fmt is not None:
                raise TypeError(f"{type(value).__name__} takes no format argument")
            if isinstance(value, Printable):
                return value.print_to(self)
            return self.write(value)
        if isinstance(value, int):
            return self._print_int(value, DEC if fmt is None else fmt)
        if isinstance(value, float):
            return self._print_float(value, 2 if fmt is None else fmt)
        raise TypeError(f"cannot print object of type {type(value).__name__}")

    def println(self, value: object = None, fmt: int | None = None) -> int:
        """Print ``value`` followed by CR LF and return the bytes written."""
        count = self.print(value, fmt)
        return count + self.write(_CRLF)

    def _print_int(self, value: int, base: int) -> int:
        if base < 0:
            raise ValueError(f"base must be non-negative, got {base}")
        if not _LLONG_MIN <= value < _ULLONG_LIMIT:
            raise OverflowError(f"integer out of printable range: {value}")
        if base == 0:
            written = self.write_byte(value & 0xFF)
            self._unflushed += written
            return written
        if base == DEC and value < 0:
            sign = self.write("-")
            return sign + self._print_number(-value, DEC)
        return self._print_number(_to_unsigned(value), base)

    def _print_number(self, value: int, base: int) -> int:
        if base < 2:
            base = DEC
        return self.write(_format_unsigned(value, base))

    def _print_float(self, number: float, digits: int) -> int:
        if digits < 0:
            raise ValueError(f"digits must be non-negative, got {digits}")
        if math.isnan(number):
            return self.write("nan")
        if math.isinf(number):
            return self.write("inf")
        if number > _OVERFLOW_LIMIT or number < -_OVERFLOW_LIMIT:
            return self.write("ovf")

        count = 0
        if number < 0.0:
            count += self.write("-")
            number = -number

        rounding = 0.5
        for _ in range(digits):
            rounding /= 10.0
        number += rounding

        int_part = int(number)
        remainder = number - float(int_part)
        count += self._print_int(int_part, DEC)

        if digits > 0:
            count += self.write(".")
        for _ in range(digits):
            remainder *= 10.0
            to_print = int(remainder)
            count += self._print_int(to_print, DEC)
            remainder -= to_print
        return count


class BufferPrint(Print):
    """A :class:`Print` that collects bytes in memory, optionally up to a limit.

    A byte written past the limit is refused and sets the write error.
    """

    def __init__(self, limit: int | None = None) -> None:
        super().__init__()
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        self._buffer = bytearray()

    def write_byte(self, value: int) -> int:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        if self.limit is not None and len(self._buffer) >= self.limit:
            self._set_write_error()
            return 0
        self._buffer.append(value)
        return 1

    def available_for_write(self) -> int:
        if self.limit is None:
            return 0
        return self.limit - len(self._buffer)

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)