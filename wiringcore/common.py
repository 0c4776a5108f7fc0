"""Pin enumerations, mathematical constants and small numeric helpers."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TypeVar

ARDUINO_API_VERSION = 10001

PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.tau
DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
EULER = math.e

SERIAL = 0x0
DISPLAY = 0x1

_T = TypeVar("_T")


class PinStatus(IntEnum):
    """Logic level of a pin, or the edge an interrupt triggers on."""

    LOW = 0
    HIGH = 1
    CHANGE = 2
    FALLING = 3
    RISING = 4


class PinMode(IntEnum):
    """Direction and pull configuration of a pin."""

    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2
    INPUT_PULLDOWN = 0x3


class BitOrder(IntEnum):
    """Order in which bits are shifted in or out."""

    LSBFIRST = 0
    MSBFIRST = 1


def constrain(amt: _T, low: _T, high: _T) -> _T:
    """Clamp ``amt`` to the closed range ``[low, high]``."""
    if amt < low:  # type: ignore[operator]
        return low
    if amt > high:  # type: ignore[operator]
        return high
    return amt


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def sq(x: _T) -> _T:
    """Return ``x`` multiplied by itself."""
    return x * x  # type: ignore[operator]


def low_byte(w: int) -> int:
    """Return the least significant byte of ``w``."""
    return w & 0xFF


def high_byte(w: int) -> int:
    """Return the second least significant byte of ``w``."""
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    """Return an integer with only bit ``b`` set."""
    if b < 0:
        raise ValueError(f"bit index must be non-negative, got {b}")
    return 1 << b


def bit_read(value: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``value`` as 0 or 1."""
    if bit_index < 0:
        raise ValueError(f"bit index must be non-negative, got {bit_index}")
    return (value >> bit_index) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` set."""
    return value | bit(bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` cleared."""
    return value & ~bit(bit_index)


def bit_toggle(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` inverted."""
    return value ^ bit(bit_index)


def bit_write(value: int, bit_index: int, bit_value: object) -> int:
    """Return ``value`` with bit ``bit_index`` set if ``bit_value`` is true, else cleared."""
    if bit_value:
        return bit_set(value, bit_index)
    return bit_clear(value, bit_index)


def make_word(*args: int) -> int:
    """Build a 16-bit word.

    With one argument, return it truncated to 16 bits. With two, combine a
    high byte and a low byte.
    """
    if len(args) == 1:
        return args[0] & 0xFFFF
    if len(args) == 2:
        high, low = args
        return ((high & 0xFF) << 8) | (low & 0xFF)
    raise TypeError(f"make_word() takes 1 or 2 arguments ({len(args)} given)")


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def map_value(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one integer range to another.

    Uses integer arithmetic whose division truncates toward zero. Raises
    ``ZeroDivisionError`` when ``in_min`` equals ``in_max``.
    """
    if in_max == in_min:
        raise ZeroDivisionError("input range is empty")
    return _truncating_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min