"""Integer and floating-point to text conversions."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORD_BITS = 32


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")


def _unsigned_to_text(value: int, radix: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def _signed_to_text(value: int, radix: int) -> str:
    _check_radix(radix)
    mask = (1 << _WORD_BITS) - 1
    unsigned = value & mask
    if radix == 10:
        signed = unsigned - (1 << _WORD_BITS) if unsigned >> (_WORD_BITS - 1) else unsigned
        if signed < 0:
            return "-" + _unsigned_to_text(-signed, 10)
        return _unsigned_to_text(signed, 10)
    return _unsigned_to_text(unsigned, radix)


def itoa(value: int, radix: int) -> str:
    """Format a signed integer in ``radix``.

    Only base 10 shows a minus sign; other bases show the two's complement
    bit pattern of a 32-bit word.
    """
    return _signed_to_text(value, radix)


def ltoa(value: int, radix: int) -> str:
    """Format a signed long integer in ``radix``, like :func:`itoa`."""
    return _signed_to_text(value, radix)


def utoa(value: int, radix: int) -> str:
    """Format an unsigned integer in ``radix``, wrapping to 32 bits."""
    _check_radix(radix)
    return _unsigned_to_text(value & ((1 << _WORD_BITS) - 1), radix)


def ultoa(value: int, radix: int) -> str:
    """Format an unsigned long integer in ``radix``, like :func:`utoa`."""
    return utoa(value, radix)


def dtostrf(value: float, width: int, precision: int) -> str:
    """Format ``value`` with ``precision`` decimals in a field of ``width``.

    A positive width right-aligns the number, a negative one left-aligns it.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    text = f"{value:.{precision}f}"
    if width < 0:
        return text.ljust(-width)
    return text.rjust(width)