"""Search, trimming and number-parsing rules used by the string class.

These follow the C library semantics the string class is built on:
whitespace is the C locale set, and numbers are read from the longest
valid prefix, giving zero when there is none.
"""

from __future__ import annotations

import re

_C_WHITESPACE = " \t\n\v\f\r"

_LONG_PATTERN = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DECIMAL_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_SPECIAL_FLOAT_PATTERN = re.compile(
    r"([+-]?)(inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)


def _check_index(from_index: int) -> None:
    if from_index < 0:
        raise ValueError(f"index must be non-negative, got {from_index}")


def index_of(text: str, target: str, from_index: int = 0) -> int:
    """Return the first position of ``target`` at or after ``from_index``.

    Returns -1 if it is not found or if ``from_index`` lies past the end.
    """
    _check_index(from_index)
    if from_index >= len(text):
        return -1
    return text.find(target, from_index)


def last_index_of(text: str, target: str, from_index: int | None = None) -> int:
    """Return the last position of ``target`` that starts at or before ``from_index``.

    A single-character target uses character rules: the default start is
    the last character, and a start past the end finds nothing. A longer
    target uses substring rules: the default start is ``len(text) -
    len(target)``, a start past the end is moved back to the last
    character, and an empty target or text finds nothing.
    """
    if from_index is not None:
        _check_index(from_index)
    if len(target) == 1:
        if from_index is None:
            from_index = len(text) - 1
        if from_index < 0 or from_index >= len(text):
            return -1
        return text.rfind(target, 0, from_index + 1)
    if not target or not text or len(target) > len(text):
        return -1
    if from_index is None:
        from_index = len(text) - len(target)
    if from_index >= len(text):
        from_index = len(text) - 1
    return text.rfind(target, 0, from_index + len(target))


def trim_whitespace(text: str) -> str:
    """Strip C-locale whitespace from both ends of ``text``."""
    return text.strip(_C_WHITESPACE)


def parse_long(text: str) -> int:
    """Read a decimal integer from the start of ``text``, after whitespace.

    Returns 0 when no digits follow the optional sign.
    """
    match = _LONG_PATTERN.match(text.lstrip(_C_WHITESPACE))
    return int(match.group()) if match else 0


def parse_double(text: str) -> float:
    """Read a floating-point number from the start of ``text``, after whitespace.

    Accepts decimal and hexadecimal notation, ``inf``, ``infinity`` and
    ``nan``. Returns 0.0 when no number is found.
    """
    body = text.lstrip(_C_WHITESPACE)
    match = _HEX_FLOAT_PATTERN.match(body)
    if match:
        return float.fromhex(match.group())
    match = _DECIMAL_FLOAT_PATTERN.match(body)
    if match:
        return float(match.group())
    match = _SPECIAL_FLOAT_PATTERN.match(body)
    if match:
        sign, word = match.groups()
        name = "nan" if word.lower().startswith("nan") else "inf"
        return float(sign + name)
    return 0.0