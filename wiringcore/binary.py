"""Named binary constants of the form ``B0`` .. ``B11111111``.

Every spelling of a byte value with one to eight binary digits, leading
zeros included, has a name: ``B1``, ``B01`` and ``B00000001`` all mean 1.
These names are deprecated in favour of ``0b`` literals, so looking one
up emits a :class:`DeprecationWarning` that names the literal to use.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator

_MAX_DIGITS = 8
_PREFIX = "B"


def _generate() -> Iterator[tuple[str, int]]:
    """Yield ``(name, value)`` pairs, ordered by value and then by width."""
    for value in range(1 << _MAX_DIGITS):
        shortest = max(1, value.bit_length())
        for width in range(shortest, _MAX_DIGITS + 1):
            yield f"{_PREFIX}{value:0{width}b}", value


_CONSTANTS: dict[str, int] = dict(_generate())


def binary_literal(name: str) -> int:
    """Return the value of the binary constant called ``name``.

    Raises ``ValueError`` if ``name`` is not one of the defined constants.
    Emits a ``DeprecationWarning`` suggesting the equivalent ``0b`` literal.
    """
    try:
        value = _CONSTANTS[name]
    except (KeyError, TypeError):
        raise ValueError(f"unknown binary constant: {name!r}") from None
    warnings.warn(
        f"use 0b{name[len(_PREFIX):]} instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return value


def binary_names() -> tuple[str, ...]:
    """Return every constant name, ordered by value and then by width."""
    return tuple(_CONSTANTS)