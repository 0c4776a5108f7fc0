"""IPv4 addresses that can be built from octets, words or text and printed."""

from __future__ import annotations

from collections.abc import Iterable

from wiringcore.printing import DEC, Print, Printable

_OCTET_COUNT = 4
_DWORD_LIMIT = 1 << 32


def _checked_octets(values: Iterable[object]) -> bytearray:
    octets = bytearray()
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"octets must be integers, got {type(value).__name__}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"octet out of range: {value}")
        octets.append(value)
    if len(octets) != _OCTET_COUNT:
        raise ValueError(f"an address has {_OCTET_COUNT} octets, got {len(octets)}")
    return octets


class IPAddress(Printable):
    """A mutable IPv4 address.

    As a 32-bit word the address is stored little-endian: the first octet is
    the least significant byte of the word.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: object) -> None:
        """Build an address.

        Accepts no arguments (``0.0.0.0``), four octets, a 32-bit word, four
        bytes, or another address.
        """
        if not args:
            self._octets = bytearray(_OCTET_COUNT)
            return
        if len(args) == _OCTET_COUNT:
            self._octets = _checked_octets(args)
            return
        if len(args) != 1:
            raise TypeError(f"IPAddress() takes 0, 1 or 4 arguments ({len(args)} given)")
        (value,) = args
        if isinstance(value, IPAddress):
            self._octets = bytearray(value._octets)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._octets = _checked_octets(bytes(value))
        elif isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value < _DWORD_LIMIT:
                raise ValueError(f"address word out of range: {value}")
            self._octets = bytearray(value.to_bytes(_OCTET_COUNT, "little"))
        else:
            raise TypeError(f"cannot build an address from {type(value).__name__}")

    @classmethod
    def from_string(cls, text: str) -> "IPAddress":
        """Parse dotted-quad text such as ``"192.168.0.1"``.

        Exactly three dots are required; an empty part counts as 0. Raises
        ``ValueError`` on a bad character, a part above 255 or a wrong
        number of dots.
        """
        octets: list[int] = []
        accumulator = 0
        for char in str(text):
            if "0" <= char <= "9":
                accumulator = accumulator * 10 + (ord(char) - ord("0"))
                if accumulator > 0xFF:
                    raise ValueError(f"octet out of range in {text!r}")
            elif char == ".":
                if len(octets) == _OCTET_COUNT - 1:
                    raise ValueError(f"too many dots in {text!r}")
                octets.append(accumulator)
                accumulator = 0
            else:
                raise ValueError(f"invalid character {char!r} in {text!r}")
        if len(octets) != _OCTET_COUNT - 1:
            raise ValueError(f"too few dots in {text!r}")
        octets.append(accumulator)
        return cls(*octets)

    def __int__(self) -> int:
        return int.from_bytes(self._octets, "little")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IPAddress):
            return self._octets == other._octets
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self._octets) == bytes(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other
        return NotImplemented

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        return self._octets[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"octets must be integers, got {type(value).__name__}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"octet out of range: {value}")
        self._octets[index] = value

    def to_bytes(self) -> bytes:
        """Return the four octets in order."""
        return bytes(self._octets)

    def print_to(self, printer: Print) -> int:
        """Print the dotted-quad form to ``printer``; return the bytes written."""
        count = 0
        for octet in self._octets[:-1]:
            count += printer.print(octet, DEC)
            count += printer.print(".")
        count += printer.print(self._octets[-1], DEC)
        return count

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self._octets)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(o) for o in self._octets)})"


INADDR_NONE = IPAddress(0, 0, 0, 0)