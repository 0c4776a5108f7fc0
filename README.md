# wiringcore

Pure-Python building blocks for microcontroller-style code: bit math, number
formatting, a byte ring buffer, a mutable string class, printers, IPv4
addresses and stream parsing. The rules match a common microcontroller core
API. You can use the package to test firmware logic on a desktop, or anywhere
you need the same formatting, parsing and buffering behaviour.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `wiringcore.binary`

This module holds the deprecated names `B0` … `B11111111`. Every spelling of a
byte value with one to eight binary digits has a name, leading zeros included.

- `binary_literal(name)` returns the value of a name and emits a
  `DeprecationWarning` that suggests the matching `0b` literal. It raises
  `ValueError` for an unknown name.
- `binary_names()` returns every name, ordered by value and then by width.

### `wiringcore.common`

Enums:

- `PinStatus`: `LOW`, `HIGH`, `CHANGE`, `FALLING`, `RISING`.
- `PinMode`: `INPUT`, `OUTPUT`, `INPUT_PULLUP`, `INPUT_PULLDOWN`.
- `BitOrder`: `LSBFIRST`, `MSBFIRST`.

Constants: `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`, `RAD_TO_DEG`, `EULER` and
`ARDUINO_API_VERSION`.

Helpers:

- `constrain`, `radians`, `degrees` and `sq`.
- `low_byte` and `high_byte`.
- `bit`, `bit_read`, `bit_set`, `bit_clear`, `bit_toggle` and `bit_write`.
  These return new integers and raise `ValueError` for a negative bit index.
- `make_word(w)` and `make_word(high, low)`.
- `map_value(x, in_min, in_max, out_min, out_max)`. This is integer re-scaling
  whose division truncates toward zero. It raises `ZeroDivisionError` when the
  input range is empty.

### `wiringcore.conversions`

- `itoa(value, radix)` and `ltoa(value, radix)` format signed integers. Only
  base 10 shows a minus sign. Other bases show the 32-bit two's complement
  pattern.
- `utoa(value, radix)` and `ultoa(value, radix)` format values as unsigned
  32-bit words.
- `dtostrf(value, width, precision)` formats a number with fixed decimals. A
  positive width right-aligns it and a negative width left-aligns it.

Digits above 9 are lower case. The radix must be between 2 and 36.

### `wiringcore.ring_buffer`

`RingBuffer(size=64)` is a byte FIFO with `size` slots, one of which always
stays free. Its methods:

- `store(value)` returns `False` and drops the byte when the buffer is full.
- `read()` and `peek()` return `None` when the buffer is empty.
- `available()`, `available_for_store()`, `is_full()`, `clear()` and `len()`.

### `wiringcore.string_algorithms`

These are the search, trimming and parsing rules that the string class uses:

- `index_of(text, target, from_index=0)` and
  `last_index_of(text, target, from_index=None)`.
- `trim_whitespace(text)`, which strips C-locale whitespace.
- `parse_long(text)` and `parse_double(text)`. Each reads the longest valid
  prefix and gives 0 when there is none.

### `wiringcore.printing`

`Print` is an abstract byte sink. A subclass implements `write_byte(value)`.

- `write(data)` writes text (as UTF-8) or bytes and stops at the first byte
  that fails.
- `print(value, fmt=None)` and `println(value, fmt=None)` handle several kinds
  of value. `println` adds CR LF after the value.
  - Integers take a base: `DEC`, `HEX`, `OCT`, `BIN` or any other base. Digits
    above 9 are upper case. Base 0 writes the low byte raw.
  - Floats take a number of decimal places, 2 by default. They print as
    `nan`, `inf` or `ovf` when out of range.
  - Text, bytes and `Printable` objects take no `fmt`.
- `write_error` and `clear_write_error()` report and reset write errors.
- `available_for_write()` reports free space.
- `flush()` resets the `unflushed` byte count.

`Printable` is the abstract protocol for objects that print themselves with
`print_to(printer)`.

`BufferPrint(limit=None)` collects bytes in memory, and `getvalue()` returns
them. A byte written past `limit` is refused and sets the write error.

### `wiringcore.arduino_string`

`ArduinoString` is a mutable string.

- You can build it from text, another `ArduinoString`, an integer (with an
  optional base) or a float (with optional decimal places). `from_float` also
  builds from a float.
- Built from `None`, the string is *invalid*. It is false in a boolean context
  and otherwise behaves like an empty string.
- Concatenation: `concat`, `+` and `+=`.
- Comparison: `compare_to`, `equals`, `equals_ignore_case` and the `==`, `<`,
  `<=`, `>`, `>=` operators. Ordering is by character codes.
- Prefixes and suffixes: `starts_with` and `ends_with`.
- Character access: `char_at`, `set_char_at` and indexing. Out-of-range reads
  give `"\0"`.
- Extraction: `get_bytes` and `substring`.
- Search: `index_of` and `last_index_of`.
- In-place editing: `replace`, `remove`, `to_lower_case`, `to_upper_case` and
  `trim`.
- Parsing: `to_int`, `to_double`, and `to_float`, which rounds to single
  precision.

### `wiringcore.ip_address`

`IPAddress` is a mutable, printable IPv4 address. You can build it from no
arguments (`0.0.0.0`), four octets, a little-endian 32-bit word, four bytes or
another address.

- `IPAddress.from_string("a.b.c.d")` parses dotted-quad text. It needs exactly
  three dots, and an empty part counts as 0. It raises `ValueError` on bad
  input.
- The address supports `int()`, `==` against addresses, bytes and integers,
  octet indexing and assignment, `to_bytes()`, `str()` and `print_to(printer)`.

`INADDR_NONE` is `0.0.0.0`.

### `wiringcore.stream`

`Stream` is an abstract `Print` that can also be read from. A subclass
implements `available()`, `read()` and `peek()`. Reads wait up to the timeout,
in milliseconds, which you set with `set_timeout`.

Searching:

- `find(target)` and `find_until(target, terminator)` return `True` when the
  target is found.
- `find_multi(targets)` returns the index of the target seen first, or `None`
  on timeout.

Number parsing:

- `parse_int(lookahead, ignore)` and `parse_float(lookahead, ignore)` read a
  number. The `LookaheadMode` (`SKIP_ALL`, `SKIP_NONE`, `SKIP_WHITESPACE`)
  controls how leading characters are skipped. `parse_float` returns a
  single-precision value.

Reading:

- `read_bytes(length)` and `read_bytes_until(terminator, length)` return
  bytes.
- `read_string()` and `read_string_until(terminator)` return text.

`MemoryStream(data=b"", timeout=0)` reads from bytes given up front and
records everything written to it. `getvalue()` returns what was written.

## Example

```python
from wiringcore.printing import BufferPrint
from wiringcore.stream import MemoryStream
from wiringcore.ip_address import IPAddress

out = BufferPrint()
out.print(255, 16)           # writes "FF"
out.println(3.14159, 3)      # writes "3.142\r\n"
print(out.getvalue())        # b'FF3.142\r\n'

stream = MemoryStream(b"temp=-42;", timeout=0)
print(stream.parse_int())    # -42

addr = IPAddress.from_string("192.168.1.10")
print(str(addr), int(addr))
```

## What it does not do

The package contains no hardware access. It has pin-mode and pin-status enums,
but no functions that drive pins, read analog values, generate tones, attach
interrupts, or talk to SPI, I2C, USB or serial devices. `IPAddress` is only a
value type: there are no network clients, servers or UDP sockets. The package
also provides no command-line tool.