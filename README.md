# sketchcore

Building blocks familiar from microcontroller sketch programming, written as
plain Python: number-to-text conversion, a mutable string type with the usual
sketch-style methods, `print`/`println` byte sinks, character streams with
timeout-based searching and parsing, a fixed-size ring buffer, IPv4 addresses,
bit helpers and C-locale character classification.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## A quick tour

```python
from sketchcore.noniso import dtostrf, itoa
from sketchcore.common import constrain, map_range, bit_set
from sketchcore.ipaddress import IPAddress
from sketchcore.arduino_string import ArduinoString
from sketchcore.printing import BytesPrint
from sketchcore.stream import BytesStream
from sketchcore.ringbuffer import RingBuffer

dtostrf(3.14159, 7, 2)           # '   3.14'
itoa(-255, 10)                   # '-255'
itoa(255, 16)                    # 'ff'
constrain(300, 0, 255)           # 255
map_range(512, 0, 1023, 0, 255)  # 127
bit_set(0, 3)                    # 8

ip = IPAddress.from_string("192.168.1.10")
str(ip)                          # '192.168.1.10'

s = ArduinoString("  Hello  ")
s.trim()
s.to_upper_case()
str(s)                           # 'HELLO'

out = BytesPrint()
out.print(255, 16)
out.println()
out.getvalue()                   # b'FF\r\n'

stream = BytesStream(b"temp=21.5;", timeout=0)
stream.find("temp=")             # True
stream.parse_float()             # 21.5

ring = RingBuffer(4)
ring.store_char(0x41)
ring.read_char()                 # 65
```

## Modules

- `sketchcore.noniso` – `ulltoa`, `lltoa`, `itoa`, `ltoa`, `utoa`, `ultoa`,
  `dtostrf`, `strrstr`. Integers are treated with 32-bit (or, for `ulltoa` and
  `lltoa`, 64-bit) widths; `itoa` shows a sign only in base 10 and otherwise
  prints the two's-complement value. `ulltoa` and `lltoa` return `None` when
  the value does not fit in the given buffer size.
- `sketchcore.common` – the `PinStatus`, `PinMode` and `BitOrder` enums, math
  constants (`PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`, `RAD_TO_DEG`, `EULER`),
  `constrain`, `radians`, `degrees`, `sq`, `low_byte`, `high_byte`,
  `bit`, `bit_read`, `bit_set`, `bit_clear`, `bit_toggle`, `bit_write`
  (all returning a new value), `make_word` and `map_range` (integer division
  truncating toward zero).
- `sketchcore.ipaddress` – `IPAddress`, a mutable four-octet address built
  from octets, a little-endian 32-bit integer or bytes; `from_string` parses
  dotted-quad text and raises `ValueError` on malformed input. `INADDR_NONE`
  is `0.0.0.0`.
- `sketchcore.strsearch` – `index_of`, `last_index_of`, `substring`,
  `replace`, `remove` and `trim` on plain `str` values, with unsigned-index
  rules (a negative index counts as a very large one).
- `sketchcore.arduino_string` – `ArduinoString`, a mutable string that can be
  *invalid* (made from `None`, or after a failed `+`); it is then falsy.
  It supports `concat`, `+=`, `+`, `compare_to`, `equals`,
  `equals_ignore_case`, `starts_with`, `ends_with`, `char_at`,
  `set_char_at`, `get_bytes`, `index_of`, `last_index_of`, `substring`,
  `replace`, `remove`, `to_lower_case`, `to_upper_case`, `trim`, `to_int`,
  `to_float` and `to_double`, plus comparison operators.
- `sketchcore.printing` – `Printable`, the abstract `Print` (subclasses
  implement `write_byte`; `print`, `println` and `printf` build on it) and
  `BytesPrint`, which collects output in memory and can be bounded with
  `limit`. Integers print in base 10 by default, `base=0` writes the low
  byte raw; floats print with two decimals by default and show `ovf` beyond
  ±4294967040.
- `sketchcore.stream` – `LookaheadMode`, the abstract `Stream` (timed
  `find`, `find_until`, `find_multi`, `parse_int`, `parse_float`,
  `read_bytes`, `read_bytes_until`, `read_string`, `read_string_until`) and
  `BytesStream`, an in-memory stream that reads fed bytes and collects writes
  in `output`. The timeout is in milliseconds; `BytesStream` defaults to 0.
- `sketchcore.ringbuffer` – `RingBuffer`, a fixed-size byte buffer
  (64 bytes by default) that drops bytes when full and returns -1 when empty.
- `sketchcore.wcharacter` – `is_alpha_numeric`, `is_alpha`, `is_ascii`,
  `is_whitespace`, `is_control`, `is_digit`, `is_graph`, `is_lower_case`,
  `is_printable`, `is_punct`, `is_space`, `is_upper_case`,
  `is_hexadecimal_digit`, `to_ascii`, `to_lower_case`, `to_upper_case`.
  Each accepts a character code or a one-character string.

## What the package does not do

It has no notion of time beyond the timeouts that `Stream` measures with the
monotonic clock: there are no millisecond counters, delays or time-of-day
functions. It does not talk to any hardware or network: there are no serial,
I2C, SPI, USB, TCP or UDP interfaces. It provides no command-line program.