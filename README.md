# wiringkit

Small, dependency-free helpers in the style of a microcontroller wiring
library, for use from ordinary Python code.

## Modules

### `wiringkit.chars`

Character classification and case conversion in the plain "C" locale.
Every function takes an integer character code or a one-character `str`.
Only 7-bit ASCII letters, digits and punctuation are recognised.

- Tests: `is_alpha_numeric`, `is_alpha`, `is_ascii`, `is_whitespace`
  (space or tab), `is_control`, `is_digit`, `is_graph`, `is_lower_case`,
  `is_printable`, `is_punct`, `is_space` (space, `\t`, `\n`, `\v`, `\f`,
  `\r`), `is_upper_case`, `is_hexadecimal_digit`.
- Conversions, which return an integer code: `to_ascii` (keeps the low
  7 bits), `to_lower_case`, `to_upper_case`.

A string longer than one character raises `ValueError`. A value that is
neither a string nor an integer raises `TypeError`.

### `wiringkit.core`

- Constants: `HIGH`, `LOW`, `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`,
  `RAD_TO_DEG`, `EULER`, `CHANGE`, `FALLING`, `RISING`, `NOT_A_PIN`,
  `NOT_A_PORT`, `NOT_AN_INTERRUPT`.
- Enums: `BitOrder` (`LSBFIRST`, `MSBFIRST`) and `PinMode` (`INPUT`,
  `OUTPUT`, `INPUT_PULLUP`).
- Math: `constrain(amt, low, high)`, `round_half_away(x)`,
  `radians(deg)`, `degrees(rad)`, `sq(x)`.
- Bits: `bit`, `bit_read`, `bit_set`, `bit_clear`, `bit_toggle`,
  `bit_write`. These return a new value and raise `ValueError` for a
  negative bit index.
- Bytes: `low_byte`, `high_byte`, and `make_word(high, low)`. Called with
  one argument, `make_word` truncates that value to 16 bits.
- `binary_value(name)` gives the value of a name such as `"B00101"`,
  which is `B` followed by one to eight binary digits. Any other name
  raises `ValueError`.

### `wiringkit.numfmt`

- `format_integer(value, base=10)` writes an integer in any base from 2
  to 36 with lower-case digits. In base 10 a negative value gets a minus
  sign. In other bases a negative value is written as its 32-bit two's
  complement.
- `format_unsigned(value, base=10, bits=32)` writes `value` modulo
  `2 ** bits`.
- `dtostrf(value, width, precision)` writes a float with `precision`
  decimals. A positive `width` right-justifies the text and a negative
  one left-justifies it. The text is never cut. NaN and the infinities
  are written as `nan`, `inf` and `-inf`.

### `wiringkit.wstring`

`WString` is a mutable string. It is built from text, another `WString`,
an integer (with a `base`) or a float (with `decimal_places`). Built from
`None`, it is invalid: `bool()` is false and it reads as empty text. It
becomes valid again when non-empty text is appended or when `reserve()`
is called.

- Appending: `concat`, `+=` and `+` take text, a `WString`, an integer
  (base 10) or a float (2 decimals). `concat` raises `ValueError` for
  `None` or an invalid `WString`.
- Comparison: `compare_to`, `equals`, `equals_ignore_case`,
  `starts_with(prefix, offset=None)`, `ends_with`, and the operators
  `==`, `<`, `<=`, `>`, `>=` against `WString` or `str`.
- Access: `char_at` (gives `"\0"` when out of range), `set_char_at`,
  `get_bytes(bufsize, index=0)` (Latin-1 bytes), indexing, iteration
  and `len()`.
- Search: `index_of(needle, from_index=0)` and
  `last_index_of(needle, from_index=None)`. Both return -1 when nothing
  is found.
- Editing in place: `substring(begin, end=None)` (returns a new
  `WString` and reorders swapped bounds), `replace(find, replacement)`,
  `remove(index, count=None)`, `to_lower_case`, `to_upper_case`,
  `trim`.
- Parsing: `to_int`, `to_double` and `to_float` read the leading number
  and give 0 when there is none. `to_float` rounds to single precision.

## What it does not do

The package has no hardware or board access. It does not configure,
read or write pins, read analog values, produce PWM, shift bits out to
pins, measure pulses, provide timing or delays, or do serial, USB or
network I/O. The pin and interrupt constants and the `PinMode` and
`BitOrder` enums are plain values only. The package has no command-line
program.

## Installation

```
pip install .
```

## Examples

```python
from wiringkit.core import constrain, bit_set, make_word, binary_value
from wiringkit.numfmt import dtostrf
from wiringkit.wstring import WString

constrain(300, 0, 255)        # 255
bit_set(0b0001, 3)            # 9
make_word(0x12, 0x34)         # 0x1234
binary_value("B00101010")     # 42
dtostrf(3.14159, 6, 2)        # '  3.14'

s = WString("  Hello, World  ")
s.trim()
s.replace("World", "there")
s.index_of("there")           # 7
str(s)                        # 'Hello, there'
```

## Tests

```
pip install .[test]
pytest
```