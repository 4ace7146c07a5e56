"""Board-independent constants, math helpers and bit manipulation."""

from __future__ import annotations

import enum
import re

__all__ = [
    "HIGH",
    "LOW",
    "PI",
    "HALF_PI",
    "TWO_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "EULER",
    "CHANGE",
    "FALLING",
    "RISING",
    "NOT_A_PIN",
    "NOT_A_PORT",
    "NOT_AN_INTERRUPT",
    "BitOrder",
    "PinMode",
    "constrain",
    "round_half_away",
    "radians",
    "degrees",
    "sq",
    "bit",
    "bit_read",
    "bit_set",
    "bit_clear",
    "bit_toggle",
    "bit_write",
    "low_byte",
    "high_byte",
    "make_word",
    "binary_value",
]

HIGH = 0x1
LOW = 0x0

PI = 3.1415926535897932384626433832795
HALF_PI = 1.5707963267948966192313216916398
TWO_PI = 6.283185307179586476925286766559
DEG_TO_RAD = 0.017453292519943295769236907684886
RAD_TO_DEG = 57.295779513082320876798154814105
EULER = 2.718281828459045235360287471352

CHANGE = 1
FALLING = 2
RISING = 3

NOT_A_PIN = 0
NOT_A_PORT = 0
NOT_AN_INTERRUPT = -1

_BINARY_NAME = re.compile(r"B([01]{1,8})")


class BitOrder(enum.IntEnum):
    """Order in which the bits of a byte are shifted."""

    LSBFIRST = 0
    MSBFIRST = 1


class PinMode(enum.IntEnum):
    """Direction and pull-up configuration of a digital pin."""

    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2


def constrain(amt, low, high):
    """Clamp ``amt`` into the range ``low``..``high``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(x + 0.5) if x >= 0 else int(x - 0.5)


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def sq(x):
    """Return ``x`` squared."""
    return x * x


def _check_index(bit_index: int) -> int:
    if bit_index < 0:
        raise ValueError(f"bit index must not be negative, got {bit_index}")
    return bit_index


def bit(b: int) -> int:
    """Return the value with only bit ``b`` set."""
    return 1 << _check_index(b)


def bit_read(value: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``value`` as 0 or 1."""
    return (value >> _check_index(bit_index)) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` set."""
    return value | bit(bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` cleared."""
    return value & ~bit(bit_index)


def bit_toggle(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` flipped."""
    return value ^ bit(bit_index)


def bit_write(value: int, bit_index: int, bit_value) -> int:
    """Return ``value`` with bit ``bit_index`` set if ``bit_value`` is truthy, else cleared."""
    if bit_value:
        return bit_set(value, bit_index)
    return bit_clear(value, bit_index)


def low_byte(w: int) -> int:
    """Return the least significant byte of ``w``."""
    return w & 0xFF


def high_byte(w: int) -> int:
    """Return the second byte of ``w`` (bits 8-15)."""
    return (w >> 8) & 0xFF


def make_word(high: int, low: int | None = None) -> int:
    """Build a 16-bit word from a high and a low byte.

    Called with a single argument, the value is taken as a word already
    and truncated to 16 bits.
    """
    if low is None:
        return high & 0xFFFF
    return ((high & 0xFF) << 8) | (low & 0xFF)


def binary_value(name: str) -> int:
    """Return the value of a binary literal name such as ``"B00101"``.

    The name is ``B`` followed by one to eight binary digits.
    """
    match = _BINARY_NAME.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary constant name: {name!r}")
    return int(match.group(1), 2)