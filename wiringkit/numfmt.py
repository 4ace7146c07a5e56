"""Number-to-text conversions used when building strings from numbers.

Integers are written in any base from 2 to 36 with lower-case digits.
In base 10 a negative value gets a leading minus sign. In any other
base a negative value is written as the two's complement of a 32-bit
long. Floating-point values are written with a fixed number of decimals
and padded to a minimum field width.
"""

from __future__ import annotations

import math

__all__ = ["format_integer", "format_unsigned", "dtostrf"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_LONG_BITS = 32


def _check_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an integer, got {type(base).__name__}")
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    return base


def _check_int(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _digits(value: int, base: int) -> str:
    """Write a non-negative ``value`` in ``base``."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def format_integer(value: int, base: int = 10) -> str:
    """Write a signed integer in ``base``.

    Base 10 prefixes negative values with ``-``. Other bases show a
    negative value as its 32-bit two's complement.
    """
    _check_int(value)
    _check_base(base)
    if value < 0:
        if base == 10:
            return "-" + _digits(-value, base)
        return format_unsigned(value, base, _LONG_BITS)
    return _digits(value, base)


def format_unsigned(value: int, base: int = 10, bits: int = _LONG_BITS) -> str:
    """Write ``value`` as an unsigned integer of ``bits`` bits in ``base``.

    Values outside the range of the type wrap around, as the value is
    reduced modulo ``2 ** bits``.
    """
    _check_int(value)
    _check_base(base)
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")
    return _digits(value % (1 << bits), base)


def dtostrf(value: float, width: int, precision: int) -> str:
    """Write ``value`` with ``precision`` decimals in a field of ``width``.

    A positive width right-justifies the text, a negative width
    left-justifies it in a field of ``abs(width)`` characters. Text
    longer than the field is never cut. Not-a-number and infinities are
    written as ``nan``, ``inf`` and ``-inf``.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError("precision must be an integer")
    if precision < 0:
        raise ValueError(f"precision must not be negative, got {precision}")
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError("width must be an integer")
    number = float(value)
    if math.isnan(number):
        text = "nan"
    elif math.isinf(number):
        text = "-inf" if number < 0 else "inf"
    else:
        text = f"{number:.{precision}f}"
    if width < 0:
        return text.ljust(-width)
    return text.rjust(width)