"""Character classification and case conversion on character codes.

Every function takes a character code (an ``int``) or a one-character
``str`` and follows the plain "C" locale: only 7-bit ASCII letters,
digits and punctuation are recognised, and codes outside that range
never classify as letters, digits or punctuation.
"""

from __future__ import annotations

__all__ = [
    "is_alpha_numeric",
    "is_alpha",
    "is_ascii",
    "is_whitespace",
    "is_control",
    "is_digit",
    "is_graph",
    "is_lower_case",
    "is_printable",
    "is_punct",
    "is_space",
    "is_upper_case",
    "is_hexadecimal_digit",
    "to_ascii",
    "to_lower_case",
    "to_upper_case",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_HEX_LETTERS = frozenset(map(ord, "abcdefABCDEF"))
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character code, got {type(c).__name__}")
    return c


def is_alpha_numeric(c: int | str) -> bool:
    """True for a letter or a decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for an upper- or lower-case letter."""
    return is_upper_case(c) or is_lower_case(c)


def is_ascii(c: int | str) -> bool:
    """True when ``c`` is a 7-bit value in the ASCII set."""
    return 0 <= _code(c) <= 0x7F


def is_whitespace(c: int | str) -> bool:
    """True for a blank character: a space or a horizontal tab."""
    return _code(c) in (0x20, 0x09)


def is_control(c: int | str) -> bool:
    """True for a control character (0-31 and 127)."""
    code = _code(c)
    return 0 <= code < 0x20 or code == 0x7F


def is_digit(c: int | str) -> bool:
    """True for a decimal digit 0-9."""
    return _code(c) in _DIGITS


def is_graph(c: int | str) -> bool:
    """True for any printable character except space."""
    return 0x21 <= _code(c) <= 0x7E


def is_lower_case(c: int | str) -> bool:
    """True for a lower-case letter."""
    return _code(c) in _LOWER


def is_printable(c: int | str) -> bool:
    """True for any printable character, space included."""
    return 0x20 <= _code(c) <= 0x7E


def is_punct(c: int | str) -> bool:
    """True for a printable character that is neither a space nor alphanumeric."""
    return is_graph(c) and not is_alpha_numeric(c)


def is_space(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return, tab or vertical tab."""
    code = _code(c)
    return code == 0x20 or 0x09 <= code <= 0x0D


def is_upper_case(c: int | str) -> bool:
    """True for an upper-case letter."""
    return _code(c) in _UPPER


def is_hexadecimal_digit(c: int | str) -> bool:
    """True for one of 0-9, a-f or A-F."""
    code = _code(c)
    return code in _DIGITS or code in _HEX_LETTERS


def to_ascii(c: int | str) -> int:
    """Clear the high-order bits so that the result fits in 7 bits."""
    return _code(c) & 0x7F


def to_lower_case(c: int | str) -> int:
    """Convert an upper-case letter to lower case; other codes are unchanged."""
    code = _code(c)
    return code + _CASE_OFFSET if code in _UPPER else code


def to_upper_case(c: int | str) -> int:
    """Convert a lower-case letter to upper case; other codes are unchanged."""
    code = _code(c)
    return code - _CASE_OFFSET if code in _LOWER else code