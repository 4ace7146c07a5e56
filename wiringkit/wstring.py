"""A mutable text buffer with the search, edit and conversion rules of the
board runtime's string class.

A ``WString`` is either valid, holding text that may be empty, or
invalid, holding nothing. It is invalid when built from ``None``, and
``bool()`` tells the two states apart. An invalid string reads as empty
text. Appending non-empty text, or calling :meth:`WString.reserve`,
makes it valid again.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterator

from .chars import to_lower_case, to_upper_case
from .numfmt import dtostrf, format_integer

__all__ = ["WString"]

_SPACE = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _strcmp(a: str, b: str) -> int:
    """Compare like the C library: difference of the first differing codes."""
    for x, y in zip(a + "\0", b + "\0"):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            return 0
    return 0


def _rfind_upto(text: str, needle: str, from_index: int | None) -> int:
    """Last start of ``needle`` in ``text`` that is not after ``from_index``."""
    if not needle or not text or len(needle) > len(text):
        return -1
    if from_index is None:
        from_index = len(text) - len(needle)
    if from_index < 0:
        return -1
    from_index = min(from_index, len(text) - 1)
    return text.rfind(needle, 0, from_index + len(needle))


def _convert(value, base: int, decimal_places: int) -> str | None:
    if value is None:
        return None
    if isinstance(value, WString):
        return value._text
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return dtostrf(value, decimal_places + 2, decimal_places)
    if isinstance(value, int):
        return format_integer(value, base)
    raise TypeError(f"cannot build a string from {type(value).__name__}")


def _piece(value) -> str:
    """The text that appending ``value`` adds."""
    if value is None:
        raise ValueError("cannot append None")
    if isinstance(value, WString):
        if value._text is None:
            raise ValueError("cannot append an invalid string")
        return value._text
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return dtostrf(value, 4, 2)
    if isinstance(value, int):
        return format_integer(value, 10)
    raise TypeError(f"cannot append {type(value).__name__}")


def _as_wstring(value) -> WString:
    if isinstance(value, WString):
        return value
    if value is None or isinstance(value, str):
        return WString(value)
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _needle(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, WString):
        if value._text is None:
            raise ValueError("cannot search for an invalid string")
        return value._text
    raise TypeError(f"expected a string, got {type(value).__name__}")


class WString:
    """Mutable string with the runtime's rules for searching and editing."""

    __slots__ = ("_text",)
    __hash__ = None  # mutable

    def __init__(self, value="", base: int = 10, decimal_places: int = 2) -> None:
        """Build from text, another ``WString``, an integer or a float.

        Integers are written in ``base``; floats with ``decimal_places``
        decimals, right-justified in a field of ``decimal_places + 2``.
        ``None`` gives an invalid string.
        """
        self._text: str | None = _convert(value, base, decimal_places)

    # memory management

    def reserve(self, size: int) -> None:
        """Make room for ``size`` characters; an invalid string becomes valid."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if self._text is None:
            self._text = ""

    # concatenation

    def concat(self, value) -> None:
        """Append text, a ``WString``, an integer (base 10) or a float (2 decimals).

        Raises ``ValueError`` for ``None`` or an invalid ``WString``.
        """
        piece = _piece(value)
        if not piece:
            return
        self._text = (self._text or "") + piece

    def __iadd__(self, other) -> WString:
        self.concat(other)
        return self

    def __add__(self, other) -> WString:
        try:
            piece = _piece(other)
        except TypeError:
            return NotImplemented
        except ValueError:
            return WString(None)
        result = WString(self)
        if piece:
            result._text = (result._text or "") + piece
        return result

    def __radd__(self, other) -> WString:
        if isinstance(other, (str, int, float)) and not isinstance(other, bool):
            return WString(other) + self
        return NotImplemented

    # comparison

    def compare_to(self, other) -> int:
        """Negative, zero or positive as this string sorts before, with or after ``other``."""
        other = _as_wstring(other)
        a, b = self._text, other._text
        if a is None or b is None:
            if b:
                return -ord(b[0])
            if a:
                return ord(a[0])
            return 0
        return _strcmp(a, b)

    def equals(self, other) -> bool:
        """True when the text equals ``other`` (a ``WString``, text or ``None``)."""
        if isinstance(other, WString):
            return len(self) == len(other) and self.compare_to(other) == 0
        if other is None or isinstance(other, str):
            text = self._text or ""
            if not text:
                return not other or other[0] == "\0"
            if other is None:
                return text[0] == "\0"
            return _strcmp(text, other) == 0
        raise TypeError(f"cannot compare with {type(other).__name__}")

    def equals_ignore_case(self, other) -> bool:
        """True when both texts match, ignoring the case of ASCII letters."""
        other = _as_wstring(other)
        if other is self:
            return True
        a, b = self._text or "", other._text or ""
        if len(a) != len(b):
            return False
        return all(to_lower_case(x) == to_lower_case(y) for x, y in zip(a, b))

    def starts_with(self, prefix, offset: int | None = None) -> bool:
        """True when ``prefix`` appears at ``offset`` (the start by default)."""
        prefix = _as_wstring(prefix)
        text = self._text
        if offset is None:
            if len(self) < len(prefix):
                return False
            offset = 0
        if text is None or prefix._text is None or offset < 0:
            return False
        if offset + len(prefix) > len(text):
            return False
        return text.startswith(prefix._text, offset)

    def ends_with(self, suffix) -> bool:
        """True when the text ends with ``suffix``."""
        suffix = _as_wstring(suffix)
        text = self._text
        if text is None or suffix._text is None or len(text) < len(suffix):
            return False
        return text.endswith(suffix._text)

    def __eq__(self, other) -> bool:
        if isinstance(other, (WString, str)):
            return self.equals(other)
        return NotImplemented

    def __lt__(self, other) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, (WString, str)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # character access

    def char_at(self, index: int) -> str:
        """The character at ``index``, or ``"\\0"`` when out of range."""
        text = self._text or ""
        if 0 <= index < len(text):
            return text[index]
        return "\0"

    def set_char_at(self, index: int, c: str) -> None:
        """Replace the character at ``index``; out-of-range indices are ignored."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        text = self._text
        if text is not None and 0 <= index < len(text):
            self._text = text[:index] + c + text[index + 1:]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Up to ``bufsize - 1`` characters from ``index``, Latin-1 encoded."""
        if bufsize <= 0:
            return b""
        text = self._text or ""
        if index < 0 or index >= len(text):
            return b""
        count = min(bufsize - 1, len(text) - index)
        return text[index:index + count].encode("latin-1")

    def __getitem__(self, index):
        return (self._text or "")[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._text or "")

    # search

    def index_of(self, needle, from_index: int = 0) -> int:
        """First position of ``needle`` at or after ``from_index``, or -1."""
        found = _needle(needle)
        text = self._text or ""
        if from_index < 0 or from_index >= len(text):
            return -1
        return text.find(found, from_index)

    def last_index_of(self, needle, from_index: int | None = None) -> int:
        """Last position of ``needle`` starting at or before ``from_index``, or -1.

        For a single character, a ``from_index`` past the end gives -1;
        for longer text it is clamped to the last character.
        """
        found = _needle(needle)
        text = self._text or ""
        if isinstance(needle, str) and len(needle) == 1:
            if from_index is None:
                from_index = len(text) - 1
            if from_index < 0 or from_index >= len(text):
                return -1
            return text.rfind(found, 0, from_index + 1)
        return _rfind_upto(text, found, from_index)

    def substring(self, begin: int, end: int | None = None) -> WString:
        """The text between ``begin`` and ``end``; swapped bounds are reordered."""
        text = self._text or ""
        if end is None:
            end = len(text)
        if begin < 0 or end < 0:
            raise ValueError("substring bounds must not be negative")
        if begin > end:
            begin, end = end, begin
        if begin >= len(text):
            return WString()
        return WString(text[begin:min(end, len(text))])

    # modification

    def replace(self, find, replacement) -> None:
        """Replace every occurrence of ``find`` with ``replacement``.

        When the replacement is longer, matches are taken from the end
        of the text backwards.
        """
        pattern = _needle(find)
        if isinstance(replacement, WString):
            new = replacement._text or ""
        elif isinstance(replacement, str):
            new = replacement
        else:
            raise TypeError(f"expected a string, got {type(replacement).__name__}")
        text = self._text
        if not text or not pattern:
            return
        if len(new) <= len(pattern):
            self._text = text.replace(pattern, new)
            return
        index = len(text) - 1
        while index >= 0:
            index = _rfind_upto(text, pattern, index)
            if index < 0:
                break
            text = text[:index] + new + text[index + len(pattern):]
            index -= 1
        self._text = text

    def remove(self, index: int, count: int | None = None) -> None:
        """Delete ``count`` characters from ``index`` (all of the rest by default)."""
        if index < 0:
            raise ValueError(f"index must not be negative, got {index}")
        if count is not None and count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        text = self._text
        if text is None or index >= len(text):
            return
        if count is None:
            count = len(text) - index
        if count == 0:
            return
        self._text = text[:index] + text[index + count:]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        if self._text is not None:
            self._text = "".join(chr(to_lower_case(c)) for c in self._text)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        if self._text is not None:
            self._text = "".join(chr(to_upper_case(c)) for c in self._text)

    def trim(self) -> None:
        """Strip leading and trailing white space in place."""
        if self._text:
            self._text = self._text.strip(_SPACE)

    # parsing

    def to_int(self) -> int:
        """The leading decimal integer of the text, or 0 if there is none."""
        match = _INT_PREFIX.match(self._text or "")
        return int(match.group(1)) if match else 0

    def to_double(self) -> float:
        """The leading floating-point number of the text, or 0.0 if there is none."""
        match = _FLOAT_PREFIX.match(self._text or "")
        return float(match.group(1)) if match else 0.0

    def to_float(self) -> float:
        """:meth:`to_double` rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    # protocol

    def __len__(self) -> int:
        return len(self._text or "")

    def __bool__(self) -> bool:
        return self._text is not None

    def __str__(self) -> str:
        return self._text or ""

    def __repr__(self) -> str:
        return f"WString({self._text!r})"