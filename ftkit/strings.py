"""String helpers with C-library semantics on Python strings.

Functions that search return an index, or ``None`` when nothing is found.
``strlcpy`` and ``strlcat`` work on NUL-terminated byte buffers
(``bytearray``), because they exist to fill a fixed-size destination.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, MutableSequence
from itertools import zip_longest

INT_BITS = 32

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _char(c: int | str) -> str:
    """Normalise *c* to a one-character string, truncating ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _c_string(src) -> bytes:
    """The bytes of *src* up to, not including, its first NUL."""
    return bytes(src).split(b"\0", 1)[0]


def _check_size(size: int, dst) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise IndexError(f"size {size} exceeds buffer of {len(dst)} bytes")


def strlen(s: str) -> int:
    """Number of characters in *s*."""
    return len(s)


def strlcpy(dst: bytearray, src, size: int) -> int:
    """Copy *src* into *dst*, writing at most *size* bytes including the NUL.

    Returns the length of *src*, so a result ``>= size`` means truncation.
    """
    source = _c_string(src)
    _check_size(size, dst)
    if size:
        copied = source[: size - 1]
        dst[: len(copied)] = copied
        dst[len(copied)] = 0
    return len(source)


def strlcat(dst: bytearray, src, size: int) -> int:
    """Append *src* to the NUL-terminated string in *dst*, bounded by *size*.

    Returns the length of the string it tried to build.
    """
    source = _c_string(src)
    _check_size(size, dst)
    dst_len = dst.find(0, 0, size)
    if dst_len < 0:
        return size + len(source)
    copied = source[: size - dst_len - 1]
    end = dst_len + len(copied)
    dst[dst_len:end] = copied
    dst[end] = 0
    return dst_len + len(source)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first *c* in *s*; a NUL character matches at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last *c* in *s*; a NUL character matches at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of *little* lying wholly within the first *length* characters of *big*."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty pieces."""
    if s is None:
        raise TypeError("split needs a string")
    sep = _char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of *s*."""
    if s is None or f is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, f: Callable) -> None:
    """Call ``f(index, item)`` on each item of *chars* in place.

    When *f* returns something other than ``None``, that value replaces the
    item at that index.
    """
    if chars is None or f is None:
        return
    for index, item in enumerate(chars):
        replacement = f(index, item)
        if replacement is not None:
            chars[index] = replacement


def itoa(n: int) -> str:
    """Decimal representation of the integer *n*."""
    return str(operator.index(n))


def atoi(s: str) -> int:
    """Parse a leading decimal integer, C style, wrapping to a 32-bit int.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. A string with no digits gives 0.
    """
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    modulus = 1 << INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value