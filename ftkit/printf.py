"""A small printf supporting %c %s %p %d %i %u %x %X and %%.

The ``put*`` helpers write one conversion to a text stream (standard output
by default) and return the number of characters written. Write failures
surface as the stream's own exceptions.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

NULL_TEXT = "(null)"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_INT_MODULUS = 1 << 32
_PTR_MASK = (1 << 64) - 1


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: TextIO | None) -> int:
    _stream(stream).write(text)
    return len(text)


def _char_text(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _str_text(s: str | None) -> str:
    if s is None:
        return NULL_TEXT
    if not isinstance(s, str):
        raise TypeError(f"expected str or None, got {type(s).__name__}")
    return s


def _ptr_text(ptr: Any) -> str:
    if ptr is None:
        address = 0
    elif isinstance(ptr, int):
        address = ptr & _PTR_MASK
    else:
        address = id(ptr) & _PTR_MASK
    return f"0x{address:x}"


def _int_text(n: int) -> str:
    value = operator.index(n) % _INT_MODULUS
    if value >= _INT_MODULUS >> 1:
        value -= _INT_MODULUS
    return str(value)


def _uint_text(n: int) -> str:
    return str(operator.index(n) % _INT_MODULUS)


def _hex_text(n: int, digits: str) -> str:
    if len(digits) != 16:
        raise ValueError(f"expected 16 hexadecimal digits, got {len(digits)}")
    value = operator.index(n) % _INT_MODULUS
    return f"{value:x}".translate(str.maketrans(LOWER_HEX, digits))


def putchar(c: int | str, stream: TextIO | None = None) -> int:
    """Write one character; an integer is taken modulo 256."""
    return _emit(_char_text(c), stream)


def putstr(s: str | None, stream: TextIO | None = None) -> int:
    """Write *s*, or ``(null)`` when it is ``None``."""
    return _emit(_str_text(s), stream)


def printptr(ptr: Any, stream: TextIO | None = None) -> int:
    """Write a pointer as ``0x`` and lower-case hex.

    An integer is the address itself, ``None`` is the null pointer and any
    other object stands for its identity.
    """
    return _emit(_ptr_text(ptr), stream)


def putnbr(n: int, stream: TextIO | None = None) -> int:
    """Write *n* as a signed 32-bit decimal."""
    return _emit(_int_text(n), stream)


def putu(n: int, stream: TextIO | None = None) -> int:
    """Write *n* as an unsigned 32-bit decimal."""
    return _emit(_uint_text(n), stream)


def printhex(n: int, digits: str = LOWER_HEX, stream: TextIO | None = None) -> int:
    """Write *n* as an unsigned 32-bit number in base 16 using *digits*."""
    return _emit(_hex_text(n, digits), stream)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char_text,
    "d": _int_text,
    "i": _int_text,
    "s": _str_text,
    "p": _ptr_text,
    "u": _uint_text,
    "x": lambda n: _hex_text(n, LOWER_HEX),
    "X": lambda n: _hex_text(n, UPPER_HEX),
}


def format(fmt: str | None, *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*.

    A ``None`` format gives ``(null)``. An unknown conversion is dropped
    together with its ``%``; a lone ``%`` at the end produces nothing.
    Extra arguments are ignored; too few raise ``TypeError``.
    """
    if fmt is None:
        return NULL_TEXT
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif (convert := _CONVERSIONS.get(spec)) is not None:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Format and write to *stream*; return the number of characters written."""
    return _emit(format(fmt, *args), stream)