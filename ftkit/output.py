"""Write characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import operator
import os

INT_BITS = 32


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _to_bytes(s) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    return bytes(s)


def _to_int32(n: int) -> int:
    modulus = 1 << INT_BITS
    value = operator.index(n) % modulus
    return value - modulus if value >= modulus >> 1 else value


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to *fd*.

    An integer is written as the single byte ``c & 0xFF``; a one-character
    string is written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([operator.index(c) & 0xFF]))


def putstr_fd(s: str | bytes | None, fd: int) -> None:
    """Write *s* to *fd*; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _to_bytes(s))


def putendl_fd(s: str | bytes | None, fd: int) -> None:
    """Write *s* followed by a newline to *fd*; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _to_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of *n*, taken as a 32-bit int, to *fd*."""
    _write_all(fd, str(_to_int32(n)).encode("ascii"))