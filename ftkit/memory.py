"""Byte-buffer helpers working on bytes-like objects.

Writable targets must be mutable buffers such as ``bytearray`` or a
``memoryview`` over one. Lengths are checked: asking for more bytes than a
buffer holds raises ``IndexError`` and a negative length ``ValueError``.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf, c: int, n: int):
    """Fill the first *n* bytes of *buf* with ``c & 0xFF`` and return *buf*."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(buf, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c & 0xFF`` within the first *n* bytes."""
    _check_length(n, buf)
    index = memoryview(buf)[:n].tobytes().find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first mismatch."""
    _check_length(n, s1, s2)
    left = memoryview(s1)[:n].tobytes()
    right = memoryview(s2)[:n].tobytes()
    for a, b in zip(left, right):
        if a != b:
            return a - b
    return 0


def memcpy(dst, src, n: int):
    """Copy *n* bytes from *src* into *dst* and return *dst*."""
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy *n* bytes from *src* into *dst*, safe when the two overlap."""
    _check_length(n, dst, src)
    dst[:n] = memoryview(src)[:n].tobytes()
    return dst