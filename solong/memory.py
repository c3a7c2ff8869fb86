"""Byte-buffer helpers: fill, search, compare, copy and move.

Buffers are ``bytearray`` objects (anything supporting the buffer protocol
will do for read-only arguments). Byte values are taken modulo 256, the way
a conversion to ``unsigned char`` would take them. Asking for more bytes than
a buffer holds raises ``ValueError`` instead of running off its end.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"byte value must be an int, got {type(c).__name__}")
    return c & 0xFF


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_count(n)
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if n == 0 or dst == src:
        return buf
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the byte ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf