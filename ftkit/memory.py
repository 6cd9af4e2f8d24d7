"""Byte-buffer operations on bytearray objects."""

from __future__ import annotations

from collections.abc import Sequence

Buffer = bytearray | bytes | memoryview


def _check_span(buf: Sequence[int], start: int, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"span [{start}, {start + n}) does not fit in a buffer of {len(buf)} bytes"
        )


def memalloc(size: int) -> bytearray:
    """Return a zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_span(dst, 0, n)
    _check_span(src, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> int | None:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the index in ``dst`` just past the copied ``c``, or None when
    ``c`` was not found among the first ``n`` bytes.
    """
    _check_span(dst, 0, n)
    _check_span(src, 0, n)
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    if found < 0:
        dst[:n] = chunk
        return None
    dst[: found + 1] = chunk[: found + 1]
    return found + 1


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_span(buf, 0, n)
    found = bytes(buf[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, else 0."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dst``; regions may overlap."""
    _check_span(buf, src, n)
    _check_span(buf, dst, n)
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf