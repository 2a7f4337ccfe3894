"""Byte-buffer operations over bytearray-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

MAX_ELEMENT_SIZE = 65535


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first n bytes of buf to c (taken modulo 256); return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dest; return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dest, correct even when the two overlap."""
    _check_length(n, dest, src)
    # Taking a snapshot of the source first makes overlapping views safe.
    chunk = bytes(src[:n])
    dest[:n] = chunk
    return dest


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c (mod 256) among the first n, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first unequal bytes within n, or 0 when they match."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size > MAX_ELEMENT_SIZE:
        raise ValueError(f"element size {size} exceeds {MAX_ELEMENT_SIZE}")
    return bytearray(nmemb * size)