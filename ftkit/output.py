"""Writing characters, text and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftkit.cstring import strlen

Text = Union[str, bytes, bytearray, memoryview]

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    content = s[: strlen(s)]
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def put_char(c: Union[int, str], fd: int) -> None:
    """Write a single character to fd.

    An int is written as one byte; a str must hold one character and is
    written in UTF-8.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes([c])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def put_str(s: Text, fd: int) -> None:
    """Write the text of s before its first NUL to fd."""
    _write_all(fd, _encode(s))


def put_endl(s: Text, fd: int) -> None:
    """Write the text of s followed by a newline to fd."""
    _write_all(fd, _encode(s) + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit integer to fd."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"{n} does not fit in a 32-bit int")
    _write_all(fd, str(n).encode("ascii"))