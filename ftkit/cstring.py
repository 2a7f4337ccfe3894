"""Functions over NUL-terminated text.

Inputs may be ``str`` or bytes-like objects. The text ends at the first NUL
character, as a C string does. Searches return an index, or ``None`` when
nothing is found.
"""

from __future__ import annotations

import re
from itertools import islice, zip_longest
from typing import List, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
Char = Union[int, str]

_INT_BITS = 32
_LEADING_NUMBER = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")


def _terminated(s: Text) -> Union[str, bytes]:
    """The part of s that comes before the first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        s = bytes(s)
        end = s.find(0)
    return s if end < 0 else s[:end]


def _target(content: Union[str, bytes], c: Char) -> Union[str, bytes]:
    """The character c in the same kind of text as content."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    elif isinstance(c, int) and not isinstance(c, bool):
        code = c
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if isinstance(content, str):
        return chr(code)
    return bytes([code & 0xFF])


def _codes(s: Text) -> List[int]:
    content = _terminated(s)
    if isinstance(content, str):
        return [ord(ch) for ch in content]
    return list(content)


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result of size or more means the copy
    was cut short.
    """
    source = _terminated(bytes(src))
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of {len(dst)} bytes")
    if size == 0:
        return len(source)
    count = min(size - 1, len(source))
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append src to the NUL-terminated text in dst, within size bytes.

    Returns the length of the text it tried to build: the initial length of
    dst (at most size) plus the length of src.
    """
    source = _terminated(bytes(src))
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of {len(dst)} bytes")
    end = dst.find(0, 0, size)
    dlen = size if end < 0 else end
    if dlen == size:
        return len(source) + size
    count = min(len(source), size - 1 - dlen)
    dst[dlen:dlen + count] = source[:count]
    dst[dlen + count] = 0
    return dlen + len(source)


def strchr(s: Text, c: Char) -> Optional[int]:
    """Index of the first c in s; searching for NUL gives the length."""
    content = _terminated(s)
    target = _target(content, c)
    if target in ("\0", b"\0"):
        return len(content)
    index = content.find(target)
    return None if index < 0 else index


def strrchr(s: Text, c: Char) -> Optional[int]:
    """Index of the last c in s; searching for NUL gives the length."""
    content = _terminated(s)
    target = _target(content, c)
    if target in ("\0", b"\0"):
        return len(content)
    index = content.rfind(target)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most n characters; the sign of the result gives the order."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    pairs = islice(zip_longest(_codes(s1), _codes(s2), fillvalue=0), n)
    for x, y in pairs:
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Index of little within the first length characters of big, or None."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    haystack = _terminated(big)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def atoi(text: Text) -> int:
    """Parse a leading decimal integer, after blanks and an optional sign.

    Text that holds no number gives 0. The result wraps like a 32-bit int.
    """
    content = _terminated(text)
    if not isinstance(content, str):
        content = content.decode("latin-1")
    match = _LEADING_NUMBER.match(content)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int(value)


def strdup(s: Text) -> Union[str, bytearray]:
    """A fresh copy of the text before the first NUL."""
    content = _terminated(s)
    if isinstance(content, str):
        return content
    return bytearray(content)