"""Building new strings from existing ones."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    _require_str(s)
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    _require_str(s1, s2)
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s without the characters of charset at either end."""
    _require_str(s, charset)
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """The non-empty runs of s between occurrences of the character sep."""
    _require_str(s, sep)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of f(index, char) for each char of s.

    f is called from the last character back to the first.
    """
    _require_str(s)
    mapped = []
    for index, ch in reversed(list(enumerate(s))):
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must give one character, got {result!r}")
        mapped.append(result)
    return "".join(reversed(mapped))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call f(index, item) on each item in order, storing what it returns.

    An item is left as it was when f returns None.
    """
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result