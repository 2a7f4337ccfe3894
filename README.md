# ftkit

A small library of helpers for character tests, byte buffers, NUL-terminated
text, writing to file descriptors, and a singly linked list.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes an integer code or a one-character
  string; only ASCII letters and digits count. `to_upper` and `to_lower`
  return a value of the same kind they were given.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`. Writes go to a `bytearray` (or writable `memoryview`); sources may
  be any bytes-like object. A length larger than a buffer raises
  `ValueError`. `memchr` returns an index or `None`. `calloc` returns a zeroed
  `bytearray` and refuses element sizes above 65535.
- `ftkit.cstring`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `atoi`, `strdup`. Text may be `str` or bytes-like and
  ends at the first NUL. Searches return an index or `None`. `strlcpy` and
  `strlcat` write into a `bytearray` and return the length of the text they
  tried to build. `atoi` skips leading blanks, reads an optional sign and
  digits, returns 0 when there is no number, and wraps to a 32-bit int.
- `ftkit.strutil`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`, `strmapi`,
  `striteri`. `split` drops empty pieces; `strmapi` builds a new string from
  `f(index, char)`; `striteri` calls `f(index, item)` on a mutable sequence
  and stores any non-`None` result back in place.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to
  a file descriptor. Strings are written in UTF-8; `put_nbr` accepts only
  values that fit in a 32-bit int.
- `ftkit.linkedlist`: `Node`, `LinkedList` and `delete_node`. A
  `LinkedList` supports `push_front`, `push_back`, `len()`, iteration,
  `last`, `clear`, `iterate` and `map`. `clear` and `map` take an optional
  function that receives each content as it is released.

## Examples

```python
from ftkit.strutil import split, itoa, strtrim
from ftkit.cstring import atoi, strchr
from ftkit.linkedlist import LinkedList

split("  hello  world ", " ")      # ['hello', 'world']
itoa(-2147483648)                   # '-2147483648'
strtrim("xxabcxx", "x")             # 'abc'
atoi("   -42abc")                   # -42
strchr("hello", "l")                # 2

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                          # 5
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30, 40]
```

```python
import sys
from ftkit.output import put_nbr, put_endl

put_nbr(-123, sys.stdout.fileno())
put_endl("", sys.stdout.fileno())
```

## What it does not do

ftkit is a library only: it installs no command-line program.