import pytest

from ftkit.memory import (
    MAX_ELEMENT_SIZE,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == bytearray(b"xxxxx world")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_length_beyond_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\x00\x00\x00def")


def test_bzero_zero_length_keeps_buffer():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == bytearray(b"abc")


def test_memcpy_copies_bytes():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd\x00\x00")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 5)
    assert bytes(result) == b"1234589"
    assert buf == bytearray(b"121234589")


def test_memmove_overlap_backward():
    buf = bytearray(b"123456789")
    view = memoryview(buf)
    result = memmove(view, view[2:], 5)
    assert bytes(result) == b"345676789"
    assert buf == bytearray(b"345676789")


def test_memmove_matches_memcpy_without_overlap():
    a = bytearray(5)
    b = bytearray(5)
    memmove(a, b"hello", 5)
    memcpy(b, b"hello", 5)
    assert a == b == bytearray(b"hello")


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_length():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_nul_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == 2


def test_memchr_value_taken_mod_256():
    data = b"\x01\x02\x03"
    assert memchr(data, 0x102, 3) == memchr(data, 2, 3)


def test_memcmp_equal():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    pairs = [(b"hello", b"help!"), (b"\x80abc", b"\x7fabc"), (b"same", b"same")]
    for a, b in pairs:
        assert memcmp(a, b, 4) == -memcmp(b, a, 4)


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_calloc_zeroed():
    buf = calloc(4, 3)
    assert buf == bytearray(12)


def test_calloc_zero_members():
    assert calloc(0, 10) == bytearray()


def test_calloc_size_limit():
    assert len(calloc(1, MAX_ELEMENT_SIZE)) == MAX_ELEMENT_SIZE
    with pytest.raises(ValueError):
        calloc(1, MAX_ELEMENT_SIZE + 1)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, -1)