import pytest

from minikit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_treats_value_as_unsigned_char():
    data = bytes([1, 2, 255, 4])
    assert memchr(data, -1, 4) == 2
    assert memchr(data, 255 + 256, 4) == 2


def test_memchr_zero_length():
    assert memchr(b"abc", ord("a"), 0) is None


def test_memcmp_equal_prefix():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_sign_and_value():
    a, b = b"abcd", b"abzd"
    assert memcmp(a, b, 4) == a[2] - b[2]
    assert memcmp(b, a, 4) > 0


def test_memcmp_compares_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_past_end_raises():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd......")


def test_memcpy_zero_length_leaves_buffer():
    dst = bytearray(b"xyz")
    assert memcpy(dst, b"abc", 0) == bytearray(b"xyz")


def test_memcpy_too_long_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abcd", 4)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"ababcdeh")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"cdefgfgh")


def test_memmove_matches_copy_of_source():
    original = bytes(range(20))
    buf = bytearray(original)
    memmove(buf, 5, 3, 10)
    assert bytes(buf[5:15]) == original[3:13]
    assert bytes(buf[:5]) == original[:5]
    assert bytes(buf[15:]) == original[15:]


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    memset(buf, ord("x"), 3)
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_memset_negative_count_raises():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


def test_bzero():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf == bytearray(b"\x00\x00\x00\x00ef")


def test_calloc_is_zeroed_and_sized():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_result_is_writable():
    buf = calloc(2, 2)
    memset(buf, 7, 4)
    assert list(buf) == [7, 7, 7, 7]


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)