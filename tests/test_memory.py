import pytest

from pipex.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"abcdefgh")
    result = memset(buf, ord("C"), 5)
    assert result is buf
    assert buf[:5] == b"C" * 5
    assert buf[5:] == b"fgh"


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"lo"


def test_bzero_zero_count_keeps_buffer():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_calloc():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(b == 0 for b in buf)
    assert calloc(0, 10) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_limit():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_zero_byte():
    data = b"ab\x00cd"
    index = memchr(data, 0x100, len(data))
    assert data[index] == 0


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0
    assert memcmp(b"abc", b"abz", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy():
    src = b"Hello, world!"
    dest = bytearray(20)
    result = memcpy(dest, src, len(src))
    assert result is dest
    assert dest[:len(src)] == src
    assert dest[len(src):] == bytes(20 - len(src))


def test_memcpy_too_long():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 3)
    assert buf == b"abcdef"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)