"""Byte-buffer helpers working on bytearray and bytes objects."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer size {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must be non-negative")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must be non-negative")
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    if src + n > len(buf) or dst + n > len(buf):
        raise ValueError("move range exceeds buffer size")
    if n and dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf