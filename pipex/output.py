"""Unbuffered writes of characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str | int, fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    if fd < 0:
        return
    data = bytes([c & 0xFF]) if isinstance(c, int) else c.encode()
    _write_all(fd, data)


def put_str(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for None or a negative descriptor."""
    if fd < 0 or s is None:
        return
    _write_all(fd, s.encode())


def put_endl(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    if fd < 0 or s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if fd < 0:
        return
    _write_all(fd, str(n).encode())