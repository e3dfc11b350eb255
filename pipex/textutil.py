"""String helpers: parsing, searching, slicing and bounded copying."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign. Parsing stops at
    the first non-digit; text without digits gives 0. A ``+`` directly
    followed by ``-`` is not treated as a sign, so ``"+-5"`` gives 0.
    """
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    if text[i:i + 1] == "+" and text[i + 1:i + 2] != "-":
        i += 1
    sign = 1
    if text[i:i + 1] == "-":
        sign = -1
        i += 1
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def strlen(s: str) -> int:
    """Return the length of ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, ``len(s)`` for NUL, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, ``len(s)`` for NUL, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None."""
    if not little:
        return 0
    limit = max(0, min(length, len(big)))
    index = big.find(little, 0, limit)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str | None, chars: str | None) -> str:
    """Strip characters in ``chars`` from both ends of ``s``."""
    if s is None and chars is None:
        return ""
    if s is None or chars is None:
        raise TypeError("both the string and the character set are required")
    return s.strip(chars)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters; empty when
    ``size`` is 0) and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had, with the destination length capped at ``size``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    dest_length = len(dst)
    result = dst
    if size > 0 and dest_length < size - 1:
        room = size - 1 - dest_length
        result = dst + src[:room]
    return result, min(dest_length, size) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string built from ``f(index, char)`` for each character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[str] | None, f: Callable[[int, str], str | None] | None
) -> None:
    """Call ``f(index, char)`` on each element of ``s`` in place.

    When ``f`` returns a value other than None it replaces the element.
    Nothing happens if either argument is None.
    """
    if s is None or f is None:
        return
    for i, ch in enumerate(list(s)):
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = replacement