"""ASCII character classification and case conversion."""

from __future__ import annotations

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _like(original: int | str, code: int) -> int | str:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + _CASE_OFFSET)
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - _CASE_OFFSET)
    return c