"""Splitting command lines into words with single and double quote handling."""

from __future__ import annotations

from collections.abc import Iterator


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def _word_spans(text: str, sep: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of each word; separators inside quotes do not split."""
    i, n = 0, len(text)
    while i < n:
        while i < n and text[i] == sep:
            i += 1
        if i >= n:
            break
        start = i
        in_double = in_single = False
        while i < n and (text[i] != sep or in_double or in_single):
            ch = text[i]
            if ch == '"' and not in_single:
                in_double = not in_double
            elif ch == "'" and not in_double:
                in_single = not in_single
            i += 1
        yield start, i


def _strip_quotes(raw: str) -> str:
    """Drop the quote characters that open or close a quoted section."""
    kept = []
    in_double = in_single = False
    for ch in raw:
        if ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "'" and not in_double:
            in_single = not in_single
        else:
            kept.append(ch)
    return "".join(kept)


def count_words(text: str, sep: str) -> int:
    """Return how many words ``split_words`` would produce."""
    _check_sep(sep)
    return sum(1 for _ in _word_spans(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping quoted sections together and removing their quotes."""
    _check_sep(sep)
    return [_strip_quotes(text[start:end]) for start, end in _word_spans(text, sep)]