"""String helpers with C-string semantics expressed on Python strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import groupby
from typing import Any

from ftkit.chars import is_separator


def _code(ch: str) -> int:
    """Return the code of a character, reading the end of a string as 0."""
    return ord(ch) if ch else 0


def count_words(s: str, sep: str) -> int:
    """Count the runs of characters that are not ``sep``."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return sum(
        1 for is_sep, _ in groupby(s, key=lambda ch: is_separator(ch, sep)) if not is_sep
    )


def strlen(s: str | None) -> int:
    """Return the length of ``s``, counting a missing string as empty."""
    return 0 if s is None else len(s)


def strcat(s1: str, s2: str) -> str:
    """Return ``s2`` appended to ``s1``."""
    return s1 + s2


def strncat(s1: str, s2: str, n: int) -> str:
    """Return at most ``n`` characters of ``s2`` appended to ``s1``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return s1 + s2[:n]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if len(c) != 1:
        raise ValueError("expected a single character")
    if c == "\0":
        found = s.find(c)
        return len(s) if found < 0 else found
    found = s.find(c)
    return None if found < 0 else found


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, else 0."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(s1), len(s2))
    return _code(s1[common : common + 1]) - _code(s2[common : common + 1])


def strequ(s1: str | None, s2: str | None) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return the concatenation of both strings, or None when either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def striter(s: str | None, f: Callable[[str], Any] | None) -> None:
    """Call ``f`` on every character of ``s`` in order."""
    if s is None or f is None:
        return
    for ch in s:
        f(ch)


def striteri(s: str | None, f: Callable[[int, str], Any] | None) -> None:
    """Call ``f`` with the index and the character for every character of ``s``."""
    if s is None or f is None:
        return
    for index, ch in enumerate(s):
        f(index, ch)


def strmap(s: str | None, f: Callable[[str], str] | None) -> str | None:
    """Return a new string made of ``f`` applied to every character."""
    if s is None or f is None:
        return None
    return "".join(f(ch) for ch in s)


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Return a new string made of ``f(index, char)`` for every character."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` bytes including the terminator.

    Returns the resulting string and the length the full concatenation would
    have had; when ``size`` is smaller than ``dst``, that length is
    ``len(src) + size`` instead.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    room = max(0, size - 1 - len(dst)) if size else 0
    text = dst + src[:room]
    if size >= len(dst):
        return text, len(src) + len(dst)
    return text, len(src) + size


def array_len(items: Iterable[Any]) -> int:
    """Count the items before the first None."""
    count = 0
    for item in items:
        if item is None:
            break
        count += 1
    return count