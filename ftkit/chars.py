"""Character classification for single characters or integer code points."""

from __future__ import annotations

CharLike = str | int


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError("expected a single character or an integer code")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_lower(c: CharLike) -> bool:
    """True for the ASCII lowercase letters."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: CharLike) -> bool:
    """True for the ASCII uppercase letters."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters of either case."""
    return is_upper(c) or is_lower(c)


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def is_separator(c: CharLike, separator: CharLike) -> bool:
    """True when ``c`` is the given separator character."""
    return _code(c) == _code(separator)


def is_space(c: CharLike) -> bool:
    """True for space and the control characters tab through carriage return."""
    code = _code(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def is_whitespace(c: CharLike) -> bool:
    """True for space, newline and tab only."""
    return _code(c) in (ord(" "), ord("\n"), ord("\t"))