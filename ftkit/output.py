"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.numconv import itoa


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an integer is taken as a code truncated to a byte."""
    if isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    elif isinstance(c, str) and len(c) == 1:
        ch = c
    else:
        raise ValueError("expected a single character or an integer code")
    _stream(stream).write(ch)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is not None:
        _stream(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is not None:
        out = _stream(stream)
        out.write(s)
        out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _stream(stream).write(itoa(n))