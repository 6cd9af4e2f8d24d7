"""A growable array of 32-bit integers built from space-separated text."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from ftkit.chars import is_digit
from ftkit.numconv import INT_MAX, INT_MIN, atoi


def _is_number(token: str) -> bool:
    body = token[1:] if token.startswith("-") else token
    return bool(body) and all(is_digit(ch) for ch in body)


def check_arr_input(token: str) -> bool:
    """Return True when ``token`` is rejected as an array element.

    A token is accepted when it is an optional minus sign followed by decimal
    digits and its value fits in a 32-bit signed integer.
    """
    if not _is_number(token):
        return True
    return not INT_MIN <= int(token) <= INT_MAX


def _parse(text: str) -> list[int]:
    tokens = (piece for piece in text.split(" ") if piece)
    return [atoi(token) for token in tokens if not check_arr_input(token)]


class IntArray:
    """Integers read from space-separated text; invalid tokens are skipped."""

    def __init__(self, text: str = "") -> None:
        self._items: list[int] = _parse(text)

    def cat(self, text: str) -> None:
        """Append the valid integers found in ``text``."""
        self._items.extend(_parse(text))

    def add(self, index: int, nbr: int) -> None:
        """Insert ``nbr`` before position ``index``; ``index`` may equal the length.

        An index outside ``0..len(self)`` leaves the array unchanged.
        """
        if 0 <= index <= len(self._items):
            self._items.insert(index, nbr)

    def _delete_one(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def delete(self, index: int, *args: int) -> None:
        """Delete the element at ``index`` and then at each index in ``args``.

        The extra indices refer to positions before any deletion, given in
        ascending order: the k-th of them is shifted down by k. Indices out
        of range are ignored.
        """
        self._delete_one(index)
        for shift, extra in enumerate(args, start=1):
            self._delete_one(extra - shift)

    def get(self, index: int) -> int:
        """Return the element at ``index``, or 0 when the index is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return 0

    def set(self, index: int, nbr: int) -> None:
        """Replace the element at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._items):
            self._items[index] = nbr

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntArray({self._items!r})"

    def __str__(self) -> str:
        return "".join(f"{nbr} " for nbr in self._items)

    def print(self, stream: TextIO | None = None) -> None:
        """Write every element followed by a space, then a newline."""
        out = sys.stdout if stream is None else stream
        out.write(f"{self}\n")