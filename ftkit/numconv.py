"""Integer and floating-point conversions to and from text."""

from __future__ import annotations

import struct

from ftkit.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INTMAX_MIN = -(2**63)
INTMAX_MAX = 2**63 - 1

_DIGITS_LOWER = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGITS_UPPER = _DIGITS_LOWER.upper()

# Exponents above this are treated as out of range by ``power``.
_POWER_LIMIT = 308


def _check_range(value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise OverflowError(f"{value} is outside [{low}, {high}]")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def abs_value(n: int) -> int:
    """Return the absolute value of ``n``."""
    return n if n >= 0 else -n


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed result.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. When the magnitude overflows a 64-bit signed value the result
    is -1 for a positive number and 0 for a negative one; otherwise it wraps
    to 32 bits.
    """
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if result > INTMAX_MAX:
            return -1 if sign == 1 else 0
    return _wrap_int32(result * sign)


def silen(number: int, base: int) -> int:
    """Count the digits of ``number`` in ``base``, plus one for a minus sign."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if number == 0:
        return 1
    length = 1 if number < 0 else 0
    magnitude = abs(number)
    while magnitude:
        magnitude //= base
        length += 1
    return length


def nblen(n: int) -> int:
    """Count the decimal digits of ``n``, plus one for a minus sign."""
    return silen(n, 10)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    _check_range(n, INT_MIN, INT_MAX)
    return sitoa_base(n, 10)


def litoa(number: int) -> str:
    """Return the decimal text of a 64-bit signed integer."""
    _check_range(number, INTMAX_MIN, INTMAX_MAX)
    return sitoa_base(number, 10)


def sitoa_base(number: int, base: int, uppercase: bool = False) -> str:
    """Return ``number`` written in ``base`` (2 to 36).

    Only base 10 shows a minus sign; in other bases a negative number is
    written as its magnitude.
    """
    if not 2 <= base <= 36:
        raise ValueError("base must be between 2 and 36")
    _check_range(number, INTMAX_MIN, INTMAX_MAX)
    if number == 0:
        return "0"
    digits = _DIGITS_UPPER if uppercase else _DIGITS_LOWER
    magnitude = abs(number)
    out: list[str] = []
    while magnitude:
        magnitude, rest = divmod(magnitude, base)
        out.append(digits[rest])
    if number < 0 and base == 10:
        out.append("-")
    return "".join(reversed(out))


def ftoa(number: float, precision: int) -> str:
    """Format ``number`` with ``precision`` fractional digits, in single precision.

    Digits are truncated, not rounded. The result is cut to 8 characters for
    a positive number and 9 otherwise. A negative number whose integer part
    is zero loses its sign.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    int_part = int(number)
    _check_range(int_part, INT_MIN, INT_MAX)
    frac = _f32(number - int_part)
    if number < 0:
        frac = -frac
    pieces = [itoa(int_part), "."]
    for _ in range(precision):
        frac = _f32(frac * 10)
        pieces.append(str(int(frac) % 10))
    text = "".join(pieces)
    return text[: 8 if number > 0 else 9]


def power(nb: float, exponent: float) -> float:
    """Raise ``nb`` to ``exponent`` by repeated multiplication.

    Stepping the exponent down by one: a negative exponent yields 0, zero
    yields 1, and an exponent above 308 yields 1 at that step.
    """
    steps = 0
    while True:
        if exponent < 0.0:
            tail = 0.0
            break
        if exponent == 0.0 or exponent > _POWER_LIMIT:
            tail = 1.0
            break
        exponent -= 1
        steps += 1
    result = tail
    for _ in range(steps):
        result = nb * result
    return result