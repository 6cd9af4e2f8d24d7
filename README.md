# ftkit

A small toolkit of everyday helpers with C-library semantics:

- `ftkit.chars`: ASCII character-class predicates taking a one-character
  string or an integer code (`is_alpha`, `is_alnum`, `is_ascii`, `is_digit`,
  `is_lower`, `is_upper`, `is_print`, `is_space`, `is_whitespace`,
  `is_separator`).
- `ftkit.memory`: byte-buffer operations on `bytearray` (`memalloc`,
  `memset`, `bzero`, `memcpy`, `memccpy`, `memchr`, `memcmp`, `memmove`).
  Positions are returned as indices; `memmove(buf, dst, src, n)` moves bytes
  between offsets of one buffer. Spans that do not fit raise `ValueError`.
- `ftkit.numconv`: integer and float conversion (`abs_value`, `atoi`, `itoa`,
  `litoa`, `sitoa_base`, `ftoa`, `nblen`, `silen`, `power`). `itoa` takes
  32-bit values and `litoa` 64-bit values; values out of range raise
  `OverflowError`. `ftoa` truncates its digits and works in single precision.
- `ftkit.llist`: a singly linked list of `Node` objects (`lst_new`, `lst_add`,
  `lst_iter`, `lst_map`, `lst_del`, `iter_nodes`). Functions that change the
  list return the new head.
- `ftkit.strutil`: string helpers (`count_words`, `strlen`, `strcat`,
  `strncat`, `strchr`, `strcmp`, `strequ`, `strjoin`, `striter`, `striteri`,
  `strmap`, `strmapi`, `strlcat`, `array_len`).
- `ftkit.intarray`: `IntArray`, a growable array of integers parsed from
  space-separated text, with `check_arr_input` to test a token.
- `ftkit.output`: writing characters, strings, lines and numbers to a text
  stream (`put_char`, `put_str`, `put_endl`, `put_nbr`); the stream defaults
  to standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.numconv import atoi, itoa, sitoa_base
from ftkit.strutil import count_words
from ftkit.intarray import IntArray

atoi("  -42abc")            # -42
itoa(-2147483648)           # "-2147483648"
sitoa_base(255, 16, True)   # "FF"
count_words("  hello  world ", " ")  # 2

arr = IntArray("1 2 x 3")   # tokens that are not 32-bit integers are skipped
len(arr)                    # 3
arr.add(1, 10)
str(arr)                    # "1 10 2 3 "
arr.get(99)                 # 0 for an index out of range
```

```python
import sys
from ftkit.output import put_endl, put_nbr

put_endl("hello", sys.stdout)
put_nbr(-123, sys.stdout)
```

## What it does not do

ftkit is a library only: it installs no command, and it has no formatted
printing of its own beyond the `put_*` functions and `IntArray.print`.