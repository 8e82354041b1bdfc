# ftkit

A small library of classic C-style helpers with their well-known semantics,
written for Python values.

## Modules

- `ftkit.chars`: ASCII classification and case mapping (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`). Each function takes
  an integer character code or a one-character string; the classifiers return
  a bool and the case converters return the same kind of value they were given.
- `ftkit.memory`: byte-buffer operations (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`). Targets that are written to must be
  mutable buffers such as `bytearray`. A length larger than a buffer raises
  `IndexError`, a negative one `ValueError`; `calloc` returns a zeroed
  `bytearray` and raises `OverflowError` when `count * size` would not fit in a
  64-bit size. `memchr` returns an index or `None`.
- `ftkit.strings`: string routines (`strlen`, `strlcpy`, `strlcat`, `strncmp`,
  `strchr`, `strrchr`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi`, `striteri`, `itoa`, `atoi`). Searches return an index or
  `None`. `strlcpy` and `strlcat` fill a NUL-terminated `bytearray` and return
  the length of the string they tried to build. `atoi` skips leading
  whitespace, accepts one sign, stops at the first non-digit and wraps the
  result to a signed 32-bit value.
- `ftkit.output`: writing to a file descriptor with `os.write`
  (`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`). `None` strings write
  nothing; `putnbr_fd` writes its number as a signed 32-bit value.
- `ftkit.printf`: a minimal `printf` supporting `%c %s %p %d %i %u %x %X %%`,
  the helpers it is built from (`putchar`, `putstr`, `printptr`, `putnbr`,
  `putu`, `printhex`), and `format`, which returns the text instead of
  writing it.

## Examples

```python
from ftkit.strings import split, atoi, itoa, strtrim
from ftkit.printf import format

split("  hello  world ", " ")        # ['hello', 'world']
atoi("  -42abc")                      # -42
itoa(-2147483648)                     # '-2147483648'
strtrim("xxhixx", "x")                # 'hi'

format("%s is %d (%x) at %p", "n", 255, 255, 4096)
# 'n is 255 (ff) at 0x1000'
```

`printf` and the `put*` helpers write to a text stream (standard output by
default) and return the number of characters written:

```python
import sys
from ftkit.printf import printf

count = printf("%u%%\n", 100, stream=sys.stdout)   # writes "100%\n", returns 5
```

### Conversion rules

- `%d` and `%i` wrap integers to a signed 32-bit value; `%u`, `%x` and `%X`
  to an unsigned 32-bit value.
- `%c` takes a one-character string or an integer, taken modulo 256.
- `%s` with `None` gives `(null)`, and so does a `None` format.
- `%p` with an integer prints that address in lower-case hex after `0x`;
  `None` prints `0x0`; any other object prints its identity.
- An unknown conversion is dropped together with its `%`, and a lone `%` at
  the end of the format produces nothing. Extra arguments are ignored; too few
  raise `TypeError`.

## Limits

`printf` and `format` do not handle flags, field widths, precision or length
modifiers, and there is no command-line program; the package is a library
only.

## Running the tests

```
pip install "ftkit[test]"
pytest
```