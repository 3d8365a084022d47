# minikit

A small toolkit of everyday helpers with no dependencies beyond the standard
library.

## Modules

- `minikit.chars`: character tests `isalnum`, `isalpha`, `isascii`,
  `isdigit` and `isprint`, which take a one-character string or an integer
  code; `tolower` and `toupper`, which return the same kind they were given;
  `atoi`, which parses a leading decimal integer after whitespace and one
  optional sign (a positive value past the 32-bit range gives -1, a negative
  one gives 0); and `itoa`, the decimal text of an integer.
- `minikit.memory`: byte-buffer helpers `memchr` (returns an index or None),
  `memcmp`, `memcpy`, `memmove` (offsets within one `bytearray`, overlap
  allowed), `memset`, `bzero` and `calloc` (a zero-filled `bytearray`). Byte
  counts past the end of a buffer raise `IndexError`.
- `minikit.strings`: `split` (drops empty pieces), `strchr` and `strrchr`
  (indices, or None; searching for `"\0"` finds the end), `strnstr`, `substr`,
  `strtrim`, `strjoin`, `strmapi`, `striteri` (returns the text with any
  replacements the callback gave) and the comparisons `strncmp` and `strcmp`,
  which return the difference of the first unequal character codes.
- `minikit.bounded`: `strlcpy` and `strlcat`, which return the text that fits
  in a buffer of the given size together with the length they tried to make;
  `strdup_extra`, which with `keep_line=True` keeps text up to and including
  the first newline; and `wdcounter`, a word count by separator character.
- `minikit.linked_list`: `Node` and a singly linked `LinkedList`, built from
  an optional iterable, with `push_front`, `push_back`, `last`, `len()`,
  iteration over contents, `clear(delete)`, `iterate(func)` and
  `map(func, delete)`.
- `minikit.line_reader`: `LineReader`, which returns the lines of a text or
  binary stream with their newlines kept while reading it in chunks of a
  fixed size (100 by default), through `next_line()` or iteration; and
  `StatusLineReader`, whose `read()` returns each line without its newline
  and a flag that is True when a newline ended it (chunk size 4200 by
  default).
- `minikit.colors`: the X11 colour-name table. `color_by_name` looks a name
  up without regard to ASCII case and returns 0xRRGGBB, or -1 for `none`;
  unknown names raise `KeyError`. `color_names` lists every distinct name.
- `minikit.image`: `Image`, a zero-filled in-memory pixel buffer (32 bits per
  pixel, little endian by default) with `put_pixel`, `get_pixel` and
  `data_addr`, which returns the buffer, bits per pixel, bytes per row and
  byte order. `rgb_shifts` and `good_color` convert 0xRRGGBB colours for
  visuals of fewer than 24 bits.
- `minikit.xpm`: an XPM reader that builds an `Image` through
  `xpm_to_image` (the XPM strings), `xpm_text_to_image` (the text of an XPM
  file) or `xpm_file_to_image` (a path). Colours are `#RRGGBB` values or
  names from the colour table; transparent pixels are stored as 0xFF000000.
  Its helpers `str_to_wordtab`, `str_str`, `str_str_quoted`,
  `strip_comments` and `text_rgb` are public too.
- `minikit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text or binary stream, standard output by default.

## Installing

```
pip install .
```

Install the test extra and run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from minikit.chars import atoi, itoa
from minikit.strings import split
from minikit.colors import color_by_name

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("  a  bb c ", " ")  # ["a", "bb", "c"]
color_by_name("red")      # 0xff0000
```

Reading the lines of a file:

```python
from minikit.line_reader import LineReader

with open("map.cub", "rb") as stream:
    for line in LineReader(stream, 100):
        ...
```

Loading an XPM image:

```python
from minikit.xpm import xpm_file_to_image

image = xpm_file_to_image("wall.xpm")
image.width, image.height
image.get_pixel(0, 0)
```

## What it does not do

Images live in memory only. The package opens no windows, draws nothing on
screen and has no event loop or input handling; it provides no command-line
program either.