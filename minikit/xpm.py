"""Reading XPM images into :class:`~minikit.image.Image` buffers.

XPM data is a header line ``"width height ncolors chars_per_pixel"``, then
one line per colour (``<key> c <colour>``), then one line of keys per pixel
row. Colours are ``#RRGGBB`` hex values or names from the colour table; the
name ``None`` marks a transparent pixel, stored as 0xFF000000.
"""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional, Union

from .chars import atoi
from .colors import color_by_name
from .image import Image

_TRANSPARENT = 0xFF000000
# Colour names with a suffix word are joined in a buffer of this many bytes.
_NAME_BUFFER = 64
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")


def str_to_wordtab(text: str) -> list[str]:
    """The words of ``text`` separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def str_str(text: str, find: str) -> Optional[int]:
    """Index of the first ``find`` in ``text``, or None."""
    index = text.find(find)
    return None if index < 0 else index


def str_str_quoted(text: str, find: str) -> Optional[int]:
    """Index of the first ``find`` in ``text`` that lies outside double
    quotes, or None."""
    if not find:
        raise ValueError("the text to find must not be empty")
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return None


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """``text`` with C comments outside quotes replaced by spaces.

    The length of the text is kept. A line comment is blanked together with
    the newline that ends it.
    """
    while (begin := str_str_quoted(text, "/*")) is not None:
        end = str_str(text[begin + 2:], "*/")
        if end is None:
            raise ValueError("unterminated comment in XPM data")
        text = _blank(text, begin, begin + end + 4)
    while (begin := str_str_quoted(text, "//")) is not None:
        end = str_str(text[begin + 2:], "\n")
        stop = len(text) if end is None else begin + end + 3
        text = _blank(text, begin, stop)
    return text


def _to_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_rgb(name: str, suffix: Optional[str] = None) -> int:
    """The 0xRRGGBB value of an XPM colour specification.

    ``#`` introduces a hex value. Otherwise the name, joined with
    ``suffix`` by a space when one is given, is looked up in the colour
    table; unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        digits = match.group(2)
        value = int(digits, 16) if digits else 0
        if match.group(1) == "-":
            value = -value
        return _to_c_int(value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER - 1]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _parse(lines: Iterator[str]) -> Image:
    def next_line() -> str:
        try:
            return next(lines)
        except StopIteration:
            raise ValueError("XPM data ends early") from None

    header = str_to_wordtab(next_line())
    if len(header) < 4:
        raise ValueError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError("XPM header values must be positive")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise ValueError(f"XPM colour line has no colour: {line!r}") from None
        if index + 1 >= len(words):
            raise ValueError(f"XPM colour line has no colour: {line!r}")
        suffix = words[index + 2] if index + 2 < len(words) else None
        rgb = text_rgb(words[index + 1], suffix)
        key = line[:cpp]
        # Short keys take the last definition, longer keys the first.
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """An image from XPM data given as its separate strings."""
    return _parse(iter(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_text_to_image(text: str) -> Image:
    """An image from the text of an XPM file: its quoted strings, with
    comments ignored."""
    return _parse(_quoted_strings(strip_comments(text)))


def xpm_file_to_image(path: Union[str, os.PathLike]) -> Image:
    """An image read from an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return xpm_text_to_image(handle.read())