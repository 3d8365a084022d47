"""String helpers: search, slicing, trimming, joining, mapping and comparison.

Positions are returned as indices into the text, or None where nothing is
found. Comparisons work on character codes and treat the end of a string as
a terminating code 0, so a shorter string compares below a longer one that
it prefixes.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Callable, Iterator, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are cut to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a one-character string or an integer code")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    c = _char(c)
    index = text.find(c)
    if index >= 0:
        return index
    if c == "\0":
        return len(text)
    return None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    c = _char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n``
    characters of ``haystack``; an empty needle is found at 0."""
    _check_non_negative(n, "n")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty when
    ``start`` lies at or past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """``text`` without the leading and trailing characters found in ``charset``."""
    return text.strip(charset) if charset else text


def strjoin(first: str, second: str) -> str:
    """The concatenation of two strings."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character in order.

    Where ``func`` returns a string it replaces that character; where it
    returns None the character is kept. The resulting text is returned.
    """
    pieces = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        pieces.append(char if replacement is None else replacement)
    return "".join(pieces)


def _codes(text: str) -> Iterator[int]:
    """Character codes of ``text`` followed by the terminating 0."""
    return chain(map(ord, text), (0,))


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    left_codes = _codes(first)
    if limit is not None:
        left_codes = islice(left_codes, limit)
    right_codes = chain(map(ord, second), repeat(0))
    for left, right in zip(left_codes, right_codes):
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order and the
    value is the difference of the first unequal codes."""
    _check_non_negative(n, "n")
    return _compare(first, second, n)


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the difference of the first unequal codes, or 0."""
    return _compare(first, second, None)