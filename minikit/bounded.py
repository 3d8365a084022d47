"""Size-bounded string copying and concatenation, line-aware duplication
and word counting."""

from __future__ import annotations


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, at most ``size - 1`` characters long (empty
    when ``size`` is 0), and the full length of ``src``; a returned length
    of ``size`` or more means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to make. With a size
    of 0 the text is unchanged and the length of ``src`` is returned; when
    ``dst`` is already longer than ``size`` the text is unchanged and
    ``len(src) + size`` is returned. Otherwise characters of ``src`` are
    appended while the total stays below ``size - 1`` and
    ``len(dst) + len(src)`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if len(dst) > size:
        return dst, len(src) + size
    room = max(size - 1 - len(dst), 0)
    return dst + src[:room], len(src) + len(dst)


def strdup_extra(text: str, keep_line: bool = False) -> str:
    """A copy of ``text``; with ``keep_line`` only up to and including the
    first newline."""
    if not keep_line:
        return text
    end = text.find("\n")
    return text if end < 0 else text[:end + 1]


def wdcounter(text: str, sep: str) -> int:
    """Count the words in ``text`` separated by the character ``sep``.

    A word starts at the beginning of the text when it does not open with
    ``sep``, and after every ``sep`` followed by a printable character that
    is not ``sep``. Empty text holds no words.
    """
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    if not text:
        return 0
    starts = sum(
        1
        for current, following in zip(text, text[1:])
        if current == sep and following != sep and ord(following) > 31
    )
    if text[0] != sep:
        starts += 1
    return starts