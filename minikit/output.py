"""Writing characters, strings, lines and numbers to a stream."""

from __future__ import annotations

import io
import sys
from typing import IO, Any, Optional, Union

from .chars import itoa


def _write(text: str, stream: Optional[IO[Any]]) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("latin-1"))
    else:
        stream.write(text)


def put_char(c: Union[str, int], stream: Optional[IO[Any]] = None) -> None:
    """Write one character; an integer is taken as a byte code."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def put_str(text: Optional[str], stream: Optional[IO[Any]] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _write(text, stream)


def put_endl(text: Optional[str], stream: Optional[IO[Any]] = None) -> None:
    """Write ``text`` and a newline; None writes nothing."""
    if text is None:
        return
    _write(text + "\n", stream)


def put_nbr(n: int, stream: Optional[IO[Any]] = None) -> None:
    """Write the decimal text of ``n``."""
    _write(itoa(n), stream)