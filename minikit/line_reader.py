"""Reading a stream one line at a time through a fixed-size read buffer.

Both readers work on text or binary streams: anything with a ``read(n)``
method that returns ``str`` or ``bytes`` and an empty value at the end.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

Chunk = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 100
STATUS_BUFFER_SIZE = 4200


def _newline(chunk: Chunk) -> Chunk:
    return "\n" if isinstance(chunk, str) else b"\n"


def _check_size(buffer_size: int) -> int:
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")
    return buffer_size


class LineReader:
    """Return the lines of a stream, each with its newline kept."""

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = _check_size(buffer_size)
        self._tail: Optional[Chunk] = None

    def next_line(self) -> Optional[Chunk]:
        """The next line, ending in a newline unless it is the last one;
        None once the stream is used up."""
        tail = self._tail
        while True:
            if tail is not None:
                index = tail.find(_newline(tail))
                if index >= 0:
                    rest = tail[index + 1:]
                    self._tail = rest or None
                    return tail[:index + 1]
            chunk = self._stream.read(self._size)
            if not chunk:
                self._tail = None
                return tail or None
            tail = chunk if tail is None else tail + chunk

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.next_line, None)


class StatusLineReader:
    """Return lines without their newline, with a flag telling whether a
    newline ended them."""

    def __init__(self, stream: Any, buffer_size: int = STATUS_BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = _check_size(buffer_size)
        self._remain: Optional[Chunk] = None

    def read(self) -> tuple[Chunk, bool]:
        """The next line and True when it ended in a newline.

        The last line of the stream comes with False, and so does the empty
        line returned on every call after the end.
        """
        line: Optional[Chunk] = None
        remain, self._remain = self._remain, None
        if remain is not None:
            index = remain.find(_newline(remain))
            if index >= 0:
                self._remain = remain[index + 1:]
                return remain[:index], True
            line = remain
        while True:
            chunk = self._stream.read(self._size)
            if line is None:
                line = chunk[:0]
            if not chunk:
                return line, False
            index = chunk.find(_newline(chunk))
            if index >= 0:
                self._remain = chunk[index + 1:]
                return line + chunk[:index], True
            line = line + chunk