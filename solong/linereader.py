"""Line-at-a-time reading from a stream, one buffer-sized chunk at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from a text or binary stream.

    Each call to :meth:`next_line` reads ``buffer_size`` characters (or bytes)
    at a time until a newline turns up or the stream is exhausted, keeps what
    it read past the newline for the next call, and returns the line with its
    newline. The last line of a stream may lack one. ``None`` means there is
    nothing left to read.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Chunk] = None
        self._eol: Optional[Chunk] = None

    def _append(self, chunk: Chunk) -> None:
        """Add a freshly read chunk to the stash, noting the stream's newline."""
        if self._eol is None:
            self._eol = "\n" if isinstance(chunk, str) else b"\n"
        self._stash = chunk if self._stash is None else self._stash + chunk

    def _has_newline(self) -> bool:
        return (
            self._stash is not None
            and self._eol is not None
            and self._eol in self._stash
        )

    def next_line(self) -> Optional[Chunk]:
        """The next line, newline included, or ``None`` at the end of the stream."""
        while not self._has_newline():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._append(chunk)

        stash = self._stash
        if not stash:
            self._stash = None
            return None

        cut = stash.find(self._eol)
        if cut < 0:
            self._stash = None
            return stash
        line, rest = stash[: cut + 1], stash[cut + 1 :]
        self._stash = rest or None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.next_line, None)