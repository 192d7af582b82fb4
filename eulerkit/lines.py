"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 8


class LineReader(Generic[AnyStr]):
    """Reads a text or binary stream one line at a time.

    Data is pulled from the stream ``buffer_size`` units at a time; what is
    read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._pending is None or self._newline() not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, with its newline if it has one, or None at end of stream."""
        self._fill()
        if not self._pending:
            self._pending = None
            return None
        pending = self._pending
        cut = pending.find(self._newline())
        end = len(pending) if cut < 0 else cut + 1
        line, rest = pending[:end], pending[end:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, reading it ``buffer_size`` units at a time."""
    yield from LineReader(stream, buffer_size)