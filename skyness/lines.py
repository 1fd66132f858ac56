"""Line-by-line reading from a stream, one chunk of a fixed size at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 128
"""Default number of characters or bytes requested per read."""


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, keeping unread data between calls.

    Each line keeps its trailing newline; the last line may have none.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._pending: AnyStr | None = None
        self._sep: AnyStr | None = None

    def _fill(self) -> None:
        pending = self._pending
        while pending is None or self._sep not in pending:
            try:
                chunk = self._stream.read(self._size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                break
            if self._sep is None:
                self._sep = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            pending = chunk if pending is None else pending + chunk
        self._pending = pending

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._sep)
        if index == -1:
            self._pending = None
            return pending
        line, self._pending = pending[: index + 1], pending[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line