"""Reading input one line at a time, with the unread rest kept between calls."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, Union

BUFFER_SIZE = 5
MAX_FD = 1048576

Chunk = Union[str, bytes]


class LineReader:
    """Return the lines of a readable stream one at a time, newline included.

    The stream is read ``buffer_size`` characters (or bytes) at a time;
    whatever follows a newline is held back for the next call.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def next_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream is exhausted."""
        line = self._stash
        self._stash = None
        try:
            while True:
                if line:
                    newline = b"\n" if isinstance(line, (bytes, bytearray)) else "\n"
                    index = line.find(newline)
                    if index >= 0:
                        self._stash = line[index + 1:] or None
                        return line[:index + 1]
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                if isinstance(chunk, bytearray):
                    chunk = bytes(chunk)
                line = chunk if line is None else line + chunk
        except OSError:
            self._stash = None
            raise
        return line or None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


class _DescriptorSource:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Next line read from the file descriptor ``fd``, or None at its end or on a read error.

    Unread data is kept separately for each descriptor.
    """
    if fd < 0 or fd >= MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_DescriptorSource(fd), BUFFER_SIZE)
    try:
        line = reader.next_line()
    except OSError:
        line = None
    if line is None:
        _readers.pop(fd, None)
    return line