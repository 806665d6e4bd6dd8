"""Buffered line reading from a stream, a few characters at a time."""

READ_SIZE = 2


class LineReader:
    """Read newline-terminated lines from *stream* in chunks of *read_size*.

    Works with text or binary streams; lines come back without their newline
    and of the same type the stream yields.
    """

    def __init__(self, stream, read_size=READ_SIZE):
        if read_size < 1:
            raise ValueError("read_size must be at least 1")
        self._stream = stream
        self._read_size = read_size
        self._buffer = None
        self._eof = False

    def read_line(self):
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._buffer is not None:
                newline = "\n" if isinstance(self._buffer, str) else b"\n"
                index = self._buffer.find(newline)
                if index >= 0:
                    line = self._buffer[:index]
                    self._buffer = self._buffer[index + 1:]
                    return line
            if self._eof:
                break
            chunk = self._stream.read(self._read_size)
            if not chunk:
                self._eof = True
                continue
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        if self._buffer:
            line = self._buffer
            self._buffer = self._buffer[:0]
            return line
        return None

    def __iter__(self):
        while (line := self.read_line()) is not None:
            yield line