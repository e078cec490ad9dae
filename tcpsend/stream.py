"""A bounded in-memory byte stream with a writer and a reader side."""

from __future__ import annotations


class ByteStream:
    """Bytes written on one side are read in order on the other, up to ``capacity`` buffered."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self.input_ended = False
        self.bytes_written = 0
        self.bytes_read = 0

    def write(self, data: bytes) -> int:
        """Accept as much of ``data`` as fits; return how many bytes were taken."""
        accepted = data[: self.remaining_capacity()]
        self._buffer.extend(accepted)
        self.bytes_written += len(accepted)
        return len(accepted)

    def read(self, length: int) -> bytes:
        """Remove and return up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must not be negative")
        chunk = bytes(self._buffer[:length])
        del self._buffer[:length]
        self.bytes_read += len(chunk)
        return chunk

    def end_input(self) -> None:
        """Signal that the writer has finished."""
        self.input_ended = True

    def buffer_size(self) -> int:
        return len(self._buffer)

    def buffer_empty(self) -> bool:
        return not self._buffer

    def eof(self) -> bool:
        """True once input has ended and every byte has been read."""
        return self.input_ended and not self._buffer

    def remaining_capacity(self) -> int:
        return self.capacity - len(self._buffer)