"""A bounded in-memory byte stream with separate reader and writer views."""

from __future__ import annotations


class ByteStream:
    """A FIFO of bytes that never holds more than ``capacity`` bytes at once."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False
        self._reader = Reader(self)
        self._writer = Writer(self)

    @property
    def capacity(self) -> int:
        return self._capacity

    def reader(self) -> Reader:
        """Return the reading side of the stream."""
        return self._reader

    def writer(self) -> Writer:
        """Return the writing side of the stream."""
        return self._writer

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error

    def __repr__(self) -> str:
        return (
            f"ByteStream(capacity={self._capacity}, buffered={len(self._buffer)}, "
            f"closed={self._closed}, error={self._error})"
        )


class _StreamView:
    """Common base of the reader and writer views on a stream."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ByteStream) -> None:
        self._stream = stream

    @property
    def stream(self) -> ByteStream:
        return self._stream

    def set_error(self) -> None:
        self._stream.set_error()

    def has_error(self) -> bool:
        return self._stream.has_error()


class Writer(_StreamView):
    """The writing side of a :class:`ByteStream`."""

    __slots__ = ()

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        if isinstance(data, str):
            raise TypeError("push() takes bytes, not str")
        accepted = bytes(data[: self.available_capacity()])
        self._stream._buffer += accepted
        self._stream._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._stream._closed = True

    def is_closed(self) -> bool:
        return self._stream._closed

    def available_capacity(self) -> int:
        return self._stream._capacity - len(self._stream._buffer)

    def bytes_pushed(self) -> int:
        return self._stream._pushed


class Reader(_StreamView):
    """The reading side of a :class:`ByteStream`."""

    __slots__ = ()

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._stream._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must be non-negative")
        count = min(length, len(self._stream._buffer))
        del self._stream._buffer[:count]
        self._stream._popped += count

    def is_finished(self) -> bool:
        """True once the stream is closed and every byte has been popped."""
        return self._stream._closed and not self._stream._buffer

    def bytes_buffered(self) -> int:
        return len(self._stream._buffer)

    def bytes_popped(self) -> int:
        return self._stream._popped


def read(reader: Reader, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``reader``."""
    parts: list[bytes] = []
    taken = 0
    while reader.bytes_buffered() and taken < length:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no bytes")
        view = view[: length - taken]
        parts.append(view)
        taken += len(view)
        reader.pop(len(view))
    return b"".join(parts)