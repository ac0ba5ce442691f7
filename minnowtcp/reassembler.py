"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from .byte_stream import ByteStream, Reader, Writer


@dataclass
class _Block:
    """A stored run of bytes covering stream indices ``first`` to ``last`` inclusive."""

    first: int
    last: int
    data: bytes


class Reassembler:
    """Puts out-of-order substrings back in order and writes them to a :class:`ByteStream`.

    Bytes that fit within the stream's available capacity but cannot be written
    yet are held until the gaps before them are filled. Bytes beyond the
    available capacity are discarded. The stream is closed once the last
    substring has been written.
    """

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._expected = 0
        self._pending = 0
        self._last_seen = False
        self._blocks: list[_Block] = []

    def insert(self, first_index: int, data: bytes, is_last_substring: bool = False) -> None:
        """Insert ``data`` whose first byte sits at stream index ``first_index``."""
        if first_index < 0:
            raise ValueError("first_index must be non-negative")
        data = bytes(data)
        writer = self._output.writer()

        if not data:
            if is_last_substring:
                writer.close()
            return

        last_index = first_index + len(data)
        end_index = self._expected + writer.available_capacity()
        if last_index < self._expected or first_index >= end_index:
            return

        if end_index < last_index:
            last_index = end_index
            data = data[: last_index - first_index]
            is_last_substring = False

        if first_index < self._expected:
            data = data[self._expected - first_index :]
            first_index = self._expected

        if first_index == self._expected and not self._blocks:
            self._push(data)
        elif first_index == self._expected and last_index <= self._blocks[0].last + 1:
            front = self._blocks[0]
            self._push(data[: min(last_index, front.first) - first_index])
        else:
            self._store(first_index, last_index - 1, data)

        self._last_seen = self._last_seen or is_last_substring
        self._flush()

    def bytes_pending(self) -> int:
        """Number of bytes held inside the reassembler, not yet written."""
        return self._pending

    def reader(self) -> Reader:
        return self._output.reader()

    def writer(self) -> Writer:
        return self._output.writer()

    def expected_index(self) -> int:
        """Index of the first byte not yet assembled."""
        return self._expected

    def _push(self, data: bytes) -> None:
        self._expected += len(data)
        self._output.writer().push(data)

    def _store(self, first: int, last: int, data: bytes) -> None:
        low, high = first, last
        left = bisect.bisect_left(self._blocks, first, key=lambda block: block.last)
        right = bisect.bisect_right(self._blocks, last, key=lambda block: block.first)

        if left < len(self._blocks):
            low = min(low, self._blocks[left].first)
        if right > 0:
            high = max(high, self._blocks[right - 1].last)

        if left < len(self._blocks):
            existing = self._blocks[left]
            if existing.first == low and existing.last == high:
                return

        size = high - low + 1
        self._pending += size
        if len(data) == size and left == right:
            self._blocks.insert(left, _Block(low, high, data))
            return

        merged = bytearray(size)
        for block in self._blocks[left:right]:
            self._pending -= len(block.data)
            offset = block.first - low
            merged[offset : offset + len(block.data)] = block.data
        offset = first - low
        merged[offset : offset + len(data)] = data
        self._blocks[left:right] = [_Block(low, high, bytes(merged))]

    def _flush(self) -> None:
        while self._blocks and self._blocks[0].first == self._expected:
            front = self._blocks.pop(0)
            self._pending -= len(front.data)
            self._push(front.data)

        if self._last_seen and not self._blocks:
            self._output.writer().close()