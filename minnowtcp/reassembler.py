"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter
from typing import Optional, Union

from minnowtcp.byte_stream import ByteStream, Reader, Writer

BytesLike = Union[bytes, bytearray, memoryview]

_start_of = itemgetter(0)


class Reassembler:
    """Puts substrings back in order and writes them to an output stream.

    Bytes that fit within the output's available capacity but cannot be
    written yet are held until the gaps before them are filled. Bytes beyond
    that capacity are discarded. The output is closed after its last byte.
    """

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._next_index = 0
        self._eof_index: Optional[int] = None
        # Disjoint, non-adjacent pending segments sorted by start index.
        self._segments: list[tuple[int, bytes]] = []

    def insert(self, first_index: int, data: BytesLike, is_last_substring: bool) -> None:
        """Insert ``data`` whose first byte sits at ``first_index`` in the stream."""
        if first_index < 0:
            raise ValueError(f"first_index must be non-negative, got {first_index}")
        data = bytes(data)

        if is_last_substring:
            self._eof_index = first_index + len(data)

        if not data:
            if is_last_substring:
                self._close_if_done()
            return

        end = first_index + len(data)
        if end <= self._next_index:
            self._close_if_done()
            return

        acceptable_end = self._next_index + self._output.writer().available_capacity()
        if first_index >= acceptable_end:
            return

        start = max(first_index, self._next_index)
        stop = min(end, acceptable_end)
        chunk = data[start - first_index : stop - first_index]

        if start == self._next_index:
            self._write(chunk)
            self._drain()
        elif chunk:
            self._store(start, chunk)

        self._close_if_done()

    def count_bytes_pending(self) -> int:
        """How many bytes are held inside the reassembler."""
        return sum(
            start + len(data) - max(start, self._next_index)
            for start, data in self._segments
            if start + len(data) > self._next_index
        )

    def reader(self) -> Reader:
        """The reading side of the output stream."""
        return self._output.reader()

    def writer(self) -> Writer:
        """The writing side of the output stream (for inspection only)."""
        return self._output.writer()

    def _write(self, chunk: bytes) -> None:
        self._output.writer().push(chunk)
        self._next_index += len(chunk)

    def _drain(self) -> None:
        segments = self._segments
        while segments and segments[0][0] <= self._next_index:
            seg_start, seg_data = segments.pop(0)
            fresh = seg_data[self._next_index - seg_start :]
            if fresh:
                self._write(fresh)

    def _store(self, start: int, chunk: bytes) -> None:
        segments = self._segments
        idx = bisect_left(segments, start, key=_start_of)

        if idx > 0:
            prev_start, prev_data = segments[idx - 1]
            prev_end = prev_start + len(prev_data)
            if prev_end >= start:
                if prev_end >= start + len(chunk):
                    return
                chunk = prev_data + chunk[prev_end - start :]
                start = prev_start
                idx -= 1
                del segments[idx]

        while idx < len(segments) and segments[idx][0] <= start + len(chunk):
            seg_start, seg_data = segments.pop(idx)
            seg_end = seg_start + len(seg_data)
            end = start + len(chunk)
            if seg_end > end:
                chunk += seg_data[end - seg_start :]

        segments.insert(idx, (start, chunk))

    def _close_if_done(self) -> None:
        if self._eof_index is not None and self._next_index == self._eof_index:
            self._output.writer().close()