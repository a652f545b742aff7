"""A bounded in-memory byte stream with separate reader and writer views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass
class _StreamState:
    capacity: int
    buffer: bytearray = field(default_factory=bytearray)
    closed: bool = False
    error: bool = False
    bytes_pushed: int = 0
    bytes_popped: int = 0


class ByteStream:
    """A byte stream of bounded capacity.

    The reader and writer views returned by :meth:`reader` and :meth:`writer`
    share this stream's state.
    """

    __slots__ = ("_state",)

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._state = _StreamState(capacity)

    @classmethod
    def _sharing(cls, state: _StreamState):
        view = cls.__new__(cls)
        view._state = state
        return view

    def reader(self) -> Reader:
        """The reading side of this stream."""
        return Reader._sharing(self._state)

    def writer(self) -> Writer:
        """The writing side of this stream."""
        return Writer._sharing(self._state)

    def set_error(self) -> None:
        """Signal that the stream suffered an error."""
        self._state.error = True

    def has_error(self) -> bool:
        """Whether the stream has had an error."""
        return self._state.error


class Writer(ByteStream):
    """Writing side of a :class:`ByteStream`."""

    __slots__ = ()

    def push(self, data: BytesLike) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        view = memoryview(data).cast("B")
        state = self._state
        if state.closed:
            return
        accepted = min(self.available_capacity(), len(view))
        if accepted:
            state.buffer += view[:accepted]
            state.bytes_pushed += accepted

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._state.closed = True

    def is_closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._state.closed

    def available_capacity(self) -> int:
        """How many bytes can be pushed right now."""
        state = self._state
        return state.capacity - (state.bytes_pushed - state.bytes_popped)

    def bytes_pushed(self) -> int:
        """Total number of bytes pushed so far."""
        return self._state.bytes_pushed


class Reader(ByteStream):
    """Reading side of a :class:`ByteStream`."""

    __slots__ = ()

    def peek(self) -> bytes:
        """The bytes currently buffered, without removing them."""
        return bytes(self._state.buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        length = min(length, self.bytes_buffered())
        state = self._state
        del state.buffer[:length]
        state.bytes_popped += length

    def is_finished(self) -> bool:
        """Whether the stream is closed and fully popped."""
        return self._state.closed and self.bytes_buffered() == 0

    def bytes_buffered(self) -> int:
        """Number of bytes pushed and not yet popped."""
        state = self._state
        return state.bytes_pushed - state.bytes_popped

    def bytes_popped(self) -> int:
        """Total number of bytes popped so far."""
        return self._state.bytes_popped


def read(reader: Reader, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``reader``."""
    out = bytearray()
    while reader.bytes_buffered() and len(out) < max_len:
        view = reader.peek()
        if not view:
            raise RuntimeError("Reader.peek() returned no bytes")
        chunk = view[: max_len - len(out)]
        out += chunk
        reader.pop(len(chunk))
    return bytes(out)