"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from typing import Optional

from minnowtcp.byte_stream import Reader, Writer
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Turns incoming segments into stream bytes and produces acknowledgements."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._isn: Optional[Wrap32] = None

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the payload of ``message`` at its place in the stream."""
        if message.rst:
            self._reassembler.reader().set_error()
            return

        if message.syn and self._isn is None:
            self._isn = message.seqno

        if self._isn is None:
            return

        checkpoint = self._reassembler.writer().bytes_pushed()
        abs_seqno = message.seqno.unwrap(self._isn, checkpoint)
        if message.syn:
            stream_index = 0
        elif abs_seqno == 0:
            # Only the SYN may occupy the initial sequence number.
            return
        else:
            stream_index = abs_seqno - 1

        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """The acknowledgement and window to report to the peer's sender."""
        writer = self._reassembler.writer()
        ackno = None
        if self._isn is not None:
            abs_ackno = 1 + writer.bytes_pushed() + int(writer.is_closed())
            ackno = Wrap32.wrap(abs_ackno, self._isn)
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(writer.available_capacity(), _MAX_WINDOW),
            rst=self._reassembler.reader().has_error(),
        )

    def reassembler(self) -> Reassembler:
        """The reassembler this receiver writes into."""
        return self._reassembler

    def reader(self) -> Reader:
        """The reading side of the inbound stream."""
        return self._reassembler.reader()

    def writer(self) -> Writer:
        """The writing side of the inbound stream (for inspection only)."""
        return self._reassembler.writer()