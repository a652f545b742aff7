"""Byte streams, stream reassembly, wrapping sequence numbers and TCP receiver logic."""

__version__ = "0.1.0"

__all__ = ["byte_stream", "messages", "reassembler", "tcp_receiver", "wrapping_integers"]