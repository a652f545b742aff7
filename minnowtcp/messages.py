"""Messages exchanged between a TCP sender and the peer's receiver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from minnowtcp.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment sent by a TCP sender."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers this segment occupies."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """An acknowledgement and window advertisement sent by a TCP receiver."""

    ackno: Optional[Wrap32] = None
    window_size: int = 0
    rst: bool = False