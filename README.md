# minnowtcp

The core pieces of the receiving side of a TCP implementation. They are plain
Python objects that do no I/O of their own. You feed them bytes and messages and
read back what they would put on the wire.

## Components

- `minnowtcp.wrapping_integers.Wrap32`: a 32-bit sequence number that starts at
  an arbitrary initial value and wraps around.
  - `Wrap32.wrap(n, isn)` turns an absolute sequence number into a wrapped one.
  - `seqno.unwrap(isn, checkpoint)` goes the other way. It returns the absolute
    value closest to `checkpoint`.
  - `Wrap32` supports `+` with an integer and `==`, and it is hashable.
  - A raw value outside `0 .. 2**32 - 1` raises `ValueError`.
- `minnowtcp.byte_stream.ByteStream`: a bounded in-memory byte pipe. The
  `reader()` and `writer()` views share the stream's state.
  - The `Writer` side offers `push`, `close`, `is_closed`,
    `available_capacity` and `bytes_pushed`. `push` keeps only as many bytes as
    fit in the available capacity, and it does nothing once the stream is
    closed.
  - The `Reader` side offers `peek`, `pop`, `is_finished`, `bytes_buffered` and
    `bytes_popped`.
  - Both sides offer `set_error()` and `has_error()`.
  - The helper `read(reader, max_len)` takes up to `max_len` bytes out of a
    reader and returns them as `bytes`.
- `minnowtcp.reassembler.Reassembler`: writes indexed substrings into a
  `ByteStream` in order, even when they arrive out of order or overlap.
  - Bytes that cannot be written yet are held until the gap before them is
    filled. `count_bytes_pending()` reports how many bytes are held.
  - Bytes beyond the output's available capacity are dropped.
  - The output is closed once the last byte has been written.
- `minnowtcp.messages`: two dataclasses.
  - `TCPSenderMessage` has the fields `seqno`, `syn`, `payload`, `fin` and
    `rst`. Its `sequence_length()` counts SYN + payload + FIN.
  - `TCPReceiverMessage` has the fields `ackno`, `window_size` and `rst`.
- `minnowtcp.tcp_receiver.TCPReceiver`: feeds the payload of incoming
  `TCPSenderMessage`s to a `Reassembler`.
  - `send()` returns the `TCPReceiverMessage` that acknowledges the data
    received and advertises the window, capped at 65535.
  - A message with `rst` set puts the stream into the error state.

## Installation

```
pip install .
```

## Example

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.messages import TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver
from minnowtcp.wrapping_integers import Wrap32

isn = Wrap32(12345)
receiver = TCPReceiver(Reassembler(ByteStream(4096)))

receiver.receive(TCPSenderMessage(seqno=isn, syn=True, payload=b"hel"))
receiver.receive(TCPSenderMessage(seqno=isn + 4, payload=b"lo", fin=True))

reply = receiver.send()
print(reply.ackno == Wrap32.wrap(7, isn))   # True: SYN + 5 bytes + FIN
print(reply.window_size)                    # 4091

print(read(receiver.reader(), 100))         # b"hello"
print(receiver.reader().is_finished())      # True
```

## What this package does not do

- It has no sending side. Nothing here splits an outbound stream into
  `TCPSenderMessage` segments, tracks the peer's window, or retransmits on a
  timer.
- It does no network I/O and has no wire format. Messages are Python objects
  only.
- It has no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```