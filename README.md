# minnowtcp

The receiving half of a TCP endpoint, in plain Python with no dependencies
beyond the standard library. Everything works on in-memory data; the package
has four modules.

## Modules

### `minnowtcp.byte_stream`

`ByteStream(capacity)` is a bounded FIFO of bytes. It never holds more than
`capacity` bytes at once.

- `stream.writer()` returns a `Writer`:
  - `push(data)` appends as much of `data` (bytes) as the available capacity
    allows and silently drops the rest. Passing a `str` raises `TypeError`.
  - `close()`, `is_closed()`, `available_capacity()`, `bytes_pushed()`.
- `stream.reader()` returns a `Reader`:
  - `peek()` returns all buffered bytes without removing them.
  - `pop(length)` removes up to `length` bytes from the front.
  - `is_finished()` is true once the stream is closed and empty.
  - `bytes_buffered()`, `bytes_popped()`.
- `stream.set_error()` / `stream.has_error()` mark and query an error; both are
  also available on the reader and writer views.
- `read(reader, length)` takes up to `length` bytes off the stream and returns
  them.

### `minnowtcp.wrapping_integers`

`Wrap32(raw_value)` is a 32-bit sequence number; values are reduced modulo 2**32.

- `Wrap32.wrap(n, zero_point)` turns an absolute sequence number into its
  wrapped form relative to `zero_point`.
- `seqno.unwrap(zero_point, checkpoint)` returns the absolute sequence number
  that wraps to `seqno` and lies closest to `checkpoint`.
- `seqno + n` adds with wrap-around. `str(seqno)` gives `Wrap32<value>`.

### `minnowtcp.reassembler`

`Reassembler(output)` writes substrings into the `ByteStream` `output` in
order, even when they arrive out of order or overlap.

- `insert(first_index, data, is_last_substring=False)` hands over `data` whose
  first byte sits at stream index `first_index`. Bytes that fit in the stream's
  available capacity but cannot be written yet are held; bytes beyond it are
  discarded. The stream is closed once the last substring has been written.
- `bytes_pending()` counts bytes held but not yet written.
- `expected_index()` is the index of the first byte not yet assembled.
- `reader()` and `writer()` give the output stream's views.

### `minnowtcp.tcp_receiver`

- `TCPSenderMessage(seqno, syn, payload, fin, rst)` is an incoming segment;
  `sequence_length` counts SYN, payload bytes and FIN.
- `TCPReceiverMessage(ackno, window_size, rst)` is the reply; `ackno` is `None`
  until a SYN has arrived.
- `TCPReceiver(reassembler)`:
  - `receive(message)` records the initial sequence number on SYN, ignores
    segments before the SYN, marks the stream as errored on RST, and otherwise
    inserts the payload at the right stream index (FIN marks the last
    substring).
  - `send()` builds the reply: acknowledgement number, window size (the
    available capacity, capped at 65535) and the RST flag from the stream's
    error state.
  - `reassembler()`, `reader()`, `writer()`.

## Example

```python
from minnowtcp.byte_stream import ByteStream
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver, TCPSenderMessage
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(4000)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(1000), syn=True))
receiver.receive(TCPSenderMessage(seqno=Wrap32(1001), payload=b"hello", fin=True))

reply = receiver.send()
print(reply.ackno, reply.window_size)   # Wrap32<1007> 3995
print(receiver.reader().peek())         # b'hello'
```

## What the package does not do

There is no sending side: no TCP sender, retransmission or connection state
machine. Nothing here opens sockets or touches the network, and the package
has no command-line program; it is a library of in-memory building blocks.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```