# tcpsend

The sending side of a TCP connection, as a plain Python library with no
dependencies.

A `TCPSender` takes the bytes an application writes into its outgoing
`ByteStream`, cuts them into `TCPSegment`s that fit the receiver's advertised
window, keeps track of what is still unacknowledged, and retransmits the oldest
outstanding segment with exponential back-off when its retransmission timer
runs out.

## Installation

```
pip install tcpsend
```

## Usage

```python
from tcpsend.sender import TCPSender

sender = TCPSender(capacity=64000, retx_timeout=1000, fixed_isn=12345)

sender.fill_window()                 # queues the SYN
syn = sender.segments_out.popleft()
assert syn.syn and syn.seqno == 12345

sender.ack_received(12346, 1000)     # peer acknowledges the SYN, window 1000
sender.stream_in.write(b"hello")
sender.fill_window()
data = sender.segments_out.popleft()
assert data.payload == b"hello"
assert sender.bytes_in_flight() == 5

sender.tick(1000)                    # timer expires: oldest segment is resent
assert sender.segments_out.popleft().payload == b"hello"
assert sender.consecutive_retransmissions() == 1
```

## Modules

- `tcpsend.segment` — `TCPSegment`, a frozen dataclass with `seqno`, `syn`,
  `fin`, `payload`, `ack`, `rst`, `ackno` and `win`, and its
  `length_in_sequence_space()`; plus `wrap(n, isn)` and
  `unwrap(seqno, isn, checkpoint)`, which convert between absolute sequence
  numbers and 32-bit wrapped ones relative to an initial sequence number.
- `tcpsend.stream` — `ByteStream`, a bounded in-memory buffer. `write()`
  accepts as much as fits and returns the count taken; `read(length)` removes
  bytes from the front; `end_input()` marks the end, and `eof()` is true once
  input has ended and the buffer is empty.
- `tcpsend.sender` — `TCPSender` and its `RetransmissionTimer`, along with the
  defaults `DEFAULT_CAPACITY` (64000), `MAX_PAYLOAD_SIZE` (1000),
  `TIMEOUT_DFLT` (1000 ms) and `MAX_RETX_ATTEMPTS` (8). Without `fixed_isn`
  the initial sequence number is chosen at random.

## What the sender does

- The first call to `fill_window()` sends a SYN.
- Data segments never carry more than `MAX_PAYLOAD_SIZE` bytes, and never more
  than the receiver's window allows.
- Once the stream has ended (`stream_in.end_input()`), a FIN is sent as soon as
  there is room for it in the window, piggybacked on the last data segment
  where it fits.
- A zero window is treated as a window of one byte, so the sender keeps probing;
  while probing a zero window the retransmission timeout is not doubled.
- Acknowledgments for data not yet sent, or older than the latest one seen, are
  ignored. An acknowledgment of new data restores the initial timeout and
  clears the retransmission count.
- `tick(ms)` drives the retransmission timer; `consecutive_retransmissions()`
  reports how many retransmissions have happened in a row without progress.
  The sender does not itself give up; comparing that count with
  `MAX_RETX_ATTEMPTS` is left to the caller.
- `send_empty_segment()` queues a payload-free segment carrying the current
  sequence number; it is never retransmitted.
- `next_seqno()` and `next_seqno_absolute()` give the sequence number of the
  next byte to be sent, wrapped and absolute.

## What it does not do

This is only the sending half. There is no receiver, no connection state
machine, no encoding of segments into bytes on the wire and no socket or
network I/O: segments are placed in `segments_out` for the caller to deliver.
The header fields `ack`, `ackno` and `win` are left at their defaults for the
caller to fill in.

## Running the tests

```
pip install tcpsend[test]
pytest
```