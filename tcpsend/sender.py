"""The sending half of a TCP connection: segmentation, windowing and retransmission."""

from __future__ import annotations

import random
from collections import deque

from .segment import TCPSegment, unwrap, wrap
from .stream import ByteStream

DEFAULT_CAPACITY = 64000
MAX_PAYLOAD_SIZE = 1000
TIMEOUT_DFLT = 1000
MAX_RETX_ATTEMPTS = 8


class RetransmissionTimer:
    """Tracks elapsed time against the current retransmission timeout."""

    def __init__(self, initial_rto: int = TIMEOUT_DFLT) -> None:
        self.initial_rto = initial_rto
        self.rto = initial_rto
        self.elapsed = 0
        self.running = False

    def start(self) -> None:
        """Start the timer from zero unless it is already running."""
        if not self.running:
            self.running = True
            self.elapsed = 0

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Restore the initial timeout and restart the count."""
        self.rto = self.initial_rto
        self.elapsed = 0


class TCPSender:
    """Reads from an outgoing byte stream, cuts it into segments and retransmits lost ones."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        retx_timeout: int = TIMEOUT_DFLT,
        fixed_isn: int | None = None,
    ) -> None:
        self.isn = random.getrandbits(32) if fixed_isn is None else fixed_isn % (1 << 32)
        self.initial_retransmission_timeout = retx_timeout
        self.stream_in = ByteStream(capacity)
        self.segments_out: deque[TCPSegment] = deque()
        self.timer = RetransmissionTimer(retx_timeout)
        self._outstanding: deque[TCPSegment] = deque()
        self._ackno = self.isn
        self._window_size = 1
        self._zero_window = False
        self._consecutive_retransmissions = 0
        self._next_seqno = 0
        self._bytes_in_flight = 0
        self._syn_sent = False
        self._fin_sent = False

    def _window_end(self) -> int:
        return unwrap(self._ackno, self.isn, self._next_seqno) + self._window_size

    def _send(self, segment: TCPSegment) -> None:
        length = segment.length_in_sequence_space()
        self._next_seqno += length
        self._bytes_in_flight += length
        self.segments_out.append(segment)
        self._outstanding.append(segment)
        self.timer.start()

    def fill_window(self) -> None:
        """Send as many segments as the receiver's window allows."""
        if not self._syn_sent:
            self._syn_sent = True
            self._send(TCPSegment(seqno=self.next_seqno(), syn=True))

        if not self._fin_sent and self.stream_in.eof() and self._window_end() > self._next_seqno:
            self._fin_sent = True
            self._send(TCPSegment(seqno=self.next_seqno(), fin=True))

        while (
            not self._fin_sent
            and not self.stream_in.buffer_empty()
            and (room := self._window_end() - self._next_seqno) > 0
        ):
            length = min(room, self.stream_in.buffer_size(), MAX_PAYLOAD_SIZE)
            seqno = self.next_seqno()
            payload = self.stream_in.read(length)
            fin = self.stream_in.eof() and length + 1 <= room
            self._fin_sent = fin
            self._send(TCPSegment(seqno=seqno, payload=payload, fin=fin))

    def ack_received(self, ackno: int, window_size: int) -> None:
        """Process the receiver's acknowledgment number and advertised window."""
        ackno %= 1 << 32
        new_index = unwrap(ackno, self.isn, self._next_seqno)
        old_index = unwrap(self._ackno, self.isn, self._next_seqno)
        if new_index > self._next_seqno or new_index < old_index:
            return
        if new_index > old_index:
            self.timer.reset()
            self._consecutive_retransmissions = 0

        self._ackno = ackno
        while self._outstanding:
            front = self._outstanding[0]
            length = front.length_in_sequence_space()
            if unwrap(front.seqno, self.isn, self._next_seqno) + length > new_index:
                break
            self._bytes_in_flight -= length
            self._outstanding.popleft()

        if not self._bytes_in_flight:
            self.timer.stop()

        self._zero_window = window_size == 0
        self._window_size = max(window_size, 1)
        self.fill_window()

    def tick(self, ms_since_last_tick: int) -> None:
        """Advance time; retransmit the oldest outstanding segment if the timer expires."""
        if not self.timer.running:
            return
        self.timer.elapsed += ms_since_last_tick
        if self.timer.elapsed >= self.timer.rto:
            if self._outstanding:
                self.segments_out.append(self._outstanding[0])
            if not self._zero_window:
                self._consecutive_retransmissions += 1
                self.timer.rto *= 2
            self.timer.elapsed = 0

    def send_empty_segment(self) -> None:
        """Queue a segment with no payload and no flags; it is never retransmitted."""
        self.segments_out.append(TCPSegment(seqno=self.next_seqno()))

    def bytes_in_flight(self) -> int:
        """Sequence numbers sent but not yet acknowledged."""
        return self._bytes_in_flight

    def consecutive_retransmissions(self) -> int:
        return self._consecutive_retransmissions

    def next_seqno_absolute(self) -> int:
        return self._next_seqno

    def next_seqno(self) -> int:
        return wrap(self._next_seqno, self.isn)