"""TCP segments and 32-bit sequence-number arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

SEQ_SPACE = 1 << 32


def wrap(n: int, isn: int) -> int:
    """Turn an absolute 64-bit sequence number into a 32-bit seqno."""
    return (isn + n) % SEQ_SPACE


def unwrap(seqno: int, isn: int, checkpoint: int) -> int:
    """Turn a 32-bit seqno into the absolute sequence number closest to ``checkpoint``."""
    offset = (seqno - isn) % SEQ_SPACE
    candidate = checkpoint - checkpoint % SEQ_SPACE + offset
    choices = (c for c in (candidate - SEQ_SPACE, candidate, candidate + SEQ_SPACE) if c >= 0)
    return min(choices, key=lambda c: abs(c - checkpoint))


@dataclass(frozen=True)
class TCPSegment:
    """A TCP segment: header fields the sender cares about plus a payload."""

    seqno: int = 0
    syn: bool = False
    fin: bool = False
    payload: bytes = b""
    ack: bool = False
    rst: bool = False
    ackno: int = 0
    win: int = 0

    def length_in_sequence_space(self) -> int:
        """Sequence numbers occupied: payload bytes plus one each for SYN and FIN."""
        return len(self.payload) + int(self.syn) + int(self.fin)