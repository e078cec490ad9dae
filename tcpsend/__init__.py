"""The sending half of a TCP implementation: segments, a byte stream, windowing and retransmission."""

__version__ = "0.1.0"
__all__ = ["segment", "stream", "sender"]