"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .byte_stream import Reader, Writer
from .reassembler import Reassembler
from .wrapping_integers import Wrap32

_MAX_WINDOW = 0xFFFF


@dataclass
class TCPSenderMessage:
    """A segment as sent by the peer's sender."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    @property
    def sequence_length(self) -> int:
        """Number of sequence numbers the segment occupies."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass(frozen=True)
class TCPReceiverMessage:
    """Acknowledgement and flow-control information sent back to the peer."""

    ackno: Optional[Wrap32] = None
    window_size: int = 0
    rst: bool = False


class TCPReceiver:
    """Receives segments and writes their payloads into a :class:`Reassembler`."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._isn = Wrap32(0)
        self._started = False

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the segment's payload at the right stream index."""
        if message.rst:
            self._reassembler.reader().set_error()
            return

        if message.syn:
            self._isn = message.seqno
            self._started = True

        if not self._started:
            return

        absolute = message.seqno.unwrap(self._isn, self._reassembler.expected_index())
        if absolute == 0 and not message.syn:
            return

        stream_index = absolute - 1 if absolute else 0
        self._reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the message for the peer's sender."""
        writer = self._reassembler.writer()
        ackno = None
        if self._started:
            absolute = self._reassembler.expected_index() + 1 + int(writer.is_closed())
            ackno = Wrap32.wrap(absolute, self._isn)
        window = min(writer.available_capacity(), _MAX_WINDOW)
        return TCPReceiverMessage(ackno=ackno, window_size=window, rst=writer.has_error())

    def reassembler(self) -> Reassembler:
        return self._reassembler

    def reader(self) -> Reader:
        return self._reassembler.reader()

    def writer(self) -> Writer:
        return self._reassembler.writer()