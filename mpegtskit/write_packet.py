"""Encoding of transport stream packets into 188-byte units."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import BinaryIO, Optional

from mpegtskit.bitstream import BitWriter
from mpegtskit.continuity import ContinuityCounter
from mpegtskit.models import Packet
from mpegtskit.write_adaptation import write_adaptation_field
from mpegtskit.write_payload import write_payload

logger = logging.getLogger(__name__)

PACKET_SIZE = 188
SYNC_BYTE = 0x47
STUFFING_BYTE = 0xFF


def encode_packet(packet: Packet, counter: ContinuityCounter) -> bytes:
    """Encode a packet as written, before any padding to 188 bytes.

    The continuity counter of the packet's PID is taken from ``counter``.
    """
    continuity = counter.next(packet.program_id)

    writer = BitWriter()
    writer.write(8, SYNC_BYTE)
    writer.write_bit(packet.transport_error_indicator)
    writer.write_bit(packet.payload is not None)
    writer.write_bit(packet.transport_priority)
    writer.write(13, packet.program_id)
    writer.write(2, packet.transport_scrambling_control)
    writer.write_bit(packet.adaptation_field is not None)
    writer.write_bit(packet.payload_presence)
    writer.write(4, continuity)

    write_adaptation_field(writer, packet.adaptation_field)
    write_payload(writer, packet.payload)
    writer.write_bytes(packet.data)
    return writer.getvalue()


def write_packet(stream: BinaryIO, packet: Packet, counter: ContinuityCounter) -> None:
    """Write one packet to ``stream`` without padding it."""
    stream.write(encode_packet(packet, counter))


def write_packets(
    stream: BinaryIO,
    packets: Iterable[Packet],
    counter: Optional[ContinuityCounter] = None,
) -> None:
    """Write packets, each padded with 0xFF to exactly 188 bytes.

    Raises :class:`ValueError` if a packet encodes to more than 188 bytes.
    """
    if counter is None:
        counter = ContinuityCounter()
    for packet in packets:
        data = encode_packet(packet, counter)
        if len(data) > PACKET_SIZE:
            raise ValueError(
                f"packet with PID {packet.program_id} encodes to "
                f"{len(data)} bytes, more than {PACKET_SIZE}"
            )
        if len(data) < PACKET_SIZE:
            logger.warning(
                "packet with PID %d has length %d, padding it",
                packet.program_id,
                len(data),
            )
            data += bytes([STUFFING_BYTE]) * (PACKET_SIZE - len(data))
        stream.write(data)