"""Splitting raw transport stream bytes into decoded packets."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from mpegtskit.bitstream import BitReader, ParseError
from mpegtskit.models import NULL_PID, Packet
from mpegtskit.parse_adaptation import parse_adaptation_field
from mpegtskit.parse_payload import parse_payload

PACKET_SIZE = 188
HEADER_SIZE = 4
PAYLOAD_AREA = PACKET_SIZE - HEADER_SIZE
SYNC_BYTE = 0x47
STUFFING_BYTE = 0xFF
PACKETS_PER_READ = 7
READ_SIZE = PACKET_SIZE * PACKETS_PER_READ


def _parse_packet(chunk: bytes) -> Packet:
    reader = BitReader(chunk)
    sync_byte = reader.read(8)
    if sync_byte != SYNC_BYTE:
        raise ParseError(f"bad sync byte: 0x{sync_byte:x} != 0x{SYNC_BYTE:x}")

    transport_error_indicator = reader.read_bit()
    payload_unit_start_indicator = reader.read_bit()
    transport_priority = reader.read_bit()
    program_id = reader.read(13)
    transport_scrambling_control = reader.read(2)
    adaptation_field_presence = reader.read_bit()
    payload_presence = reader.read_bit()
    continuity_counter = reader.read(4)

    packet = Packet(
        transport_error_indicator=transport_error_indicator,
        transport_priority=transport_priority,
        program_id=program_id,
        transport_scrambling_control=transport_scrambling_control,
        continuity_counter=continuity_counter,
        payload_presence=payload_presence,
    )

    consumed = 0
    if adaptation_field_presence:
        packet.adaptation_field = parse_adaptation_field(reader)
        consumed = reader.bit_position // 8 - HEADER_SIZE
    if payload_unit_start_indicator:
        packet.payload, consumed = parse_payload(reader, consumed)

    if consumed > PAYLOAD_AREA:
        raise ParseError(
            f"packet fields overrun the payload area: {consumed} bytes read"
        )

    data = reader.read_bytes(PAYLOAD_AREA - consumed)
    if payload_presence:
        is_stuffing = all(byte == STUFFING_BYTE for byte in data)
        if not is_stuffing and program_id != NULL_PID:
            packet.data = data
    else:
        packet.data = data
    return packet


def parse_packets(data: bytes) -> list[Packet]:
    """Decode every complete 188-byte packet in ``data``.

    A trailing partial packet is ignored.
    """
    view = memoryview(bytes(data))
    whole = len(view) - len(view) % PACKET_SIZE
    return [
        _parse_packet(bytes(view[start:start + PACKET_SIZE]))
        for start in range(0, whole, PACKET_SIZE)
    ]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    buffer = bytearray()
    while len(buffer) < size:
        chunk = stream.read(size - len(buffer))
        if not chunk:
            raise EOFError(
                f"end of stream after {len(buffer)} of {size} bytes"
            )
        buffer.extend(chunk)
    return bytes(buffer)


def read_packets(stream: BinaryIO) -> list[Packet]:
    """Read the next seven packets from a binary stream.

    Raises :class:`EOFError` when fewer than 1316 bytes remain.
    """
    return parse_packets(_read_exact(stream, READ_SIZE))


def iter_packets(stream: BinaryIO) -> Iterator[Packet]:
    """Yield packets from a binary stream, seven at a time, until it runs short."""
    while True:
        try:
            packets = read_packets(stream)
        except EOFError:
            return
        yield from packets