"""Encoding of payload unit starts: PSI tables and PES headers."""

from __future__ import annotations

import zlib
from typing import Optional

from mpegtskit.bitstream import BitWriter
from mpegtskit.models import (
    PacketizedElementaryStream,
    Payload,
    PesHeader,
    ProgramAssociation,
    ProgramMap,
    TrickModeControl,
)
from mpegtskit.stream_id import VideoStream, stream_id_to_code
from mpegtskit.table_id import TableId, table_id_to_code

CRC_SIZE = 4
VERSION_NUMBER = 0

_TRICK_MODE_CODES = {
    TrickModeControl.FAST_FORWARD: 0b000,
    TrickModeControl.SLOW_MOTION: 0b001,
    TrickModeControl.FREEZE_FRAME: 0b010,
    TrickModeControl.FAST_REVERSE: 0b011,
    TrickModeControl.SLOW_REVERSE: 0b100,
    TrickModeControl.RESERVED: 0b111,
}


def _write_table_header(writer: BitWriter, table_id_extension: int) -> None:
    writer.write(16, table_id_extension)
    writer.write(2, 0b11)
    writer.write(5, VERSION_NUMBER)
    writer.write_bit(True)
    writer.write(8, 0x00)
    writer.write(8, 0x00)


def encode_program_association(pat: ProgramAssociation) -> bytes:
    """Encode a program association section body, without section header or CRC."""
    writer = BitWriter()
    _write_table_header(writer, pat.transport_stream_id)
    for association in pat.table:
        writer.write(16, association.program_number)
        writer.write(3, 0b111)
        writer.write(13, association.program_map_pid)
    return writer.getvalue()


def encode_program_map(pmt: ProgramMap) -> bytes:
    """Encode a program map section body, without section header or CRC."""
    writer = BitWriter()
    _write_table_header(writer, pmt.program_number)
    writer.write(3, 0b111)
    writer.write(13, pmt.pcr_pid)
    writer.write(4, 0b1111)
    writer.write(12, 0)
    for program in pmt.programs:
        writer.write(8, stream_id_to_code(program.stream_id))
        writer.write(3, 0b111)
        writer.write(13, program.elementary_pid)
        writer.write(4, 0b1111)
        writer.write(12, len(program.es_info.data))
        writer.write_bytes(program.es_info.data)
    return writer.getvalue()


def _write_timestamp(writer: BitWriter, tag: int, value: int) -> None:
    writer.write(4, tag)
    writer.write(3, (value >> 30) & 0b111)
    writer.write_bit(True)
    writer.write(15, (value >> 15) & 0x7FFF)
    writer.write_bit(True)
    writer.write(15, value & 0x7FFF)
    writer.write_bit(True)


def _write_pes_header(writer: BitWriter, header: PesHeader) -> None:
    if header.pes_extension is not None:
        raise ValueError("PES header extensions are not supported")

    writer.write(2, 0b10)
    writer.write(2, header.scrambling_control)
    writer.write_bit(header.priority)
    writer.write_bit(header.data_alignment_indicator)
    writer.write_bit(header.copyright)
    writer.write_bit(header.original)
    writer.write_bit(header.pts is not None)
    writer.write_bit(header.dts is not None)
    writer.write_bit(header.escr is not None)
    writer.write_bit(header.es_rate is not None)
    writer.write_bit(header.dsm_trick_mode is not None)
    writer.write_bit(header.additional_copy_info is not None)
    writer.write_bit(header.previous_pes_packet_crc is not None)
    writer.write_bit(False)
    writer.write(8, header.pes_header_length)

    if header.pts is not None:
        tag = 0b0011 if header.dts is not None else 0b0010
        _write_timestamp(writer, tag, header.pts)
    if header.dts is not None:
        _write_timestamp(writer, 0b0001, header.dts)

    if header.escr is not None:
        escr = header.escr
        writer.write(2, 0b11)
        writer.write(3, (escr >> 39) & 0b111)
        writer.write_bit(True)
        writer.write(15, (escr >> 24) & 0x7FFF)
        writer.write_bit(True)
        writer.write(15, (escr >> 9) & 0x7FFF)
        writer.write_bit(True)
        writer.write(9, escr & 0x1FF)
        writer.write_bit(True)

    if header.es_rate is not None:
        writer.write_bit(True)
        writer.write(22, header.es_rate & 0x3FFFFF)
        writer.write_bit(True)

    if header.dsm_trick_mode is not None:
        trick = header.dsm_trick_mode
        writer.write(3, _TRICK_MODE_CODES[trick.trick_mode_control])
        writer.write(5, trick.info)

    if header.additional_copy_info is not None:
        writer.write_bit(True)
        writer.write(7, header.additional_copy_info)

    if header.previous_pes_packet_crc is not None:
        writer.write(16, header.previous_pes_packet_crc)


def encode_pes(pes: PacketizedElementaryStream) -> bytes:
    """Encode the optional PES header and additional data of a PES start."""
    writer = BitWriter()
    if pes.header is not None:
        _write_pes_header(writer, pes.header)
    if pes.additional_data:
        writer.write_bytes(pes.additional_data)
    return writer.getvalue()


def _write_section(writer: BitWriter, table_id: TableId, body: bytes) -> None:
    writer.write(8, 0)  # pointer field
    writer.write(8, table_id_to_code(table_id))
    writer.write_bit(True)
    writer.write_bit(False)
    writer.write(2, 0b11)
    writer.write(12, len(body) + CRC_SIZE)
    writer.write_bytes(body)
    writer.write(32, zlib.crc32(body) & 0xFFFFFFFF)


def write_payload(writer: BitWriter, payload: Optional[Payload]) -> None:
    """Write the PES start and PSI sections a payload carries."""
    if payload is None:
        return

    if payload.pes is not None:
        pes = payload.pes
        writer.write(16, 0)
        writer.write(8, 1)
        writer.write(8, stream_id_to_code(pes.stream_id))
        data = encode_pes(pes)
        writer.write(16, 0 if isinstance(pes.stream_id, VideoStream) else len(data))
        writer.write_bytes(data)

    if payload.pat is not None:
        _write_section(
            writer, TableId.PROGRAM_ASSOCIATION, encode_program_association(payload.pat)
        )
    if payload.pmt is not None:
        _write_section(writer, TableId.PROGRAM_MAP, encode_program_map(payload.pmt))