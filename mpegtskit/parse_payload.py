"""Decoding of payload unit starts: PSI tables and PES headers."""

from __future__ import annotations

import logging
from typing import Optional

from mpegtskit.bitstream import BitReader, ParseError
from mpegtskit.descriptors import parse_hevc_descriptor
from mpegtskit.models import (
    Association,
    DsmTrickMode,
    EsInfo,
    PacketizedElementaryStream,
    Payload,
    PesHeader,
    Program,
    ProgramAssociation,
    ProgramMap,
    TrickModeControl,
)
from mpegtskit.program_descriptor import ProgramDescriptor, descriptor_from_code
from mpegtskit.stream_id import stream_id_from_code
from mpegtskit.table_id import TableId, table_id_from_code

logger = logging.getLogger(__name__)

_TABLE_HEADER_SIZE = 5
_CRC_SIZE = 4
_OPTIONAL_PES_HEADER_MARKER = 0b10

_TRICK_MODES = {
    0b000: TrickModeControl.FAST_FORWARD,
    0b001: TrickModeControl.SLOW_MOTION,
    0b010: TrickModeControl.FREEZE_FRAME,
    0b011: TrickModeControl.FAST_REVERSE,
    0b100: TrickModeControl.SLOW_REVERSE,
}


def _parse_table(reader: BitReader, length: int) -> tuple[int, bytes]:
    """Read the long section header, body and CRC; return extension and body."""
    body_length = length - _TABLE_HEADER_SIZE - _CRC_SIZE
    if body_length < 0:
        raise ParseError(f"section length {length} too short for a table")
    table_id_extension = reader.read(16)
    reader.read(2)
    reader.read(5)
    reader.read_bit()
    reader.read(8)
    reader.read(8)
    body = reader.read_bytes(body_length)
    reader.read(32)
    return table_id_extension, body


def parse_program_association(reader: BitReader, length: int) -> ProgramAssociation:
    """Parse a program association section body of the given section length."""
    transport_stream_id, body = _parse_table(reader, length)
    table = [
        Association(
            program_number=(body[i] << 8) + body[i + 1],
            program_map_pid=((body[i + 2] & 0x1F) << 8) + body[i + 3],
        )
        for i in range(0, len(body) - len(body) % 4, 4)
    ]
    return ProgramAssociation(transport_stream_id=transport_stream_id, table=table)


def _parse_program(body: bytes, offset: int) -> tuple[Program, int]:
    if offset + 5 > len(body):
        raise ParseError("program map entry truncated")
    stream_type = body[offset]
    elementary_pid = ((body[offset + 1] & 0x1F) << 8) + body[offset + 2]
    es_info_length = ((body[offset + 3] & 0x03) << 8) + body[offset + 4]
    start = offset + 5
    end = start + es_info_length
    if end > len(body):
        raise ParseError("elementary stream info runs past the section")
    es_info = body[start:end]
    if not es_info:
        raise ParseError("elementary stream info is empty")

    descriptor = descriptor_from_code(es_info[0])
    hevc = (
        parse_hevc_descriptor(BitReader(es_info))
        if descriptor is ProgramDescriptor.HEVC_VIDEO
        else None
    )
    logger.debug("program descriptor %s", descriptor)

    program = Program(
        stream_id=stream_id_from_code(stream_type),
        elementary_pid=elementary_pid,
        es_info=EsInfo(descriptor=descriptor, hevc=hevc, data=es_info),
    )
    return program, end


def parse_program_map(reader: BitReader, length: int) -> ProgramMap:
    """Parse a program map section body of the given section length."""
    program_number, body = _parse_table(reader, length)
    if len(body) < 4:
        raise ParseError("program map section too short")
    pcr_pid = ((body[0] & 0x1F) << 8) + body[1]
    program_info_length = ((body[2] & 0x03) << 8) + body[3]
    if program_info_length != 0:
        raise ParseError("program info descriptors are not supported")

    programs = []
    offset = 4
    while offset < len(body):
        program, offset = _parse_program(body, offset)
        programs.append(program)

    return ProgramMap(program_number=program_number, pcr_pid=pcr_pid, programs=programs)


def _read_timestamp(reader: BitReader) -> int:
    reader.read(4)
    high = reader.read(3)
    reader.read(1)
    middle = reader.read(15)
    reader.read(1)
    low = reader.read(15)
    reader.read(1)
    return (high << 30) + (middle << 15) + low


def _read_escr(reader: BitReader) -> int:
    reader.read(2)
    high = reader.read(3)
    reader.read_bit()
    middle = reader.read(15)
    reader.read_bit()
    low = reader.read(15)
    reader.read_bit()
    extension = reader.read(9)
    reader.read_bit()
    return (high << 39) + (middle << 24) + (low << 9) + extension


def _parse_pes_header(reader: BitReader) -> PesHeader:
    scrambling_control = reader.read(2)
    priority = reader.read_bit()
    data_alignment_indicator = reader.read_bit()
    copyright_flag = reader.read_bit()
    original = reader.read_bit()

    pts_flag = reader.read_bit()
    dts_flag = reader.read_bit()
    escr_flag = reader.read_bit()
    es_rate_flag = reader.read_bit()
    dsm_trick_mode_flag = reader.read_bit()
    additional_copy_info_flag = reader.read_bit()
    crc_flag = reader.read_bit()
    extension_flag = reader.read_bit()
    pes_header_length = reader.read(8)

    pts = _read_timestamp(reader) if pts_flag else None
    dts = _read_timestamp(reader) if dts_flag else None
    escr = _read_escr(reader) if escr_flag else None

    es_rate = None
    if es_rate_flag:
        reader.read_bit()
        es_rate = reader.read(22)
        reader.read_bit()

    dsm_trick_mode = None
    if dsm_trick_mode_flag:
        mode = _TRICK_MODES.get(reader.read(3), TrickModeControl.RESERVED)
        dsm_trick_mode = DsmTrickMode(trick_mode_control=mode, info=reader.read(5))

    previous_pes_packet_crc = reader.read(16) if crc_flag else None

    additional_copy_info = None
    if additional_copy_info_flag:
        reader.read_bit()
        additional_copy_info = reader.read(7)

    if extension_flag:
        raise ParseError("PES header extensions are not supported")

    return PesHeader(
        scrambling_control=scrambling_control,
        priority=priority,
        data_alignment_indicator=data_alignment_indicator,
        copyright=copyright_flag,
        original=original,
        pts=pts,
        dts=dts,
        escr=escr,
        es_rate=es_rate,
        dsm_trick_mode=dsm_trick_mode,
        additional_copy_info=additional_copy_info,
        previous_pes_packet_crc=previous_pes_packet_crc,
        pes_extension=None,
        pes_header_length=pes_header_length,
    )


def _parse_pes(reader: BitReader) -> PacketizedElementaryStream:
    es_id = reader.read(8)
    pes_packet_length = reader.read(16)
    if pes_packet_length != 0:
        raise ParseError("PES packets with an explicit length are not supported")

    header = None
    if reader.read(2) == _OPTIONAL_PES_HEADER_MARKER:
        header = _parse_pes_header(reader)
    else:
        reader.read(6)

    return PacketizedElementaryStream(
        stream_id=stream_id_from_code(es_id), header=header, additional_data=b""
    )


def parse_payload(reader: BitReader, consumed: int) -> tuple[Optional[Payload], int]:
    """Parse the start of a payload unit.

    ``consumed`` is the number of packet bytes already read after the
    4-byte header; the updated count is returned with the payload, which
    is ``None`` for stuffing or sections behind a non-zero pointer.
    """
    start = reader.bit_position

    def total() -> int:
        return consumed + (reader.bit_position - start) // 8

    first, second, third = reader.read_bytes(3)

    if (first, second, third) == (0x00, 0x00, 0x01):
        return Payload(pes=_parse_pes(reader)), total()

    if first == 0xFF:
        return None, total()

    if first > 0x00:
        logger.debug("pointer field %d", first)
        return None, total()

    section_length = reader.read(8) + ((third & 0x03) << 8)
    table_id = table_id_from_code(second)

    payload = Payload()
    if table_id is TableId.PROGRAM_ASSOCIATION:
        payload.pat = parse_program_association(reader, section_length)
    elif table_id is TableId.PROGRAM_MAP:
        payload.pmt = parse_program_map(reader, section_length)
    return payload, total()