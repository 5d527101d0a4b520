import zlib

import pytest

from mpegtskit.bitstream import BitReader, BitWriter
from mpegtskit.models import (
    Association,
    DsmTrickMode,
    EsInfo,
    PacketizedElementaryStream,
    Payload,
    PesExtension,
    PesHeader,
    Program,
    ProgramAssociation,
    ProgramMap,
    TrickModeControl,
)
from mpegtskit.parse_payload import parse_payload
from mpegtskit.program_descriptor import ProgramDescriptor
from mpegtskit.stream_id import AudioStream, StreamId, VideoStream
from mpegtskit.write_payload import (
    encode_pes,
    encode_program_association,
    encode_program_map,
    write_payload,
)


def written(payload):
    writer = BitWriter()
    write_payload(writer, payload)
    return writer.getvalue()


def round_trip(payload):
    raw = written(payload)
    parsed, consumed = parse_payload(BitReader(raw), 0)
    assert consumed == len(raw)
    return parsed


PAT = ProgramAssociation(
    transport_stream_id=7,
    table=[Association(1, 0x100), Association(2, 0x200)],
)

PMT = ProgramMap(
    program_number=1,
    pcr_pid=0x101,
    programs=[
        Program(
            stream_id=StreamId.ITU_T_H265_VIDEO,
            elementary_pid=0x101,
            es_info=EsInfo(
                descriptor=ProgramDescriptor.REGISTRATION, data=b"\x05\x04HEVC"
            ),
        )
    ],
)


def test_none_writes_nothing():
    assert written(None) == b""


def test_program_association_round_trip():
    assert round_trip(Payload(pat=PAT)).pat == PAT


def test_program_association_section_header():
    raw = written(Payload(pat=PAT))
    assert raw[:2] == b"\x00\x00"
    assert raw[2] >> 4 == 0b1011


def test_program_association_body_grows_per_entry():
    one = encode_program_association(ProgramAssociation(table=PAT.table[:1]))
    two = encode_program_association(PAT)
    assert len(two) - len(one) == 4
    assert two[:2] == b"\x00\x07"


def test_program_map_round_trip():
    raw = written(Payload(pmt=PMT))
    assert raw[1] == 0x02
    assert round_trip(Payload(pmt=PMT)).pmt == PMT


def test_program_map_carries_es_info():
    body = encode_program_map(PMT)
    assert body.endswith(b"\x05\x04HEVC")


def test_video_pes_round_trip():
    header = PesHeader(
        data_alignment_indicator=True,
        pts=900000,
        dts=896400,
        escr=123456789,
        es_rate=1000,
        dsm_trick_mode=DsmTrickMode(TrickModeControl.FREEZE_FRAME, 3),
        pes_header_length=10,
    )
    pes = PacketizedElementaryStream(stream_id=VideoStream(0xE0), header=header)
    raw = written(Payload(pes=pes))
    assert raw[:3] == b"\x00\x00\x01"
    assert raw[3] == 0xE0
    assert raw[4:6] == b"\x00\x00"
    assert round_trip(Payload(pes=pes)).pes == pes


@pytest.mark.parametrize(
    "header",
    [
        PesHeader(additional_copy_info=5, pes_header_length=1),
        PesHeader(previous_pes_packet_crc=0xBEEF, pes_header_length=2),
    ],
)
def test_copy_info_and_crc_round_trip(header):
    pes = PacketizedElementaryStream(stream_id=VideoStream(0xE1), header=header)
    assert round_trip(Payload(pes=pes)).pes == pes


def test_non_video_pes_writes_length():
    pes = PacketizedElementaryStream(
        stream_id=AudioStream(0xC0), additional_data=b"abc"
    )
    raw = written(Payload(pes=pes))
    assert int.from_bytes(raw[4:6], "big") == 3
    assert raw[6:] == b"abc"


def test_pts_only_tag():
    pes = PacketizedElementaryStream(
        stream_id=VideoStream(0xE0), header=PesHeader(pts=1234)
    )
    encoded = encode_pes(pes)
    assert encoded[3] >> 4 == 0b0010
    assert encoded[3] & 1 == 1


def test_pts_and_dts_tags():
    pes = PacketizedElementaryStream(
        stream_id=VideoStream(0xE0), header=PesHeader(pts=1234, dts=1000)
    )
    encoded = encode_pes(pes)
    assert encoded[3] >> 4 == 0b0011
    assert encoded[8] >> 4 == 0b0001


def test_pes_extension_unsupported():
    pes = PacketizedElementaryStream(
        stream_id=VideoStream(0xE0), header=PesHeader(pes_extension=PesExtension())
    )
    with pytest.raises(ValueError):
        encode_pes(pes)


def test_unknown_stream_id_cannot_be_written():
    pes = PacketizedElementaryStream(stream_id=StreamId.UNKNOWN)
    with pytest.raises(ValueError):
        written(Payload(pes=pes))