import io

import pytest

from mpegtskit.continuity import ContinuityCounter
from mpegtskit.models import (
    NULL_PID,
    AdaptationField,
    Association,
    EsInfo,
    Packet,
    Program,
    ProgramAssociation,
    ProgramMap,
    null_packet,
    pat_packet,
    pmt_packet,
)
from mpegtskit.parse_packet import parse_packets
from mpegtskit.program_clock import ProgramClock
from mpegtskit.program_descriptor import ProgramDescriptor
from mpegtskit.stream_id import StreamId
from mpegtskit.write_packet import encode_packet, write_packet, write_packets


def _roundtrip(packets):
    out = io.BytesIO()
    write_packets(out, packets, ContinuityCounter())
    return out.getvalue(), parse_packets(out.getvalue())


def test_null_packet_header_bytes():
    data = encode_packet(null_packet(), ContinuityCounter())
    assert data == bytes([0x47, 0x1F, 0xFF, 0x00])


def test_write_packet_writes_unpadded():
    out = io.BytesIO()
    write_packet(out, null_packet(), ContinuityCounter())
    assert out.getvalue()[0] == 0x47
    assert len(out.getvalue()) == 4


def test_write_packets_pads_to_188():
    raw, parsed = _roundtrip([null_packet()])
    assert len(raw) == 188
    assert raw[4:] == b"\xff" * 184
    assert parsed[0].program_id == NULL_PID
    assert parsed[0].data == b"\xff" * 184


def test_pat_roundtrip():
    pat = ProgramAssociation(
        transport_stream_id=0, table=[Association(program_number=1, program_map_pid=256)]
    )
    _, parsed = _roundtrip([pat_packet(pat)])
    assert parsed[0].program_id == 0
    assert parsed[0].payload.pat == pat
    assert parsed[0].data == b""


def test_pmt_roundtrip():
    pmt = ProgramMap(
        program_number=1,
        pcr_pid=257,
        programs=[
            Program(
                stream_id=StreamId.ITU_T_H264_VIDEO,
                elementary_pid=257,
                es_info=EsInfo(descriptor=ProgramDescriptor.REGISTRATION, data=b"\x05\x00"),
            )
        ],
    )
    _, parsed = _roundtrip([pmt_packet(256, pmt)])
    assert parsed[0].program_id == 256
    assert parsed[0].payload.pmt == pmt


def test_continuity_counter_per_pid():
    packets = [
        Packet(program_id=100, payload_presence=True, data=bytes(range(184))),
        Packet(program_id=100, payload_presence=True, data=bytes(range(184))),
        Packet(program_id=200, payload_presence=True, data=bytes(range(184))),
        Packet(program_id=100, payload_presence=True, data=bytes(range(184))),
    ]
    _, parsed = _roundtrip(packets)
    assert [p.continuity_counter for p in parsed] == [0, 1, 0, 2]


def test_continuity_counter_wraps():
    packets = [null_packet() for _ in range(17)]
    _, parsed = _roundtrip(packets)
    assert [p.continuity_counter for p in parsed] == list(range(16)) + [0]


def test_data_roundtrip():
    payload = bytes(range(184))
    _, parsed = _roundtrip([Packet(program_id=100, payload_presence=True, data=payload)])
    assert parsed[0].data == payload
    assert parsed[0].payload_presence is True


def test_adaptation_field_pcr_roundtrip():
    packet = Packet(
        program_id=100,
        adaptation_field=AdaptationField(length=7, pcr=ProgramClock(base=1000, extension=5)),
    )
    _, parsed = _roundtrip([packet])
    field = parsed[0].adaptation_field
    assert field.pcr == ProgramClock(base=1000, extension=5)
    assert field.length == 7
    assert len(parsed[0].data) == 184 - 8


def test_oversized_packet_rejected():
    packet = Packet(program_id=100, payload_presence=True, data=bytes(185))
    with pytest.raises(ValueError):
        write_packets(io.BytesIO(), [packet], ContinuityCounter())


def test_write_packets_default_counter():
    out = io.BytesIO()
    write_packets(out, [null_packet(), null_packet()])
    parsed = parse_packets(out.getvalue())
    assert [p.continuity_counter for p in parsed] == [0, 1]