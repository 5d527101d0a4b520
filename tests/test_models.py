from mpegtskit.models import (
    AdaptationField,
    Association,
    EsInfo,
    Packet,
    Payload,
    PesHeader,
    Program,
    ProgramAssociation,
    ProgramMap,
    null_packet,
    pat_packet,
    pmt_packet,
)
from mpegtskit.program_descriptor import ProgramDescriptor
from mpegtskit.stream_id import StreamId


def _pmt():
    return ProgramMap(
        program_number=1,
        pcr_pid=257,
        programs=[
            Program(
                stream_id=StreamId.ITU_T_H265_VIDEO,
                elementary_pid=257,
                es_info=EsInfo(descriptor=ProgramDescriptor.RESERVED),
            )
        ],
    )


def test_default_packet():
    packet = Packet()
    assert packet.program_id == 0
    assert packet.payload_presence is False
    assert packet.adaptation_field is None
    assert packet.data == b""


def test_pat_packet():
    pat = ProgramAssociation(0, [Association(program_number=1, program_map_pid=256)])
    packet = pat_packet(pat)
    assert packet.program_id == 0
    assert packet.payload_presence is True
    assert packet.payload == Payload(pat=pat)
    assert packet.payload.pmt is None and packet.payload.pes is None


def test_pmt_packet():
    pmt = _pmt()
    packet = pmt_packet(256, pmt)
    assert packet.program_id == 256
    assert packet.payload_presence is True
    assert packet.payload.pmt == pmt
    assert packet.payload.pat is None


def test_null_packet_pid():
    packet = null_packet()
    assert packet.program_id == 8191
    assert packet.payload is None
    assert packet.payload_presence is False


def test_str_with_data():
    packet = Packet(program_id=42, data=b"\x01\x02\x03")
    text = str(packet)
    assert text.startswith("Packet with PID: 0042 (data size = 3)")
    assert text.endswith("payload None")


def test_str_without_data():
    packet = Packet(program_id=7)
    assert str(packet) == "Packet: " + repr(packet)


def test_adaptation_field_defaults():
    af = AdaptationField()
    assert af.length == 0
    assert af.pcr is None and af.opcr is None
    assert af.transport_private_data == b""


def test_pes_header_defaults():
    header = PesHeader()
    assert header.pts is None
    assert header.pes_header_length == 0


def test_mutable_defaults_are_independent():
    first = ProgramAssociation()
    second = ProgramAssociation()
    first.table.append(Association(1, 2))
    assert second.table == []