import pytest

from mpegtskit.bitstream import BitReader, BitWriter, ParseError


def test_read_ts_header_fields():
    reader = BitReader(b"\x47\x1f\xff\x10")
    assert reader.read(8) == 0x47
    assert reader.read_bit() is False
    assert reader.read_bit() is False
    assert reader.read_bit() is False
    assert reader.read(13) == 0x1FFF
    assert reader.read(2) == 0
    assert reader.read_bit() is False
    assert reader.read_bit() is True
    assert reader.read(4) == 0
    assert reader.bits_remaining == 0


def test_write_sync_byte():
    writer = BitWriter()
    writer.write(8, 0x47)
    assert writer.getvalue() == b"\x47"


def test_round_trip_mixed_fields():
    fields = [(1, 1), (3, 5), (13, 0x1ABC), (33, (1 << 33) - 2), (6, 0b111111), (8, 0)]
    writer = BitWriter()
    for bits, value in fields:
        writer.write(bits, value)
    assert writer.aligned
    reader = BitReader(writer.getvalue())
    assert [reader.read(bits) for bits, _ in fields] == [v for _, v in fields]


def test_unaligned_bytes_round_trip():
    writer = BitWriter()
    writer.write(4, 0xA)
    writer.write_bytes(b"\x12\x34")
    writer.write(4, 0xB)
    reader = BitReader(writer.getvalue())
    assert reader.read(4) == 0xA
    assert reader.read_bytes(2) == b"\x12\x34"
    assert reader.read(4) == 0xB


def test_partial_byte_is_not_emitted():
    writer = BitWriter()
    writer.write(8, 0xFF)
    writer.write(3, 0b101)
    assert writer.getvalue() == b"\xff"
    assert not writer.aligned


def test_read_past_end_raises():
    reader = BitReader(b"\x00")
    reader.read(5)
    with pytest.raises(ParseError):
        reader.read(4)


def test_read_bytes_past_end_raises():
    reader = BitReader(b"\x01\x02")
    with pytest.raises(ParseError):
        reader.read_bytes(3)


def test_value_too_wide_raises():
    writer = BitWriter()
    with pytest.raises(ValueError):
        writer.write(4, 16)


def test_negative_value_raises():
    writer = BitWriter()
    with pytest.raises(ValueError):
        writer.write(8, -1)


def test_bit_position_tracks_reads():
    reader = BitReader(bytes(4))
    reader.read(7)
    reader.read_bit()
    assert reader.bit_position == 8
    assert reader.aligned