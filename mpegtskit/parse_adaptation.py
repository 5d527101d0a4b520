"""Decoding of adaptation fields and their extensions."""

from __future__ import annotations

from mpegtskit.bitstream import BitReader, ParseError
from mpegtskit.models import AdaptationField, AdaptationFieldExtension
from mpegtskit.program_clock import parse_program_clock

STUFFING_BYTE = 0xFF


def _bytes_since(reader: BitReader, start_bit: int) -> int:
    return (reader.bit_position - start_bit) // 8


def parse_adaptation_field_extension(reader: BitReader) -> AdaptationFieldExtension:
    """Parse an adaptation field extension, its length byte included.

    Only the fields announced by the flags are consumed; any bytes the
    declared length covers beyond them are left in the reader.
    """
    reader.read(8)
    legal_time_window_flag = reader.read_bit()
    piecewise_rate_flag = reader.read_bit()
    seamless_splice_flag = reader.read_bit()
    reader.read(5)

    legal_time_window = reader.read(16) if legal_time_window_flag else None
    piecewise_rate = reader.read(24) if piecewise_rate_flag else None

    seamless_splice = None
    if seamless_splice_flag:
        splice_type = reader.read(4)
        dts_high = reader.read(3)
        reader.read_bit()
        dts_medium = reader.read(15)
        reader.read_bit()
        dts_low = reader.read(15)
        reader.read_bit()
        seamless_splice = (
            (splice_type << 33) + (dts_high << 30) + (dts_medium << 15) + dts_low
        )

    return AdaptationFieldExtension(
        legal_time_window=legal_time_window,
        piecewise_rate=piecewise_rate,
        seamless_splice=seamless_splice,
    )


def parse_adaptation_field(reader: BitReader) -> AdaptationField:
    """Parse an adaptation field, length byte and stuffing included.

    Stuffing after the parsed fields must consist of 0xFF bytes; anything
    else raises :class:`ParseError`.
    """
    start = reader.bit_position
    length = reader.read(8)
    if length == 0:
        return AdaptationField(length=0)

    discontinuity_indicator = reader.read_bit()
    random_access_indicator = reader.read_bit()
    elementary_stream_priority_indicator = reader.read_bit()
    pcr_flag = reader.read_bit()
    opcr_flag = reader.read_bit()
    splicing_point_flag = reader.read_bit()
    transport_private_data_flag = reader.read_bit()
    extension_flag = reader.read_bit()

    pcr = parse_program_clock(reader) if pcr_flag else None
    opcr = parse_program_clock(reader) if opcr_flag else None

    splice_countdown = None
    if splicing_point_flag:
        raw = reader.read(8)
        splice_countdown = -(raw & 0x7F) if raw & 0x80 else raw

    transport_private_data = b""
    if transport_private_data_flag:
        private_length = reader.read(8)
        transport_private_data = reader.read_bytes(private_length)

    extension = parse_adaptation_field_extension(reader) if extension_flag else None

    consumed = _bytes_since(reader, start)
    if consumed < length:
        stuffing = reader.read_bytes(length + 1 - consumed)
        if any(byte != STUFFING_BYTE for byte in stuffing):
            raise ParseError("some data is not parsed for the adaptation field")

    return AdaptationField(
        length=length,
        discontinuity_indicator=discontinuity_indicator,
        random_access_indicator=random_access_indicator,
        elementary_stream_priority_indicator=elementary_stream_priority_indicator,
        pcr=pcr,
        opcr=opcr,
        splice_countdown=splice_countdown,
        transport_private_data=transport_private_data,
        adaptation_field_extension=extension,
    )