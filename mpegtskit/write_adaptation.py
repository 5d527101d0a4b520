"""Encoding of adaptation fields and their extensions."""

from __future__ import annotations

import logging
from typing import Optional

from mpegtskit.bitstream import BitWriter
from mpegtskit.models import AdaptationField, AdaptationFieldExtension
from mpegtskit.program_clock import write_program_clock

logger = logging.getLogger(__name__)

STUFFING_BYTE = 0xFF


def encode_adaptation_field_extension(extension: AdaptationFieldExtension) -> bytes:
    """Encode an adaptation field extension without its length byte."""
    writer = BitWriter()
    writer.write_bit(extension.legal_time_window is not None)
    writer.write_bit(extension.piecewise_rate is not None)
    writer.write_bit(extension.seamless_splice is not None)
    writer.write(5, 0b11111)

    if extension.legal_time_window is not None:
        writer.write(16, extension.legal_time_window)
    if extension.piecewise_rate is not None:
        writer.write(24, extension.piecewise_rate)
    if extension.seamless_splice is not None:
        splice = extension.seamless_splice
        writer.write(4, (splice >> 33) & 0xF)
        writer.write(3, (splice >> 30) & 0b111)
        writer.write_bit(True)
        writer.write(15, (splice >> 15) & 0x7FFF)
        writer.write_bit(True)
        writer.write(15, splice & 0x7FFF)
        writer.write_bit(True)
    return writer.getvalue()


def write_adaptation_field_extension(
    writer: BitWriter, extension: Optional[AdaptationFieldExtension]
) -> None:
    """Write an extension preceded by its length byte; nothing for ``None``."""
    if extension is None:
        return
    data = encode_adaptation_field_extension(extension)
    logger.debug("adaptation field extension length %d", len(data))
    writer.write(8, len(data))
    writer.write_bytes(data)


def encode_adaptation_field(field: AdaptationField) -> bytes:
    """Encode the flags and optional fields of an adaptation field.

    The length byte and stuffing are not included.
    """
    writer = BitWriter()
    writer.write_bit(field.discontinuity_indicator)
    writer.write_bit(field.random_access_indicator)
    writer.write_bit(field.elementary_stream_priority_indicator)
    writer.write_bit(field.pcr is not None)
    writer.write_bit(field.opcr is not None)
    writer.write_bit(field.splice_countdown is not None)
    writer.write_bit(bool(field.transport_private_data))
    writer.write_bit(field.adaptation_field_extension is not None)

    if field.pcr is not None:
        write_program_clock(writer, field.pcr)
    if field.opcr is not None:
        write_program_clock(writer, field.opcr)

    if field.splice_countdown is not None:
        countdown = field.splice_countdown
        if not -127 <= countdown <= 127:
            raise ValueError(f"splice countdown out of range: {countdown}")
        writer.write(8, -countdown + 0x80 if countdown < 0 else countdown)

    if field.transport_private_data:
        private = field.transport_private_data
        if len(private) > 0xFF:
            raise ValueError("transport private data longer than 255 bytes")
        writer.write(8, len(private))
        writer.write_bytes(private)

    write_adaptation_field_extension(writer, field.adaptation_field_extension)
    return writer.getvalue()


def write_adaptation_field(
    writer: BitWriter, field: Optional[AdaptationField]
) -> None:
    """Write an adaptation field with its length byte and stuffing.

    The field is padded with 0xFF up to its declared length, unless only a
    single byte would be missing, in which case no padding is added.
    """
    if field is None:
        return
    if field.length == 0:
        writer.write(8, 0)
        return

    data = encode_adaptation_field(field)
    fill_count = field.length - len(data)
    if fill_count < 0:
        raise ValueError(
            f"adaptation field needs {len(data)} bytes, length is {field.length}"
        )
    if fill_count > 1:
        data += bytes([STUFFING_BYTE]) * fill_count
    writer.write(8, len(data))
    writer.write_bytes(data)