"""Elementary stream descriptors: AAC and HEVC."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mpegtskit.bitstream import BitReader, ParseError

logger = logging.getLogger(__name__)


@dataclass
class Aac:
    """MPEG-2 AAC audio descriptor."""

    profile_and_level: int
    aac_type: Optional[int] = None
    additional_info: bytes = b""


@dataclass
class Hevc:
    """HEVC video descriptor."""

    profile_space: int


def parse_aac_descriptor(reader: BitReader) -> Aac:
    """Parse an AAC descriptor, tag and length included."""
    reader.read(8)
    descriptor_length = reader.read(8)
    profile_and_level = reader.read(8)
    aac_type_flag = reader.read_bit()
    reader.read(6)

    count = 2
    aac_type = None
    if aac_type_flag:
        aac_type = reader.read(8)
        count += 1

    remaining = descriptor_length - count
    if remaining < 0:
        raise ParseError(
            f"AAC descriptor length {descriptor_length} shorter than its fields"
        )
    try:
        additional_info = reader.read_bytes(remaining)
    except ParseError:
        additional_info = bytes(remaining)

    return Aac(
        profile_and_level=profile_and_level,
        aac_type=aac_type,
        additional_info=additional_info,
    )


def parse_hevc_descriptor(reader: BitReader) -> Hevc:
    """Parse an HEVC video descriptor, tag and length included."""
    reader.read(8)
    reader.read(8)
    profile_space = reader.read(2)
    tier_flag = reader.read_bit()
    profile_idc = reader.read(5)
    profile_compatibility_indication = reader.read(32)
    progressive_source_flag = reader.read_bit()
    interlaced_source_flag = reader.read_bit()
    non_packed_constraint_flag = reader.read_bit()
    frame_only_constraint_flag = reader.read_bit()
    reader.read(44)
    reader.read(8)
    temporal_layer_subset_flag = reader.read_bit()
    reader.read_bit()
    reader.read_bit()
    reader.read(5)

    logger.debug(
        "HEVC descriptor: profile_space=%d tier_flag=%s profile_idc=%d "
        "profile_compatibility_indication=%s progressive_source_flag=%s "
        "interlaced_source_flag=%s non_packed_constraint_flag=%s "
        "frame_only_constraint_flag=%s temporal_layer_subset_flag=%s",
        profile_space,
        tier_flag,
        profile_idc,
        format(profile_compatibility_indication, "b"),
        progressive_source_flag,
        interlaced_source_flag,
        non_packed_constraint_flag,
        frame_only_constraint_flag,
        temporal_layer_subset_flag,
    )

    if temporal_layer_subset_flag:
        reader.read(5)
        temporal_id_min = reader.read(3)
        reader.read(5)
        temporal_id_max = reader.read(3)
        logger.debug(
            "temporal_id_min=%d temporal_id_max=%d", temporal_id_min, temporal_id_max
        )

    return Hevc(profile_space=profile_space)