"""Elementary stream identifiers and their one-byte codes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

logger = logging.getLogger(__name__)


class StreamId(Enum):
    """Stream identifiers with a fixed code."""

    RESERVED = auto()
    ISO_IEC_11172_2_MPEG1_VIDEO = auto()
    ISO_IEC_13818_2_MPEG2_VIDEO = auto()
    ISO_IEC_11172_3_MPEG1_AUDIO = auto()
    ISO_IEC_13818_3_MPEG2_AUDIO = auto()
    ISO_IEC_13818_1_PRIVATE_SECTION = auto()
    ISO_IEC_13818_1_PES = auto()
    ISO_IEC_13522_MHEG = auto()
    ITU_T_H222_0_ANNEX_A_DSM_CC = auto()
    ITU_T_H222_1 = auto()
    ISO_IEC_13818_6_DSM_CC_TYPE_A = auto()
    ISO_IEC_13818_6_DSM_CC_TYPE_B = auto()
    ISO_IEC_13818_6_DSM_CC_TYPE_C = auto()
    ISO_IEC_13818_6_DSM_CC_TYPE_D = auto()
    ISO_IEC_13818_1_AUXILIARY = auto()
    ISO_IEC_13818_7_AAC_AUDIO = auto()
    ISO_IEC_14496_2_MPEG4_VIDEO = auto()
    ISO_IEC_14496_3_AAC_LATM_AUDIO = auto()
    ITU_T_H264_VIDEO = auto()
    ITU_T_H265_VIDEO = auto()
    VC1_VIDEO = auto()
    DIRAC_VIDEO = auto()
    AC3_AUDIO = auto()
    DTS_AUDIO = auto()
    NON_MPEG_AUDIO_SUBPICTURES = auto()
    PADDING_STREAM = auto()
    NAVIGATION_DATA = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AudioStream:
    """MPEG audio stream, codes 0xC0 to 0xDF."""

    id: int


@dataclass(frozen=True)
class VideoStream:
    """MPEG video stream, codes 0xE0 to 0xEF."""

    id: int


AnyStreamId = Union[StreamId, AudioStream, VideoStream]

_CODES: dict[int, StreamId] = {
    0x00: StreamId.RESERVED,
    0x01: StreamId.ISO_IEC_11172_2_MPEG1_VIDEO,
    0x02: StreamId.ISO_IEC_13818_2_MPEG2_VIDEO,
    0x03: StreamId.ISO_IEC_11172_3_MPEG1_AUDIO,
    0x04: StreamId.ISO_IEC_13818_3_MPEG2_AUDIO,
    0x05: StreamId.ISO_IEC_13818_1_PRIVATE_SECTION,
    0x06: StreamId.ISO_IEC_13818_1_PES,
    0x07: StreamId.ISO_IEC_13522_MHEG,
    0x08: StreamId.ITU_T_H222_0_ANNEX_A_DSM_CC,
    0x09: StreamId.ITU_T_H222_1,
    0x0A: StreamId.ISO_IEC_13818_6_DSM_CC_TYPE_A,
    0x0B: StreamId.ISO_IEC_13818_6_DSM_CC_TYPE_B,
    0x0C: StreamId.ISO_IEC_13818_6_DSM_CC_TYPE_C,
    0x0D: StreamId.ISO_IEC_13818_6_DSM_CC_TYPE_D,
    0x0E: StreamId.ISO_IEC_13818_1_AUXILIARY,
    0x0F: StreamId.ISO_IEC_13818_7_AAC_AUDIO,
    0x10: StreamId.ISO_IEC_14496_2_MPEG4_VIDEO,
    0x11: StreamId.ISO_IEC_14496_3_AAC_LATM_AUDIO,
    0x1B: StreamId.ITU_T_H264_VIDEO,
    0x24: StreamId.ITU_T_H265_VIDEO,
    0xEA: StreamId.VC1_VIDEO,
    0xD1: StreamId.DIRAC_VIDEO,
    0x81: StreamId.AC3_AUDIO,
    0x8A: StreamId.DTS_AUDIO,
    0xBD: StreamId.NON_MPEG_AUDIO_SUBPICTURES,
    0xBE: StreamId.PADDING_STREAM,
    0xBF: StreamId.NAVIGATION_DATA,
}

_REVERSE: dict[StreamId, int] = {member: code for code, member in _CODES.items()}


def stream_id_from_code(code: int) -> AnyStreamId:
    """Decode a one-byte stream identifier."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"stream id code out of range: {code}")
    known = _CODES.get(code)
    if known is not None:
        return known
    if 0xC0 <= code <= 0xDF:
        return AudioStream(code)
    if 0xE0 <= code <= 0xEF:
        return VideoStream(code)
    logger.warning("Unknown Stream ID %d", code)
    return StreamId.UNKNOWN


def stream_id_to_code(stream_id: AnyStreamId) -> int:
    """Encode a stream identifier back to its one-byte code."""
    if isinstance(stream_id, (AudioStream, VideoStream)):
        return stream_id.id
    try:
        return _REVERSE[stream_id]
    except KeyError:
        raise ValueError(f"stream id {stream_id} has no code") from None