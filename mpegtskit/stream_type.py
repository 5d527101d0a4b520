"""Stream type classification of one-byte codes."""

from __future__ import annotations

from enum import Enum, auto


class StreamType(Enum):
    """Kinds of stream type codes."""

    RESERVED = auto()
    VIDEO_STREAM_HEADER_PARAMETERS_FOR_H262_AND_ISO_IEC_11172_2 = auto()
    AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_13818_3_AND_ISO_IEC_11172_3 = auto()
    HIERARCHY_FOR_STREAM_SELECTION = auto()
    REGISTRATION_OF_PRIVATE_FORMATS = auto()
    DATA_STREAM_ALIGNMENT_FOR_PACKETIZED_VIDEO_AND_AUDIO_SYNC_POINT = auto()
    TARGET_BACKGROUND_GRID_DEFINES_TOTAL_DISPLAY_AREA_SIZE = auto()
    VIDEO_WINDOW_DEFINES_POSITION_IN_DISPLAY_AREA = auto()
    CONDITIONAL_ACCESS_SYSTEM_AND_EMM_ECM_PID = auto()
    ISO_639_LANGUAGE_AND_AUDIO_TYPE = auto()
    SYSTEM_CLOCK_EXTERNAL_REFERENCE = auto()
    MULTIPLEX_BUFFER_UTILIZATION_BOUNDS = auto()
    COPYRIGHT_IDENTIFICATION_SYSTEM_AND_REFERENCE = auto()
    MAXIMUM_BIT_RATE = auto()
    PRIVATE_DATA_INDICATOR = auto()
    SMOOTHING_BUFFER = auto()
    STD_VIDEO_BUFFER_LEAK_CONTROL = auto()
    IBP_VIDEO_I_FRAME_INDICATOR = auto()
    DSM_CC_CAROUSEL_IDENTIFIER = auto()
    DSM_CC_ASSOCIATION_TAG = auto()
    DSM_CC_DEFERRED_ASSOCIATION_TAG = auto()
    DSM_CC_RESERVED = auto()
    DSM_CC_NPT_REFERENCE = auto()
    DSM_CC_NPT_ENDPOINT = auto()
    DSM_CC_STREAM_MODE = auto()
    DSM_CC_STREAM_EVENT = auto()
    VIDEO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_2 = auto()
    AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_3 = auto()
    IOD_PARAMETERS_FOR_ISO_IEC_14496_1 = auto()
    SL_PARAMETERS_FOR_ISO_IEC_14496_1 = auto()
    FMC_PARAMETERS_FOR_ISO_IEC_14496_1 = auto()
    EXTERNAL_ES_IDENTIFIER_FOR_ISO_IEC_14496_1 = auto()
    MUX_CODE_FOR_ISO_IEC_14496_1 = auto()
    FMX_BUFFER_SIZE_FOR_ISO_IEC_14496_1 = auto()
    MULTIPLEX_BUFFER_FOR_ISO_IEC_14496_1 = auto()
    CONTENT_LABELING_FOR_ISO_IEC_14496_1 = auto()
    METADATA_POINTER = auto()
    METADATA = auto()
    METADATA_STD = auto()
    VIDEO_STREAM_HEADER_PARAMETERS_FOR_H264_AND_ISO_IEC_14496_10 = auto()
    ISO_IEC_13818_11_IPMP = auto()
    TIMING_AND_HRD_FOR_H264_AND_ISO_IEC_14496_10 = auto()
    AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_13818_7_ADTS_AAC = auto()
    FLEX_MUX_TIMING_FOR_ISO_IEC_14496_1 = auto()
    TEXT_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496 = auto()
    AUDIO_EXTENSION_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_3 = auto()
    VIDEO_AUXILIARY_STREAM_HEADER_PARAMETERS = auto()
    VIDEO_SCALABLE_STREAM_HEADER_PARAMETERS = auto()
    VIDEO_MULTI_STREAM_HEADER_PARAMETERS = auto()
    VIDEO_STREAM_HEADER_PARAMETERS_FOR_T802_AND_ISO_IEC_15444_3 = auto()
    VIDEO_MULTI_OPERATION_POINT_STREAM_HEADER_PARAMETERS = auto()
    VIDEO_STEREOSCOPIC_3D_STREAM_HEADER_PARAMETERS_FOR_H262 = auto()
    PROGRAM_STEREOSCOPIC_3D_INFORMATION = auto()
    VIDEO_STEREOSCOPIC_3D_INFORMATION = auto()
    USED_BY_DVB = auto()
    USED_BY_ATSC = auto()
    VIDEO_LAN_FOUR_CC = auto()
    USED_BY_ISDB = auto()
    USED_BY_CABLE_LABS = auto()
    OTHER = auto()
    FORBIDDEN = auto()

    def __str__(self) -> str:
        return self.name


_ORDERED_FROM_0X02 = (
    StreamType.VIDEO_STREAM_HEADER_PARAMETERS_FOR_H262_AND_ISO_IEC_11172_2,
    StreamType.AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_13818_3_AND_ISO_IEC_11172_3,
    StreamType.HIERARCHY_FOR_STREAM_SELECTION,
    StreamType.REGISTRATION_OF_PRIVATE_FORMATS,
    StreamType.DATA_STREAM_ALIGNMENT_FOR_PACKETIZED_VIDEO_AND_AUDIO_SYNC_POINT,
    StreamType.TARGET_BACKGROUND_GRID_DEFINES_TOTAL_DISPLAY_AREA_SIZE,
    StreamType.VIDEO_WINDOW_DEFINES_POSITION_IN_DISPLAY_AREA,
    StreamType.CONDITIONAL_ACCESS_SYSTEM_AND_EMM_ECM_PID,
    StreamType.ISO_639_LANGUAGE_AND_AUDIO_TYPE,
    StreamType.SYSTEM_CLOCK_EXTERNAL_REFERENCE,
    StreamType.MULTIPLEX_BUFFER_UTILIZATION_BOUNDS,
    StreamType.COPYRIGHT_IDENTIFICATION_SYSTEM_AND_REFERENCE,
    StreamType.MAXIMUM_BIT_RATE,
    StreamType.PRIVATE_DATA_INDICATOR,
    StreamType.SMOOTHING_BUFFER,
    StreamType.STD_VIDEO_BUFFER_LEAK_CONTROL,
    StreamType.IBP_VIDEO_I_FRAME_INDICATOR,
    StreamType.DSM_CC_CAROUSEL_IDENTIFIER,
    StreamType.DSM_CC_ASSOCIATION_TAG,
    StreamType.DSM_CC_DEFERRED_ASSOCIATION_TAG,
    StreamType.DSM_CC_RESERVED,
    StreamType.DSM_CC_NPT_REFERENCE,
    StreamType.DSM_CC_NPT_ENDPOINT,
    StreamType.DSM_CC_STREAM_MODE,
    StreamType.DSM_CC_STREAM_EVENT,
    StreamType.VIDEO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_2,
    StreamType.AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_3,
    StreamType.IOD_PARAMETERS_FOR_ISO_IEC_14496_1,
    StreamType.SL_PARAMETERS_FOR_ISO_IEC_14496_1,
    StreamType.FMC_PARAMETERS_FOR_ISO_IEC_14496_1,
    StreamType.EXTERNAL_ES_IDENTIFIER_FOR_ISO_IEC_14496_1,
    StreamType.MUX_CODE_FOR_ISO_IEC_14496_1,
    StreamType.FMX_BUFFER_SIZE_FOR_ISO_IEC_14496_1,
    StreamType.MULTIPLEX_BUFFER_FOR_ISO_IEC_14496_1,
    StreamType.CONTENT_LABELING_FOR_ISO_IEC_14496_1,
    StreamType.METADATA_POINTER,
    StreamType.METADATA,
    StreamType.METADATA_STD,
    StreamType.VIDEO_STREAM_HEADER_PARAMETERS_FOR_H264_AND_ISO_IEC_14496_10,
    StreamType.ISO_IEC_13818_11_IPMP,
    StreamType.TIMING_AND_HRD_FOR_H264_AND_ISO_IEC_14496_10,
    StreamType.AUDIO_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_13818_7_ADTS_AAC,
    StreamType.FLEX_MUX_TIMING_FOR_ISO_IEC_14496_1,
    StreamType.TEXT_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496,
    StreamType.AUDIO_EXTENSION_STREAM_HEADER_PARAMETERS_FOR_ISO_IEC_14496_3,
    StreamType.VIDEO_AUXILIARY_STREAM_HEADER_PARAMETERS,
    StreamType.VIDEO_SCALABLE_STREAM_HEADER_PARAMETERS,
    StreamType.VIDEO_MULTI_STREAM_HEADER_PARAMETERS,
    StreamType.VIDEO_STREAM_HEADER_PARAMETERS_FOR_T802_AND_ISO_IEC_15444_3,
    StreamType.VIDEO_MULTI_OPERATION_POINT_STREAM_HEADER_PARAMETERS,
    StreamType.VIDEO_STEREOSCOPIC_3D_STREAM_HEADER_PARAMETERS_FOR_H262,
    StreamType.PROGRAM_STEREOSCOPIC_3D_INFORMATION,
    StreamType.VIDEO_STEREOSCOPIC_3D_INFORMATION,
)

_CODES: dict[int, StreamType] = {
    0x00: StreamType.RESERVED,
    0x01: StreamType.RESERVED,
    **dict(enumerate(_ORDERED_FROM_0X02, start=0x02)),
    0xA0: StreamType.VIDEO_LAN_FOUR_CC,
    0xFF: StreamType.FORBIDDEN,
}


def stream_type_from_code(code: int) -> StreamType:
    """Classify a one-byte stream type code."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"stream type code out of range: {code}")
    known = _CODES.get(code)
    if known is not None:
        return known
    if 0x37 <= code <= 0x3F:
        return StreamType.RESERVED
    return StreamType.OTHER