"""Program element descriptor tags."""

from __future__ import annotations

from enum import Enum, auto


class ProgramDescriptor(Enum):
    """Descriptor kinds found in elementary stream info."""

    FORBIDDEN = auto()
    VIDEO_STREAM = auto()
    AUDIO_STREAM = auto()
    HIERARCHY = auto()
    REGISTRATION = auto()
    DATA_STREAM_ALIGNMENT = auto()
    TARGET_BACKGROUND_GRID = auto()
    VIDEO_WINDOW = auto()
    CA_DESCRIPTOR = auto()
    ISO_639_LANGUAGE = auto()
    SYSTEM_CLOCK = auto()
    MULTIPLEX_BUFFER_UTILIZATION = auto()
    COPYRIGHT = auto()
    MAXIMUM_BITRATE = auto()
    PRIVATE_DATA_INDICATOR = auto()
    SMOOTHING_BUFFER = auto()
    STD = auto()
    IBP = auto()
    MPEG4_VIDEO = auto()
    MPEG4_AUDIO = auto()
    IOD = auto()
    SL = auto()
    FMC = auto()
    EXTERNAL_ES_ID = auto()
    MUX_CODE = auto()
    FMX_BUFFER_SIZE = auto()
    MULTIPLEX_BUFFER = auto()
    CONTENT_LABELING = auto()
    METADATA_POINTER = auto()
    METADATA = auto()
    METADATA_STD = auto()
    AVC_VIDEO = auto()
    IPMP = auto()
    AVC_TIMING_AND_HRD = auto()
    MPEG2_AAC_AUDIO = auto()
    FLEX_MUX_TIMING = auto()
    MPEG4_TEXT = auto()
    MPEG4_AUDIO_EXTENSION = auto()
    AUXILIARY_VIDEO_STREAM = auto()
    SVC_EXTENSION = auto()
    MVC_EXTENSION = auto()
    J2K_VIDEO = auto()
    MVC_OPERATION_POINT = auto()
    MPEG2_STEREOSCOPIC_VIDEO_FORMAT = auto()
    STEREOSCOPIC_PROGRAM_INFO = auto()
    STEREOSCOPIC_VIDEO_INFO = auto()
    TRANSPORT_PROFILE = auto()
    HEVC_VIDEO = auto()
    EXTENSION = auto()
    RESERVED = auto()
    USER_PRIVATE = auto()

    def __str__(self) -> str:
        return self.name


_D = ProgramDescriptor

_LOW_RUN = (
    _D.FORBIDDEN, _D.VIDEO_STREAM, _D.AUDIO_STREAM, _D.HIERARCHY,
    _D.REGISTRATION, _D.DATA_STREAM_ALIGNMENT, _D.TARGET_BACKGROUND_GRID,
    _D.VIDEO_WINDOW, _D.CA_DESCRIPTOR, _D.ISO_639_LANGUAGE, _D.SYSTEM_CLOCK,
    _D.MULTIPLEX_BUFFER_UTILIZATION, _D.COPYRIGHT, _D.MAXIMUM_BITRATE,
    _D.PRIVATE_DATA_INDICATOR, _D.SMOOTHING_BUFFER, _D.STD, _D.IBP,
)

_HIGH_RUN = (
    _D.MPEG4_VIDEO, _D.MPEG4_AUDIO, _D.IOD, _D.SL, _D.FMC, _D.EXTERNAL_ES_ID,
    _D.MUX_CODE, _D.FMX_BUFFER_SIZE, _D.MULTIPLEX_BUFFER, _D.CONTENT_LABELING,
    _D.METADATA_POINTER, _D.METADATA, _D.METADATA_STD, _D.AVC_VIDEO, _D.IPMP,
    _D.AVC_TIMING_AND_HRD, _D.MPEG2_AAC_AUDIO, _D.FLEX_MUX_TIMING,
    _D.MPEG4_TEXT, _D.MPEG4_AUDIO_EXTENSION, _D.AUXILIARY_VIDEO_STREAM,
    _D.SVC_EXTENSION, _D.MVC_EXTENSION, _D.J2K_VIDEO, _D.MVC_OPERATION_POINT,
    _D.MPEG2_STEREOSCOPIC_VIDEO_FORMAT, _D.STEREOSCOPIC_PROGRAM_INFO,
    _D.STEREOSCOPIC_VIDEO_INFO, _D.TRANSPORT_PROFILE, _D.HEVC_VIDEO,
)

_CODES: dict[int, ProgramDescriptor] = {
    0: _D.RESERVED,
    **dict(enumerate(_LOW_RUN, start=1)),
    **dict(enumerate(_HIGH_RUN, start=27)),
    63: _D.EXTENSION,
}


def descriptor_from_code(code: int) -> ProgramDescriptor:
    """Decode a descriptor tag; tags 19 to 26 are not supported."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"descriptor tag out of range: {code}")
    known = _CODES.get(code)
    if known is not None:
        return known
    if code >= 64:
        return ProgramDescriptor.USER_PRIVATE
    if code >= 57:
        return ProgramDescriptor.RESERVED
    raise ValueError(f"unsupported descriptor tag: {code}")