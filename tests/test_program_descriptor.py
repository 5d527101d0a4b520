import pytest

from mpegtskit.program_descriptor import ProgramDescriptor, descriptor_from_code


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, ProgramDescriptor.RESERVED),
        (1, ProgramDescriptor.FORBIDDEN),
        (2, ProgramDescriptor.VIDEO_STREAM),
        (10, ProgramDescriptor.ISO_639_LANGUAGE),
        (18, ProgramDescriptor.IBP),
        (27, ProgramDescriptor.MPEG4_VIDEO),
        (40, ProgramDescriptor.AVC_VIDEO),
        (43, ProgramDescriptor.MPEG2_AAC_AUDIO),
        (56, ProgramDescriptor.HEVC_VIDEO),
        (63, ProgramDescriptor.EXTENSION),
    ],
)
def test_known_tags(code, expected):
    assert descriptor_from_code(code) is expected


@pytest.mark.parametrize("code", [57, 60, 62])
def test_reserved_range(code):
    assert descriptor_from_code(code) is ProgramDescriptor.RESERVED


@pytest.mark.parametrize("code", [64, 128, 255])
def test_user_private(code):
    assert descriptor_from_code(code) is ProgramDescriptor.USER_PRIVATE


@pytest.mark.parametrize("code", [19, 22, 26])
def test_unsupported_tags_raise(code):
    with pytest.raises(ValueError):
        descriptor_from_code(code)


def test_display_is_member_name():
    assert str(descriptor_from_code(56)) == "HEVC_VIDEO"


def test_explicit_tags_map_to_distinct_members():
    codes = [*range(1, 19), *range(27, 57)]
    decoded = [descriptor_from_code(code) for code in codes]
    assert len(set(decoded)) == len(codes)