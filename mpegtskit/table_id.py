"""PSI table identifiers and their one-byte codes."""

from __future__ import annotations

from enum import Enum, auto


class TableId(Enum):
    """Section table identifiers."""

    PROGRAM_ASSOCIATION = auto()
    CONDITIONAL_ACCESS = auto()
    PROGRAM_MAP = auto()
    TRANSPORT_STREAM_DESCRIPTION = auto()
    ISO_IEC_14496_SCENE_DESCRIPTION = auto()
    ISO_IEC_14496_OBJECT_DESCRIPTION = auto()
    METADATA = auto()
    ISO_IEC_13818_11_IPMP_CONTROL_INFORMATION = auto()
    ISO_IEC_13818_6_DSM_CC_MULTIPROTOCOL_ENCAPSULATED = auto()
    ISO_IEC_13818_6_DSM_CC_UN_MESSAGES = auto()
    ISO_IEC_13818_6_DSM_CC_DOWNLOAD_DATA_MESSAGES = auto()
    ISO_IEC_13818_6_DSM_CC_STREAM_DESCRIPTOR_LIST = auto()
    ISO_IEC_13818_6_DSM_CC_PRIVATELY_DEFINED = auto()
    ISO_IEC_13818_6_DSM_CC_ADDRESSABLE = auto()
    OTHER = auto()
    RESERVED = auto()
    FORBIDDEN = auto()

    def __str__(self) -> str:
        return self.name


_CODES: dict[int, TableId] = {
    0x00: TableId.PROGRAM_ASSOCIATION,
    0x01: TableId.CONDITIONAL_ACCESS,
    0x02: TableId.PROGRAM_MAP,
    0x03: TableId.TRANSPORT_STREAM_DESCRIPTION,
    0x04: TableId.ISO_IEC_14496_SCENE_DESCRIPTION,
    0x05: TableId.ISO_IEC_14496_OBJECT_DESCRIPTION,
    0x06: TableId.METADATA,
    0x07: TableId.ISO_IEC_13818_11_IPMP_CONTROL_INFORMATION,
    0x3A: TableId.ISO_IEC_13818_6_DSM_CC_MULTIPROTOCOL_ENCAPSULATED,
    0x3B: TableId.ISO_IEC_13818_6_DSM_CC_UN_MESSAGES,
    0x3C: TableId.ISO_IEC_13818_6_DSM_CC_DOWNLOAD_DATA_MESSAGES,
    0x3D: TableId.ISO_IEC_13818_6_DSM_CC_STREAM_DESCRIPTOR_LIST,
    0x3E: TableId.ISO_IEC_13818_6_DSM_CC_PRIVATELY_DEFINED,
    0x3F: TableId.ISO_IEC_13818_6_DSM_CC_ADDRESSABLE,
    0xFF: TableId.FORBIDDEN,
}

_REVERSE: dict[TableId, int] = {member: code for code, member in _CODES.items()}


def table_id_from_code(code: int) -> TableId:
    """Decode a one-byte table identifier."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"table id code out of range: {code}")
    known = _CODES.get(code)
    if known is not None:
        return known
    if 0x08 <= code <= 0x39:
        return TableId.RESERVED
    return TableId.OTHER


def table_id_to_code(table_id: TableId) -> int:
    """Encode a table identifier to its code; RESERVED and OTHER have none."""
    try:
        return _REVERSE[table_id]
    except KeyError:
        raise ValueError(f"table id {table_id} has no code") from None