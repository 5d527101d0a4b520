"""Data model of transport stream packets and their contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from mpegtskit.descriptors import Hevc
from mpegtskit.program_clock import ProgramClock
from mpegtskit.program_descriptor import ProgramDescriptor
from mpegtskit.stream_id import AnyStreamId

NULL_PID = 0x1FFF


@dataclass
class AdaptationFieldExtension:
    """Optional extension of an adaptation field."""

    legal_time_window: Optional[int] = None
    piecewise_rate: Optional[int] = None
    seamless_splice: Optional[int] = None


@dataclass
class AdaptationField:
    """Adaptation field carried ahead of a packet payload."""

    length: int = 0
    discontinuity_indicator: bool = False
    random_access_indicator: bool = False
    elementary_stream_priority_indicator: bool = False
    pcr: Optional[ProgramClock] = None
    opcr: Optional[ProgramClock] = None
    splice_countdown: Optional[int] = None
    transport_private_data: bytes = b""
    adaptation_field_extension: Optional[AdaptationFieldExtension] = None


class TrickModeControl(Enum):
    """DSM trick mode control values."""

    FAST_FORWARD = auto()
    SLOW_MOTION = auto()
    FREEZE_FRAME = auto()
    FAST_REVERSE = auto()
    SLOW_REVERSE = auto()
    RESERVED = auto()


@dataclass
class DsmTrickMode:
    """DSM trick mode field of a PES header."""

    trick_mode_control: TrickModeControl
    info: int = 0


@dataclass
class PesExtension:
    """PES header extension."""

    pes_private_data: bytes = b""


@dataclass
class PesHeader:
    """Optional PES header."""

    scrambling_control: int = 0
    priority: bool = False
    data_alignment_indicator: bool = False
    copyright: bool = False
    original: bool = False
    pts: Optional[int] = None
    dts: Optional[int] = None
    escr: Optional[int] = None
    es_rate: Optional[int] = None
    dsm_trick_mode: Optional[DsmTrickMode] = None
    additional_copy_info: Optional[int] = None
    previous_pes_packet_crc: Optional[int] = None
    pes_extension: Optional[PesExtension] = None
    pes_header_length: int = 0


@dataclass
class PacketizedElementaryStream:
    """Start of a PES packet."""

    stream_id: AnyStreamId
    header: Optional[PesHeader] = None
    additional_data: bytes = b""


@dataclass
class Association:
    """One entry of a program association table."""

    program_number: int
    program_map_pid: int


@dataclass
class ProgramAssociation:
    """Program association table."""

    transport_stream_id: int = 0
    table: list[Association] = field(default_factory=list)


@dataclass
class EsInfo:
    """Elementary stream info of a program map entry."""

    descriptor: ProgramDescriptor
    hevc: Optional[Hevc] = None
    data: bytes = b""


@dataclass
class Program:
    """One elementary stream of a program map."""

    stream_id: AnyStreamId
    elementary_pid: int
    es_info: EsInfo


@dataclass
class ProgramMap:
    """Program map table."""

    program_number: int = 0
    pcr_pid: int = 0
    programs: list[Program] = field(default_factory=list)


@dataclass
class Payload:
    """Decoded start of a payload unit."""

    pat: Optional[ProgramAssociation] = None
    pmt: Optional[ProgramMap] = None
    pes: Optional[PacketizedElementaryStream] = None


@dataclass
class PackHeader:
    """Program stream pack header."""

    system_clock_reference_base: int = 0
    system_clock_reference_extension: int = 0
    program_mux_rate: int = 0
    stuffing_size: int = 0


@dataclass
class Packet:
    """A 188-byte transport stream packet."""

    transport_error_indicator: bool = False
    transport_priority: bool = False
    program_id: int = 0
    transport_scrambling_control: int = 0
    continuity_counter: int = 0
    payload_presence: bool = False
    adaptation_field: Optional[AdaptationField] = None
    payload: Optional[Payload] = None
    data: bytes = b""

    def __str__(self) -> str:
        if self.data:
            return (
                f"Packet with PID: {self.program_id:04} "
                f"(data size = {len(self.data)}), payload {self.payload!r}"
            )
        return f"Packet: {self!r}"


def pat_packet(pat: ProgramAssociation) -> Packet:
    """Build a packet carrying a program association table on PID 0."""
    return Packet(payload_presence=True, payload=Payload(pat=pat))


def pmt_packet(program_id: int, pmt: ProgramMap) -> Packet:
    """Build a packet carrying a program map table."""
    return Packet(
        program_id=program_id,
        payload_presence=True,
        payload=Payload(pmt=pmt),
    )


def null_packet() -> Packet:
    """Build a null (stuffing) packet."""
    return Packet(program_id=NULL_PID)