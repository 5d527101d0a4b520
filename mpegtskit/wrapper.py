"""Building a minimal single-program stream around raw data."""

from __future__ import annotations

from dataclasses import dataclass, field

from mpegtskit.models import (
    Association,
    EsInfo,
    Packet,
    Program,
    ProgramAssociation,
    ProgramMap,
    null_packet,
    pat_packet,
    pmt_packet,
)
from mpegtskit.program_descriptor import ProgramDescriptor
from mpegtskit.stream_id import StreamId

PROGRAM_MAP_PID = 256
PROGRAM_NUMBER = 1
VIDEO_PID = 257
NULL_PACKET_COUNT = 5


@dataclass
class Wrapper:
    """Wraps data into a stream with one HEVC program."""

    programs: list[Program] = field(default_factory=list)

    def append_data(self, data: bytes) -> list[Packet]:
        """Return a PAT, a PMT and five null packets.

        The data itself is not carried yet.
        """
        pat = ProgramAssociation(
            transport_stream_id=0,
            table=[
                Association(
                    program_number=PROGRAM_NUMBER, program_map_pid=PROGRAM_MAP_PID
                )
            ],
        )
        pmt = ProgramMap(
            program_number=PROGRAM_NUMBER,
            pcr_pid=VIDEO_PID,
            programs=[
                Program(
                    stream_id=StreamId.ITU_T_H265_VIDEO,
                    elementary_pid=VIDEO_PID,
                    es_info=EsInfo(descriptor=ProgramDescriptor.RESERVED, data=b""),
                )
            ],
        )
        return [
            pat_packet(pat),
            pmt_packet(PROGRAM_MAP_PID, pmt),
            *(null_packet() for _ in range(NULL_PACKET_COUNT)),
        ]