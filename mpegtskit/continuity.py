"""Per-PID state kept while writing or measuring a stream."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

COUNTER_MODULO = 16


@dataclass
class ContinuityCounter:
    """Tracks the 4-bit continuity counter of each PID."""

    streams: dict[int, int] = field(default_factory=dict)

    def next(self, program_id: int) -> int:
        """Return the counter for the next packet on ``program_id``.

        The first packet of a PID gets 0; later ones count up to 15 and wrap.
        """
        if program_id not in self.streams:
            self.streams[program_id] = 0
            return 0
        counter = (self.streams[program_id] + 1) % COUNTER_MODULO
        self.streams[program_id] = counter
        return counter


@dataclass
class PcrStream:
    """Last PCR seen on a PID and the byte index where it was read."""

    program_id: int
    pcr: int
    index: int


@dataclass
class ContinuityPcr:
    """Tracks the last PCR of each PID."""

    streams: list[PcrStream] = field(default_factory=list)

    def get(self, program_id: int) -> Optional[PcrStream]:
        """Return a copy of the stored PCR state of a PID, if any."""
        for stream in self.streams:
            if stream.program_id == program_id:
                return replace(stream)
        return None

    def update(self, program_id: int, pcr: int, index: int) -> None:
        """Store the latest PCR and its index for a PID."""
        for stream in self.streams:
            if stream.program_id == program_id:
                stream.pcr = pcr
                stream.index = index
                return
        self.streams.append(PcrStream(program_id=program_id, pcr=pcr, index=index))