"""Program clock references (PCR/OPCR) and their 48-bit wire form."""

from __future__ import annotations

from dataclasses import dataclass

from mpegtskit.bitstream import BitReader, BitWriter

BASE_BITS = 33
RESERVED_BITS = 6
EXTENSION_BITS = 9


@dataclass
class ProgramClock:
    """A 33-bit base at 90 kHz plus a 9-bit extension at 27 MHz."""

    base: int = 0
    extension: int = 0

    def ticks(self) -> int:
        """Return the clock value in 27 MHz ticks."""
        return self.base * 300 + self.extension


def parse_program_clock(reader: BitReader) -> ProgramClock:
    """Read a program clock field: base, reserved bits, extension."""
    base = reader.read(BASE_BITS)
    reader.read(RESERVED_BITS)
    extension = reader.read(EXTENSION_BITS)
    return ProgramClock(base=base, extension=extension)


def write_program_clock(writer: BitWriter, clock: ProgramClock) -> None:
    """Write a program clock field with the reserved bits set."""
    writer.write(BASE_BITS, clock.base)
    writer.write(RESERVED_BITS, 0b111111)
    writer.write(EXTENSION_BITS, clock.extension)