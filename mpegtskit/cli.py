"""Command-line tools: dump, concatenate, measure PCR bitrate, wrap."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from mpegtskit.continuity import ContinuityCounter, ContinuityPcr
from mpegtskit.parse_packet import PACKET_SIZE, iter_packets, read_packets
from mpegtskit.wrapper import Wrapper
from mpegtskit.write_packet import write_packets

USAGE_EXIT = 0x0F00
SYSTEM_CLOCK_FREQUENCY = 27_000_000
PCR_BYTE_OFFSET = 10


def _args(argv: Optional[Sequence[str]]) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _usage(line: str) -> int:
    print("ERROR: missing filepath argument.")
    print("usage:")
    print(f"       {line}")
    return USAGE_EXIT


def dump_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every packet of a transport stream file."""
    args = _args(argv)
    if len(args) != 1:
        return _usage("dump [filepath.ts]")
    with open(args[0], "rb") as stream:
        for packet in iter_packets(stream):
            print(repr(packet))
    return 0


def concat_main(argv: Optional[Sequence[str]] = None) -> int:
    """Concatenate two streams, rewriting continuity counters."""
    args = _args(argv)
    if len(args) != 3:
        return _usage("dump [input1.ts] [input2.ts] [output.ts]")
    first, second, output_path = args
    sources = [second]
    counter = ContinuityCounter()
    count = 0
    with open(output_path, "wb") as output:
        stream = open(first, "rb")
        try:
            while True:
                try:
                    packets = read_packets(stream)
                except EOFError:
                    stream.close()
                    if not sources:
                        print("No more source")
                        return 0
                    stream = open(sources.pop(), "rb")
                    continue
                write_packets(output, packets, counter)
                count += len(packets)
                print(f"{count}    ", end="\r")
        finally:
            stream.close()


def pcr_measure_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the instantaneous bitrate between successive PCRs of each PID."""
    args = _args(argv)
    if len(args) != 1:
        return _usage("pcr_measure [filepath.ts]")
    pcrs = ContinuityPcr()
    packet_count = 0
    with open(args[0], "rb") as stream:
        for packet in iter_packets(stream):
            if packet.program_id == 0:
                continue
            field = packet.adaptation_field
            if field is not None and field.pcr is not None:
                new_pcr = field.pcr.ticks()
                new_index = packet_count * PACKET_SIZE + PCR_BYTE_OFFSET
                previous = pcrs.get(packet.program_id)
                if previous is not None and new_pcr != previous.pcr:
                    bitrate = (
                        (new_index - previous.index) * 8 * SYSTEM_CLOCK_FREQUENCY
                    ) / (new_pcr - previous.pcr)
                    print(f"{packet.program_id} bitrate = {int(bitrate)}")
                pcrs.update(packet.program_id, new_pcr, new_index)
            packet_count += 1
    return 0


def wrapper_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write a wrapped single-program stream to output.ts or a given path."""
    args = _args(argv)
    output_path = args[0] if args else "output.ts"
    packets = Wrapper().append_data(bytes(100))
    with open(output_path, "wb") as output:
        write_packets(output, packets, ContinuityCounter())
    return 0


_COMMANDS = {
    "dump": dump_main,
    "concat": concat_main,
    "pcr-measure": pcr_measure_main,
    "wrapper": wrapper_main,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Dispatch to one of the subcommands."""
    args = _args(argv)
    if not args or args[0] not in _COMMANDS:
        print(f"usage: mpegtskit {{{','.join(_COMMANDS)}}} [arguments...]")
        return 2
    return _COMMANDS[args[0]](args[1:])


if __name__ == "__main__":
    sys.exit(main())