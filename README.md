# mpegtskit

A small, dependency-free toolkit for MPEG transport streams. It parses
188-byte TS packets, including adaptation fields, PCR/OPCR clocks, program
association and program map tables and the start of PES packets, and it
writes packets back out with a continuity counter kept per PID.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is available as its own command and as a subcommand of
`mpegtskit` (`dump`, `concat`, `pcr-measure`, `wrapper`):

```
mpegtskit dump input.ts
```

Print every packet of a transport stream (its `repr`):

```
mpegts-dump input.ts
```

Join two transport streams into one. Continuity counters are renumbered
per PID, starting at 0, so the output stays continuous:

```
mpegts-concat first.ts second.ts output.ts
```

Print the instantaneous bitrate measured between successive PCR values of
each PID (PID 0 is skipped):

```
mpegts-pcr-measure input.ts
```

Write a minimal stream (a PAT, a PMT for one HEVC video program on PID 257
and five null packets) to `output.ts`, or to the path given as argument:

```
mpegts-wrapper
mpegts-wrapper wrapped.ts
```

A wrong number of arguments prints a usage message and returns exit status
`0x0F00`.

## Library use

Streams are read seven packets at a time (1316 bytes). `iter_packets` stops
when fewer than 1316 bytes remain, so a trailing partial group is dropped;
`read_packets` raises `EOFError` in that case. `parse_packets` decodes
every complete packet in a `bytes` object.

```python
from mpegtskit.parse_packet import iter_packets

with open("input.ts", "rb") as stream:
    for packet in iter_packets(stream):
        print(packet.program_id, packet.continuity_counter)
```

`write_packets` takes a `ContinuityCounter`, assigns each PID's counter in
turn and pads every packet with `0xFF` to 188 bytes; a packet that encodes
to more than 188 bytes raises `ValueError`.

```python
from mpegtskit.continuity import ContinuityCounter
from mpegtskit.parse_packet import iter_packets
from mpegtskit.write_packet import write_packets

counter = ContinuityCounter()
with open("input.ts", "rb") as source, open("copy.ts", "wb") as target:
    write_packets(target, list(iter_packets(source)), counter)
```

The modules:

- `mpegtskit.bitstream`: `BitReader`, `BitWriter` and `ParseError`.
- `mpegtskit.models`: the data classes (`Packet`, `AdaptationField`,
  `AdaptationFieldExtension`, `Payload`, `ProgramAssociation`,
  `ProgramMap`, `PacketizedElementaryStream`, `PesHeader` and others) and
  the helpers `pat_packet`, `pmt_packet` and `null_packet`.
- `mpegtskit.program_clock`: `ProgramClock` with `ticks()` (27 MHz value).
- `mpegtskit.stream_id`, `mpegtskit.stream_type`, `mpegtskit.table_id`,
  `mpegtskit.program_descriptor`: code tables and their enums.
- `mpegtskit.descriptors`: AAC and HEVC descriptor parsing.
- `mpegtskit.parse_adaptation`, `mpegtskit.parse_payload`,
  `mpegtskit.parse_packet`: decoding.
- `mpegtskit.write_adaptation`, `mpegtskit.write_payload`,
  `mpegtskit.write_packet`: encoding. Sections are written with an
  IEEE CRC-32 of the section body.
- `mpegtskit.continuity`: `ContinuityCounter` and `ContinuityPcr`.
- `mpegtskit.wrapper`: `Wrapper`.

Malformed input raises `mpegtskit.bitstream.ParseError`.

## Limitations

- PES packets with a non-zero packet length, PES header extensions and
  program-info descriptors in a PMT are rejected with `ParseError`.
- Descriptor tags 19 to 26 are not recognised and raise `ValueError`.
- Only PAT and PMT sections are decoded; other tables, and sections behind
  a non-zero pointer field, yield no table.
- `Wrapper.append_data` does not carry the data it is given yet: it
  returns only a PAT, a PMT and null packets.