"""Big-endian bit-level reading and writing over byte buffers."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a byte stream cannot be decoded."""


class BitReader:
    """Reads big-endian bit fields from an in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def bit_position(self) -> int:
        """Number of bits consumed so far."""
        return self._pos

    @property
    def bits_remaining(self) -> int:
        """Number of bits still available."""
        return len(self._data) * 8 - self._pos

    @property
    def aligned(self) -> bool:
        """True when the read position sits on a byte boundary."""
        return self._pos % 8 == 0

    def _require(self, bits: int) -> None:
        if bits > self.bits_remaining:
            raise ParseError(
                f"unexpected end of data: need {bits} bits, "
                f"{self.bits_remaining} left"
            )

    def read(self, bits: int) -> int:
        """Read an unsigned integer of the given width in bits."""
        if bits < 0:
            raise ValueError("bit count must not be negative")
        self._require(bits)
        value = 0
        pos = self._pos
        remaining = bits
        while remaining:
            byte = self._data[pos >> 3]
            available = 8 - (pos & 7)
            take = min(available, remaining)
            chunk = (byte >> (available - take)) & ((1 << take) - 1)
            value = (value << take) | chunk
            pos += take
            remaining -= take
        self._pos = pos
        return value

    def read_bit(self) -> bool:
        """Read a single bit as a boolean."""
        return bool(self.read(1))

    def read_bytes(self, count: int) -> bytes:
        """Read ``count`` whole bytes, aligned or not."""
        if count < 0:
            raise ValueError("byte count must not be negative")
        self._require(count * 8)
        if self.aligned:
            start = self._pos >> 3
            self._pos += count * 8
            return self._data[start:start + count]
        return bytes(self.read(8) for _ in range(count))


class BitWriter:
    """Accumulates big-endian bit fields into bytes.

    Only complete bytes are kept: bits left over after the last full byte
    are not part of :meth:`getvalue`.
    """

    def __init__(self) -> None:
        self._out = bytearray()
        self._acc = 0
        self._nbits = 0

    @property
    def aligned(self) -> bool:
        """True when no partial byte is pending."""
        return self._nbits == 0

    def write(self, bits: int, value: int) -> None:
        """Write ``value`` as an unsigned field of ``bits`` bits."""
        if bits < 0:
            raise ValueError("bit count must not be negative")
        value = int(value)
        if value < 0 or value >= (1 << bits):
            raise ValueError(f"value {value} does not fit in {bits} bits")
        self._acc = (self._acc << bits) | value
        self._nbits += bits
        while self._nbits >= 8:
            self._nbits -= 8
            self._out.append((self._acc >> self._nbits) & 0xFF)
        self._acc &= (1 << self._nbits) - 1

    def write_bit(self, bit: bool) -> None:
        """Write one bit."""
        self.write(1, 1 if bit else 0)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write whole bytes at the current bit position."""
        if self.aligned:
            self._out.extend(data)
            return
        for byte in bytes(data):
            self.write(8, byte)

    def getvalue(self) -> bytes:
        """Return the complete bytes written so far."""
        return bytes(self._out)