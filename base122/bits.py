"""Bit stream helpers: 7-bit chunk extraction and 8-bit reassembly."""

from typing import Iterator, Optional

from base122.constants import CHUNK_BITS, CHUNK_MASK


class BitReader:
    """
    Reads a byte buffer as a stream of 7-bit chunks, most significant
    bit first.

    A buffer of ``n`` bytes yields exactly ``ceil(8 * n / 7)`` chunks; the
    last one has its missing low bits set to zero.
    """

    def __init__(self, data: bytes):
        self._data = data
        self._byte_index = 0
        self._bit_offset = 0

    def next_chunk(self) -> Optional[int]:
        """
        Extract the next 7-bit chunk.

        Returns:
            Chunk value in [0, 127], or None once every input bit is consumed
        """
        data = self._data
        if self._byte_index >= len(data):
            return None

        # Bits of the current byte from bit_offset on, aligned to the chunk top
        current = data[self._byte_index]
        chunk = ((current << self._bit_offset) & 0xFF) >> 1

        self._bit_offset += CHUNK_BITS
        if self._bit_offset < 8:
            return chunk

        self._bit_offset -= 8
        self._byte_index += 1
        if self._byte_index >= len(data) or self._bit_offset == 0:
            return chunk

        # Low bits come from the top of the next byte
        following = data[self._byte_index]
        return chunk | (following >> (8 - self._bit_offset))

    def __iter__(self) -> Iterator[int]:
        while True:
            chunk = self.next_chunk()
            if chunk is None:
                return
            yield chunk


class BitWriter:
    """Accumulates 7-bit chunks back into whole bytes."""

    def __init__(self):
        self._buffer = bytearray()
        self._acc_byte = 0
        self._acc_bits = 0

    def push(self, chunk: int) -> Optional[int]:
        """
        Append a 7-bit chunk to the stream.

        Args:
            chunk: Value in [0, 127]

        Returns:
            The byte completed by this chunk, or None if none was completed
        """
        # Chunk bits occupy the top of an 8-bit window
        shifted = (chunk & CHUNK_MASK) << 1
        self._acc_byte |= shifted >> self._acc_bits
        self._acc_bits += CHUNK_BITS

        if self._acc_bits < 8:
            return None

        completed = self._acc_byte
        self._buffer.append(completed)
        self._acc_bits -= 8
        self._acc_byte = (shifted << (CHUNK_BITS - self._acc_bits)) & 0xFF
        return completed

    def getvalue(self) -> bytes:
        """Whole bytes written so far; trailing partial bits are dropped."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)
