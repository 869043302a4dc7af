"""Base122 encoding: bytes to safe text."""

from base122.bits import BitReader
from base122.constants import (
    ILLEGAL_INDEX,
    SHORTENED,
    ESCAPE_LEAD,
    ESCAPE_TRAIL,
    TRAIL_PAYLOAD_MASK,
)
from utils.logging import get_logger

logger = get_logger(__name__)


def _escape(index_field: int, payload: int) -> bytes:
    """Pack an index field and a 7-bit payload into 110iiip1 10pppppp."""
    b1 = ESCAPE_LEAD | ((index_field & 0b111) << 2) | ((payload >> 6) & 1)
    b2 = ESCAPE_TRAIL | (payload & TRAIL_PAYLOAD_MASK)
    return bytes((b1, b2))


def _check_input(data) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"encode() expects a bytes-like object, got {type(data).__name__}"
        )


def encode_to_bytes(data: bytes) -> bytes:
    """
    Encode binary data and return the UTF-8 byte form of the result.

    Each 7-bit chunk of the input becomes one output byte unless it is one
    of the dangerous values, in which case it is folded together with the
    following chunk into a two-byte escape. A dangerous final chunk is
    written as a shortened escape carrying its own bits.

    Args:
        data: Bytes-like object to encode

    Returns:
        Encoded bytes, always valid UTF-8 made of 1- and 2-byte sequences

    Raises:
        TypeError: If data is not bytes-like
    """
    _check_input(data)
    if not data:
        return b""

    data = bytes(data)
    reader = BitReader(data)
    result = bytearray()

    for chunk in reader:
        illegal_index = ILLEGAL_INDEX.get(chunk)
        if illegal_index is None:
            result.append(chunk)
            continue

        next_chunk = reader.next_chunk()
        if next_chunk is None:
            result += _escape(SHORTENED, chunk)
        else:
            result += _escape(illegal_index, next_chunk)

    logger.debug(f"Encoded {len(data)} bytes into {len(result)} bytes")
    return bytes(result)


def encode(data: bytes) -> str:
    """
    Encode binary data to Base122 text.

    Args:
        data: Bytes-like object to encode

    Returns:
        Encoded string; empty for empty input
    """
    return encode_to_bytes(data).decode('utf-8')
