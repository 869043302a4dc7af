"""Base122 decoding: safe text back to bytes."""

from typing import Iterator, Tuple, Union

from base122.bits import BitWriter
from base122.constants import (
    ILLEGALS,
    ILLEGAL_INDEX,
    SHORTENED,
    CHUNK_MASK,
    INDEX_SHIFT,
    ESCAPE_MARKER_BIT,
    MAX_SAFE_CODE_POINT,
    MAX_ESCAPE_CODE_POINT,
    LEAD_PREFIX_MASK,
    LEAD_PREFIX,
    TRAIL_PREFIX_MASK,
    ESCAPE_TRAIL,
    TRAIL_PAYLOAD_MASK,
)
from utils.exceptions import InvalidSequenceError
from utils.logging import get_logger

logger = get_logger(__name__)


def _text_units(text: str) -> Iterator[Tuple[int, int]]:
    for position, char in enumerate(text):
        yield position, ord(char)


def _byte_units(raw: bytes) -> Iterator[Tuple[int, int]]:
    """
    Split raw encoded bytes into code point units.

    Only 0xxxxxxx and 110xxxxx 10yyyyyy sequences are accepted.

    Yields:
        (byte offset, code point) pairs
    """
    size = len(raw)
    offset = 0
    while offset < size:
        lead = raw[offset]
        if lead <= MAX_SAFE_CODE_POINT:
            yield offset, lead
            offset += 1
            continue

        if lead & LEAD_PREFIX_MASK != LEAD_PREFIX:
            raise InvalidSequenceError(offset, lead, "not a one- or two-byte lead byte")
        if offset + 1 >= size:
            raise InvalidSequenceError(offset, lead, "truncated two-byte sequence")

        trail = raw[offset + 1]
        if trail & TRAIL_PREFIX_MASK != ESCAPE_TRAIL:
            raise InvalidSequenceError(offset + 1, trail, "bad continuation byte")

        code_point = ((lead & 0b11111) << 6) | (trail & TRAIL_PAYLOAD_MASK)
        if code_point <= MAX_SAFE_CODE_POINT:
            raise InvalidSequenceError(offset, lead, "overlong two-byte sequence")

        yield offset, code_point
        offset += 2


def _units(encoded: Union[str, bytes]) -> Iterator[Tuple[int, int]]:
    if isinstance(encoded, str):
        return _text_units(encoded)
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        return _byte_units(bytes(encoded))
    raise TypeError(
        f"decode() expects str or a bytes-like object, got {type(encoded).__name__}"
    )


def decode(encoded: Union[str, bytes]) -> bytes:
    """
    Decode Base122 text back to the original binary data.

    Text input is read code point by code point; bytes input is read as
    the raw UTF-8 form produced by ``encode_to_bytes``.

    Args:
        encoded: Encoded string, or its UTF-8 bytes

    Returns:
        Decoded bytes

    Raises:
        InvalidSequenceError: If any unit is not a safe chunk or a canonical
                              escape; nothing is returned in that case
        TypeError: If encoded is neither str nor bytes-like
    """
    units = _units(encoded)
    writer = BitWriter()
    shortened_at = None

    for position, code_point in units:
        if shortened_at is not None:
            raise InvalidSequenceError(
                position, code_point, f"unit follows the shortened escape at {shortened_at}"
            )

        if code_point <= MAX_SAFE_CODE_POINT:
            writer.push(code_point)
            continue

        if code_point > MAX_ESCAPE_CODE_POINT:
            raise InvalidSequenceError(
                position, code_point, "sequences longer than two bytes are not used"
            )
        if not code_point & ESCAPE_MARKER_BIT:
            raise InvalidSequenceError(position, code_point, "non-canonical escape framing")

        index_field = code_point >> INDEX_SHIFT
        if index_field != SHORTENED:
            if index_field >= len(ILLEGALS):
                raise InvalidSequenceError(
                    position, code_point, f"illegal index {index_field} out of range"
                )
            writer.push(ILLEGALS[index_field])
        elif code_point & CHUNK_MASK not in ILLEGAL_INDEX:
            raise InvalidSequenceError(
                position, code_point, "shortened escape must carry a dangerous chunk"
            )
        else:
            shortened_at = position
        writer.push(code_point & CHUNK_MASK)

    decoded = writer.getvalue()
    logger.debug(f"Decoded {len(decoded)} bytes")
    return decoded
