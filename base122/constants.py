"""Codec constants for Base122 encoding.

These are format-level constants that must not be changed without
breaking compatibility with every previously encoded string.
"""

# Chunk values that cannot travel as a single output byte:
# NUL, LF, CR, double quote, ampersand, backslash.
# Position in the tuple is the "illegal index" stored in escapes.
ILLEGALS = (0x00, 0x0A, 0x0D, 0x22, 0x26, 0x5C)

# Illegal index lookup for chunk values
ILLEGAL_INDEX = {value: index for index, value in enumerate(ILLEGALS)}

# Index field marking an escape that carries only the dangerous chunk itself
SHORTENED = 0b111

# Bits carried by one chunk
CHUNK_BITS = 7
CHUNK_MASK = 0b1111111

# Two-byte escape framing: 110xxxxx 10yyyyyy.
# The lead prefix sets bit 1 so the sequence is never an overlong form.
ESCAPE_LEAD = 0b11000010
ESCAPE_TRAIL = 0b10000000
LEAD_PREFIX_MASK = 0b11100000
LEAD_PREFIX = 0b11000000
TRAIL_PREFIX_MASK = 0b11000000
TRAIL_PAYLOAD_MASK = 0b00111111

# Escapes as code points: index << 8 | 0x80 | payload
ESCAPE_MARKER_BIT = 0b10000000
INDEX_SHIFT = 8
MAX_ESCAPE_CODE_POINT = 0x7FF
MAX_SAFE_CODE_POINT = 0x7F
