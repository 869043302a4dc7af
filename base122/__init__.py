"""Base122 binary-to-text codec with 7 payload bits per output byte."""

from base122.constants import ILLEGALS, SHORTENED
from base122.bits import BitReader, BitWriter
from base122.encoding import encode, encode_to_bytes
from base122.decoding import decode
from base122.stats import EncodingStats, base64_length, measure
from utils.exceptions import Base122Error, DecodeError, InvalidSequenceError

__version__ = '0.1.3'

__all__ = [
    'ILLEGALS',
    'SHORTENED',
    'BitReader',
    'BitWriter',
    'encode',
    'encode_to_bytes',
    'decode',
    'EncodingStats',
    'base64_length',
    'measure',
    'Base122Error',
    'DecodeError',
    'InvalidSequenceError',
    '__version__',
]
