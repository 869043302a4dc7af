"""Size statistics for comparing Base122 output with Base64."""

from dataclasses import dataclass

from base122.encoding import encode_to_bytes


def base64_length(size: int) -> int:
    """Length of padded Base64 output for ``size`` input bytes."""
    return (size + 2) // 3 * 4


@dataclass
class EncodingStats:
    """Sizes of one encoded payload and the ratios derived from them."""

    original_size: int
    encoded_size: int

    @property
    def base64_size(self) -> int:
        return base64_length(self.original_size)

    @property
    def expansion_ratio(self) -> float:
        """Encoded bytes per input byte."""
        if not self.original_size:
            return 0.0
        return self.encoded_size / self.original_size

    @property
    def efficiency(self) -> float:
        """Input bytes per encoded byte, in percent."""
        if not self.encoded_size:
            return 0.0
        return self.original_size / self.encoded_size * 100.0

    @property
    def savings_vs_base64(self) -> float:
        """How much smaller than Base64 the encoded form is, in percent."""
        if not self.base64_size:
            return 0.0
        return (self.base64_size - self.encoded_size) / self.base64_size * 100.0


def measure(data: bytes) -> EncodingStats:
    """
    Encode data and report its sizes.

    Args:
        data: Bytes to encode

    Returns:
        EncodingStats with the UTF-8 byte length of the encoded form
    """
    return EncodingStats(original_size=len(data), encoded_size=len(encode_to_bytes(data)))
