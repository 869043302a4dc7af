"""Custom exception classes for the Base122 codec."""

from typing import Optional


class Base122Error(Exception):
    """Base exception class for all codec-related errors."""
    pass


class DecodeError(Base122Error):
    """Exception raised when encoded text cannot be decoded."""
    pass


class InvalidSequenceError(DecodeError):
    """
    Exception raised when a unit of the encoded input is neither a safe
    one-byte chunk nor a canonical two-byte escape.

    Attributes:
        position: Index of the offending unit (code point index for text
                  input, byte offset for raw byte input)
        value: The offending code point or byte value
    """

    def __init__(self, position: int, value: int, reason: Optional[str] = None):
        self.position = position
        self.value = value
        self.reason = reason or "unrecognized sequence"
        super().__init__(
            f"Invalid sequence at position {position} (0x{value:X}): {self.reason}"
        )


class ConfigurationError(Base122Error):
    """Exception raised when configuration is invalid or missing."""
    pass
