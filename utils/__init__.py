"""Utility modules for logging and exception handling."""

from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    Base122Error,
    DecodeError,
    InvalidSequenceError,
    ConfigurationError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'Base122Error',
    'DecodeError',
    'InvalidSequenceError',
    'ConfigurationError',
]
