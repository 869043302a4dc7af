"""Configuration module for managing tool settings."""

from config.settings import (
    CliConfig,
    BenchmarkConfig,
    Config,
)

__all__ = [
    'CliConfig',
    'BenchmarkConfig',
    'Config',
]
