"""Configuration management for the Base122 command line tool."""

from dataclasses import dataclass
from typing import Optional, Tuple
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError


# Load .env file from project root
# This is called at module import time to ensure env vars are available
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class CliConfig:
    """Configuration for the command line tool."""

    log_level: str = "WARNING"
    strip_input: bool = True

    def validate(self) -> None:
        """Validate CLI configuration parameters."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {self.log_level}"
            )


@dataclass
class BenchmarkConfig:
    """Configuration for the benchmark command."""

    sizes: Tuple[int, ...] = (10, 100, 1000, 10000)
    densities: Tuple[float, ...] = (0.0, 0.1, 0.2, 0.5)
    sample_size: int = 1000

    def validate(self) -> None:
        """Validate benchmark configuration parameters."""
        if not self.sizes:
            raise ValueError("At least one benchmark size is required")
        if any(size < 1 for size in self.sizes):
            raise ValueError("Benchmark sizes must be positive")
        if any(not 0.0 <= density <= 1.0 for density in self.densities):
            raise ValueError("Dangerous character densities must be between 0 and 1")
        if self.sample_size < 1:
            raise ValueError("Benchmark sample size must be positive")


def _parse_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got: {value}")


def _parse_list(name: str, default: tuple, convert) -> tuple:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return tuple(convert(item) for item in value.split(',') if item.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be a comma separated list, got: {value}")


class Config:
    """Main configuration loader and manager."""

    def __init__(self):
        """Initialize configuration manager."""
        self.cli: Optional[CliConfig] = None
        self.benchmark: Optional[BenchmarkConfig] = None

    def load_cli_config(self) -> CliConfig:
        """
        Load CLI configuration from environment variables.

        Environment variables:
            LOG_LEVEL: Logging level (default: WARNING)
            BASE122_STRIP_INPUT: Strip surrounding CR/LF from decode input read
                                 from stdin (default: true)

        Returns:
            Validated CliConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
            ValueError: If configuration is invalid
        """
        config = CliConfig(
            log_level=os.getenv('LOG_LEVEL', 'WARNING'),
            strip_input=_parse_bool('BASE122_STRIP_INPUT', True),
        )
        config.validate()
        self.cli = config
        return config

    def load_benchmark_config(self) -> BenchmarkConfig:
        """
        Load benchmark configuration from environment variables.

        Environment variables:
            BENCHMARK_SIZES: Input sizes in bytes (default: 10,100,1000,10000)
            BENCHMARK_DENSITIES: Dangerous character densities
                                 (default: 0.0,0.1,0.2,0.5)
            BENCHMARK_SAMPLE_SIZE: Input size for density runs (default: 1000)

        Returns:
            Validated BenchmarkConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
            ValueError: If configuration is invalid
        """
        defaults = BenchmarkConfig()
        sample_size_str = os.getenv('BENCHMARK_SAMPLE_SIZE', str(defaults.sample_size))
        try:
            sample_size = int(sample_size_str)
        except ValueError:
            raise ConfigurationError(
                f"BENCHMARK_SAMPLE_SIZE must be a valid integer, got: {sample_size_str}"
            )

        config = BenchmarkConfig(
            sizes=_parse_list('BENCHMARK_SIZES', defaults.sizes, int),
            densities=_parse_list('BENCHMARK_DENSITIES', defaults.densities, float),
            sample_size=sample_size,
        )
        config.validate()
        self.benchmark = config
        return config
