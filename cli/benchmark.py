"""Throughput and density benchmarks for the Base122 codec."""

from time import perf_counter

import click

from base122 import ILLEGALS, encode_to_bytes, decode, EncodingStats
from config.settings import BenchmarkConfig
from utils.logging import get_logger

logger = get_logger(__name__)

# Only show timings for inputs up to this size
TIMING_SIZE_LIMIT = 1000


def mixed_data(size: int) -> bytes:
    """Deterministic pseudo-random test data."""
    return bytes((i * 37 + i * i) % 256 for i in range(size))


def dangerous_data(size: int, density: float) -> bytes:
    """
    Test data whose leading ``density`` share is made of dangerous bytes.

    Args:
        size: Number of bytes
        density: Share of dangerous bytes, between 0 and 1
    """
    data = bytearray()
    for i in range(size):
        if i / size < density:
            data.append(ILLEGALS[i % len(ILLEGALS)])
        else:
            data.append((i * 7) % 256)
    return bytes(data)


def run_benchmark(config: BenchmarkConfig) -> None:
    """Print size ratios, timings and dangerous-character efficiency."""
    click.echo("=== Base122 Performance Benchmark ===")
    click.echo()
    click.echo(f"{'Size':>10} {'Encoded':>12} {'Ratio':>12} {'Efficiency':>10} {'vs Base64':>12}")
    click.echo("-" * 60)

    for size in config.sizes:
        data = mixed_data(size)

        start = perf_counter()
        encoded = encode_to_bytes(data)
        encode_time = perf_counter() - start

        start = perf_counter()
        decoded = decode(encoded)
        decode_time = perf_counter() - start

        if decoded != data:
            logger.error(f"Round trip mismatch for benchmark size {size}")

        stats = EncodingStats(original_size=size, encoded_size=len(encoded))
        click.echo(
            f"{size:>10} {stats.encoded_size:>12} {stats.expansion_ratio:>12.3f} "
            f"{stats.efficiency:>9.1f}% {stats.savings_vs_base64:>11.1f}%"
        )
        if size <= TIMING_SIZE_LIMIT:
            click.echo(
                f"           Encode: {encode_time * 1e6:.1f}us, "
                f"Decode: {decode_time * 1e6:.1f}us"
            )

    click.echo()
    click.echo("=== Dangerous Character Density Test ===")

    for density in config.densities:
        data = dangerous_data(config.sample_size, density)
        stats = EncodingStats(
            original_size=len(data), encoded_size=len(encode_to_bytes(data))
        )
        click.echo(
            f"Dangerous char density {density * 100:.0f}%: "
            f"efficiency {stats.efficiency:.1f}%"
        )

    click.echo()
    click.echo("Benchmark complete!")
