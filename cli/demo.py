"""Demonstration of Base122 round trips and size savings."""

import click

from base122 import encode, decode, measure
from utils.exceptions import DecodeError
from utils.logging import get_logger

logger = get_logger(__name__)

SAMPLES = [
    ("", "Empty string"),
    ("A", "Single character"),
    ("Hello", "Simple text"),
    ("Hello, World!", "Text with punctuation"),
    ("The quick brown fox jumps over the lazy dog", "Long text"),
    ("Text with\ndangerous\rcharacters\"&\\", "Dangerous characters"),
]

BINARY_SAMPLE = bytes(range(32))


def run_demo() -> bool:
    """
    Print round trips for the sample strings and a binary buffer.

    Returns:
        True if every round trip reproduced its input
    """
    click.echo("=== Base122 Encoding Demo ===")
    click.echo()

    all_ok = True
    for text, description in SAMPLES:
        data = text.encode('utf-8')
        click.echo(f"Test: {description}")
        click.echo(f"  Input: {text!r}")

        encoded = encode(data)
        click.echo(f"  Encoded: {encoded!r}")

        try:
            decoded = decode(encoded)
        except DecodeError as e:
            logger.error(f"Demo sample {description!r} failed to decode: {e}")
            click.echo(f"  Decode failed: {e}")
            all_ok = False
        else:
            click.echo(f"  Decoded: {decoded.decode('utf-8', errors='replace')!r}")
            if decoded == data:
                click.echo("  Round-trip successful")
            else:
                click.echo("  Round-trip failed")
                all_ok = False

        stats = measure(data)
        click.echo("  Size comparison:")
        click.echo(f"     Original: {stats.original_size} bytes")
        click.echo(f"     Base64:   {stats.base64_size} bytes")
        click.echo(
            f"     Base122:  {stats.encoded_size} bytes "
            f"({stats.savings_vs_base64:.1f}% savings)"
        )
        click.echo()

    click.echo("=== Binary Data Test ===")
    click.echo(f"Binary data: {list(BINARY_SAMPLE[:8])}...")
    encoded = encode(BINARY_SAMPLE)
    stats = measure(BINARY_SAMPLE)
    click.echo(f"Encoded length: {stats.encoded_size} bytes")

    if decode(encoded) == BINARY_SAMPLE:
        click.echo("Binary round-trip successful")
    else:
        click.echo("Binary round-trip failed")
        all_ok = False

    click.echo(f"Binary expansion ratio: {stats.expansion_ratio:.3f}x")
    return all_ok
