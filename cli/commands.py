"""Command line interface for the Base122 codec."""

import sys
from typing import Optional

import click

from base122 import encode_to_bytes, decode, __version__
from cli.benchmark import run_benchmark
from cli.demo import run_demo
from config.settings import Config, LOG_LEVELS
from utils.exceptions import ConfigurationError, DecodeError
from utils.logging import setup_logging, get_logger

logger = get_logger(__name__)

# Encoded text never holds a bare CR or LF, so these are safe to strip
LINE_BREAKS = b'\r\n'


@click.group()
@click.option('--log-level', '-l', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Logging level (overrides LOG_LEVEL)')
@click.version_option(__version__, prog_name='base122')
@click.pass_context
def cli(ctx, log_level):
    """Base122 - binary-to-text encoding, ~14% smaller than Base64."""
    config = Config()
    try:
        cli_config = config.load_cli_config()
    except (ConfigurationError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(log_level or cli_config.log_level)
    logger.debug(f"Configuration loaded: {cli_config}")

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command('encode')
@click.argument('text', required=False)
def cmd_encode(text: Optional[str]):
    """Encode TEXT (or binary standard input when omitted)."""
    if text is not None:
        data = text.encode('utf-8')
    else:
        data = click.get_binary_stream('stdin').read()

    logger.info(f"Encoding {len(data)} bytes")
    # Written as raw bytes: click.echo strips ESC sequences on non-terminals
    stdout = click.get_binary_stream('stdout')
    stdout.write(encode_to_bytes(data) + b'\n')
    stdout.flush()


@cli.command('decode')
@click.argument('encoded', required=False)
@click.pass_context
def cmd_decode(ctx, encoded: Optional[str]):
    """Decode ENCODED (or standard input when omitted)."""
    if encoded is None:
        encoded = click.get_binary_stream('stdin').read()
        if ctx.obj['config'].cli.strip_input:
            encoded = encoded.strip(LINE_BREAKS)

    try:
        data = decode(encoded)
    except DecodeError as e:
        logger.error(f"Decode failed: {e}")
        click.echo(f"Decode error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Decoded {len(data)} bytes")
    stdout = click.get_binary_stream('stdout')
    stdout.write(data)
    stdout.flush()


@cli.command('demo')
def cmd_demo():
    """Run a demonstration with sample inputs."""
    if not run_demo():
        logger.warning("Some demo round trips failed")


@cli.command('benchmark')
@click.pass_context
def cmd_benchmark(ctx):
    """Run size and speed benchmarks."""
    try:
        benchmark_config = ctx.obj['config'].load_benchmark_config()
    except (ConfigurationError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    run_benchmark(benchmark_config)
