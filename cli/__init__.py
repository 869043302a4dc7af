"""Command line tool: encode, decode, demo and benchmark."""

from cli.commands import cli

__all__ = [
    'cli',
]
