#!/usr/bin/env python3
"""
Main entry point for the Base122 command line tool.

Usage:
    python main_cli.py encode [TEXT]
    python main_cli.py decode [ENCODED]
    python main_cli.py demo
    python main_cli.py benchmark

Configuration is loaded from environment variables (and an optional .env).
"""

from cli.commands import cli


def main():
    """Main entry point."""
    cli(prog_name='base122')


if __name__ == '__main__':
    main()
