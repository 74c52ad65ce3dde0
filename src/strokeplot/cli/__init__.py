"""Command-line interface for strokeplot.

This module provides the CLI using Typer with rich output on stderr, so
the generated script can be piped straight into gnuplot.
"""

from strokeplot.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
