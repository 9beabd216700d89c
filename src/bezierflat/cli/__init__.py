"""Command-line interface for bezierflat.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Tabular or JSON polyline output
- Verbose/quiet output modes
- Structured logging to file
"""

from bezierflat.cli.app import cli, main

__all__ = ["cli", "main"]
