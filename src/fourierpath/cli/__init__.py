"""Command-line interface for fourierpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Direct path preview (no Fourier analysis)
- Coefficient table ordered by frequency
- Quadrature and worker settings
"""

from fourierpath.cli.app import cli, main

__all__ = ["cli", "main"]
