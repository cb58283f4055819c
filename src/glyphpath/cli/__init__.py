"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG to stdout or to a file
- Curve or line-segment output
- Debug overlays (points, point lines, labels, axes, border)
"""

from glyphpath.cli.app import cli, main

__all__ = ["cli", "main"]
