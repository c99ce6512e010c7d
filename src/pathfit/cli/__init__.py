"""Command-line interface for pathfit.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Renders the demo curve or a user path under any fit policy
- Progress bars and a summary table of fitted bounds
- Verbose/quiet output modes
- Detailed error reporting
"""

from pathfit.cli.app import cli, main

__all__ = ["cli", "main"]
