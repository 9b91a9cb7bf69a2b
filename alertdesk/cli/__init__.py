"""CLI commands for alertdesk.

This package provides the command-line interface for browsing and
managing alerts and the reference catalog.
"""

from alertdesk.cli.main import cli, main

__all__ = ["cli", "main"]
