"""Command-line interface for glyphoutline.

This module provides the CLI using Typer, with the rendered path on stdout
and Rich-formatted diagnostics on stderr.
"""

from glyphoutline.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
