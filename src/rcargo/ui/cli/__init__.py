"""Command line interface package."""

from rcargo.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
