"""Command line interface package."""

from cddbtool.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
