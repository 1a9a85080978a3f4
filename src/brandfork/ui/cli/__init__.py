"""Command line interface package."""

from brandfork.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
