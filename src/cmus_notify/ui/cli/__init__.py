"""Command line interface package."""

from cmus_notify.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
