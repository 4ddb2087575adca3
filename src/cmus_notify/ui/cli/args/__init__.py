"""Command line argument handling package."""

from cmus_notify.ui.cli.args.parser import ArgumentParser
from cmus_notify.ui.cli.args.options import CLIArgs, LyricsArgs, RenderArgs

__all__ = ["ArgumentParser", "CLIArgs", "LyricsArgs", "RenderArgs"]
