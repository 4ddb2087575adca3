"""Command execution package for CLI."""

from cmus_notify.ui.cli.commands.executor import CommandExecutor
from cmus_notify.ui.cli.commands.lyrics import LyricsCommand
from cmus_notify.ui.cli.commands.render import RenderCommand

__all__ = ["CommandExecutor", "LyricsCommand", "RenderCommand"]
