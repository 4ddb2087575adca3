"""src/cmus_notify/ui/cli/display/notification.py
What: Print rendered notifications and lyrics lookups to the terminal.
Why: Keep console formatting out of the command classes.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cmus_notify.features.cover import EmbeddedCover, ExternalCover, NoCover
from cmus_notify.features.notification import NotificationContent


@final
class NotificationDisplay:
    """Handles notification display in CLI."""

    console: Console
    quiet: bool

    def __init__(self, *, quiet: bool = False, console: Console | None = None) -> None:
        self.console = console or Console()
        self.quiet = quiet

    def show_notification(
        self,
        content: NotificationContent,
        *,
        lyrics_path: str | None = None,
    ) -> None:
        """Display a rendered notification.

        Args:
            content: Rendered notification.
            lyrics_path: Lyrics file found for the track, if any.
        """
        if self.quiet:
            return

        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(style="bold cyan", no_wrap=True)
        table.add_column(overflow="fold")
        table.add_row("Summary", Text(content.summary))
        table.add_row("Body", Text(content.body))
        table.add_row("Icon", Text(self._describe_icon(content)))
        table.add_row("Timeout", "persistent" if content.persistent else f"{content.timeout_ms} ms")
        if lyrics_path is not None:
            table.add_row("Lyrics", Text(lyrics_path))
        self.console.print(table)

    def show_lyrics(self, track_path: Path, lyrics_path: str | None) -> None:
        if self.quiet:
            return
        if lyrics_path is None:
            self.console.print(f"No lyrics found for {track_path.name}", markup=False)
            return
        self.console.print(lyrics_path, markup=False)

    @staticmethod
    def _describe_icon(content: NotificationContent) -> str:
        match content.icon:
            case EmbeddedCover(file=file):
                return f"{file.path} (embedded)"
            case ExternalCover(path=path):
                return f"{path} (external)"
            case NoCover() | None:
                return "none"
            case str() as static_icon:
                return f"{static_icon} (static)"
