"""Rich console handler for cover resolution logs.

Where: platform/logging/handlers.py
What: Render structured cover events with icons, colours and compact paths.
Why: Keep resolution output readable when searching deep library trees.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CoverRichHandler(RichHandler):
    """Rich handler that styles ``cover_event`` records and their paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "cover.embedded": ("🖼️", "green", "Embedded cover"),
        "cover.external": ("📁", "cyan", "External cover"),
        "cover.none": ("➖", "yellow", "No cover"),
        "cover.search.miss": ("🔍", "yellow", "No match"),
        "cover.error": ("⛔", "red", "Cover lookup failed"),
        "lyrics.found": ("🎤", "magenta", "Lyrics"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path keeping only the trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Path with magenta separators, prefixed by an ellipsis when
            leading segments were dropped.
        """
        pure_path: PurePath = (
            PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        )
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…" + separator + separator.join(parts)
        else:
            display = anchor + separator.join(parts) if anchor else separator.join(parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_cover_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records tagged with a ``cover_event`` extra."""

        event = getattr(record, "cover_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))

        cover_path = getattr(record, "cover_path", None)
        track_path = getattr(record, "track_path", None)
        if cover_path:
            _ = text.append(" ")
            _ = text.append_text(self._format_path(str(cover_path)))
        elif track_path:
            _ = text.append(" for ")
            _ = text.append_text(self._format_path(str(track_path)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = text.append(f" ({error_message})", style=Style(color=color))
        elif event == "cover.search.miss" and message:
            _ = text.append(f" ({message})", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for cover events."""

        cover_text = self._render_cover_message(record, message)
        if cover_text is not None:
            return cover_text
        return super().render_message(record, message)


__all__ = ["CoverRichHandler"]
