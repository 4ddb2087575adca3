"""Tests for console rendering of notifications and lyrics lookups."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from cmus_notify.features.cover import ExternalCover, NoCover
from cmus_notify.features.notification import NotificationContent
from cmus_notify.ui.cli.display import NotificationDisplay


def _display(*, quiet: bool = False) -> tuple[NotificationDisplay, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=200, force_terminal=False, color_system=None)
    return NotificationDisplay(quiet=quiet, console=console), buffer


def _content(icon: object = None, *, persistent: bool = False) -> NotificationContent:
    return NotificationContent(
        summary="[bold]Always[/bold]",
        body="Owl City - Cinematic",
        icon=icon,  # pyright: ignore[reportArgumentType]
        timeout_ms=5000,
        persistent=persistent,
    )


def test_show_notification_prints_every_field() -> None:
    display, buffer = _display()

    display.show_notification(
        _content(ExternalCover("/music/cover.jpg")), lyrics_path="/music/08 - Always.lrc"
    )

    output = buffer.getvalue()
    assert "[bold]Always[/bold]" in output
    assert "Owl City - Cinematic" in output
    assert "/music/cover.jpg (external)" in output
    assert "5000 ms" in output
    assert "/music/08 - Always.lrc" in output


def test_show_notification_describes_static_and_missing_icons() -> None:
    display, buffer = _display()

    display.show_notification(_content("/icons/cmus.png", persistent=True))
    display.show_notification(_content(NoCover()))

    output = buffer.getvalue()
    assert "/icons/cmus.png (static)" in output
    assert "persistent" in output
    assert "none" in output
    assert "Lyrics" not in output


def test_quiet_display_prints_nothing() -> None:
    display, buffer = _display(quiet=True)

    display.show_notification(_content())
    display.show_lyrics(Path("/music/track.mp3"), None)

    assert buffer.getvalue() == ""


def test_show_lyrics() -> None:
    display, buffer = _display()

    display.show_lyrics(Path("/music/track.mp3"), "/music/track.lrc")
    display.show_lyrics(Path("/music/other.mp3"), None)

    lines = buffer.getvalue().splitlines()
    assert lines == ["/music/track.lrc", "No lyrics found for other.mp3"]
