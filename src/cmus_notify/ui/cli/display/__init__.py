"""Console display helpers for the CLI."""

from cmus_notify.ui.cli.display.notification import NotificationDisplay

__all__ = ["NotificationDisplay"]
