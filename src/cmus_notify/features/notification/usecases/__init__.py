"""Notification content use cases."""

from .content import NotificationContent, build_notification, should_render

__all__ = ["NotificationContent", "build_notification", "should_render"]
