"""Notification content assembled from track templates and covers."""

from .usecases import NotificationContent, build_notification, should_render

__all__ = ["NotificationContent", "build_notification", "should_render"]
