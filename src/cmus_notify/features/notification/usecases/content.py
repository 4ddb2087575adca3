"""src/cmus_notify/features/notification/usecases/content.py
Where: Notification feature usecases layer.
What: Assemble the summary, body and icon a notification should show for a track.
Why: Keep template rendering and cover selection out of the dispatching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Self

from cmus_notify.config.settings import Settings
from cmus_notify.features.cover import (
    EmbeddedCover,
    ExternalCover,
    TagReaderPort,
    TrackCover,
    cover_path,
    resolve_cover,
)
from cmus_notify.features.template import render
from cmus_notify.platform.logging import logger
from cmus_notify.shared.events import CmusEvent, StatusChanged, TrackChanged
from cmus_notify.shared.track import Track


@dataclass(slots=True)
class NotificationContent:
    """Rendered notification ready to hand to a desktop notifier.

    ``icon`` is either a resolved cover, a static icon path/name, or ``None``.
    An embedded cover is released by :meth:`close`.
    """

    summary: str
    body: str
    icon: TrackCover | str | None
    timeout_ms: int
    persistent: bool

    @property
    def icon_path(self) -> str | None:
        match self.icon:
            case None:
                return None
            case str() as static_icon:
                return static_icon
            case _:
                return cover_path(self.icon)

    def close(self) -> None:
        if isinstance(self.icon, EmbeddedCover):
            self.icon.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def build_notification(
    track: Track,
    settings: Settings,
    *,
    tag_reader: TagReaderPort | None = None,
) -> NotificationContent:
    """Render the notification for ``track`` according to ``settings``."""

    summary = render(settings.summary_template, track)
    body = render(settings.body_template, track)

    return NotificationContent(
        summary=summary,
        body=body,
        icon=_select_icon(track, settings, tag_reader),
        timeout_ms=settings.timeout_ms,
        persistent=settings.persistent,
    )


def _select_icon(
    track: Track,
    settings: Settings,
    tag_reader: TagReaderPort | None,
) -> TrackCover | str | None:
    if not settings.show_track_cover:
        return str(settings.static_icon) if settings.static_icon is not None else None

    if settings.cover_path_template:
        candidate = Path(render(settings.cover_path_template, track)).expanduser()
        if candidate.is_file():
            return ExternalCover(os.path.abspath(candidate))
        logger.debug("Templated cover %s does not exist; resolving normally", candidate)

    return resolve_cover(
        track.path,
        settings.depth,
        settings.force_use_external_cover,
        settings.no_use_external_cover,
        tag_reader=tag_reader,
    )


def should_render(event: CmusEvent) -> bool:
    """Return whether ``event`` changes what the track notification shows."""

    return isinstance(event, (TrackChanged, StatusChanged))


__all__ = ["NotificationContent", "build_notification", "should_render"]
