"""src/cmus_notify/features/cover/usecases/lyrics.py
What: Locate an .lrc lyrics file near a track.
Why: Lyrics sit in the same album trees the cover search already walks.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from cmus_notify.platform.logging import logger

from .cover_events import CoverEvent
from .ports import SearchPort
from .search import search_upward

LYRICS_FILE_PATTERN: Final[re.Pattern[str]] = re.compile(r".*\.lrc$")


def find_lyrics(
    track_path: Path | str,
    max_hops: int,
    *,
    search: SearchPort = search_upward,
) -> str | None:
    """Return the absolute path of the first lyrics file found, if any."""

    track = Path(track_path)
    try:
        found = search(track.parent, max_hops, LYRICS_FILE_PATTERN)
    except OSError as exc:
        logger.warning(
            "Failed to search lyrics for %s: %s",
            track,
            exc,
            extra={
                "cover_event": CoverEvent.ERROR.value,
                "track_path": str(track),
                "error_message": str(exc) or type(exc).__name__,
            },
        )
        return None

    if found is not None:
        logger.debug(
            "Lyrics found at %s",
            found,
            extra={"cover_event": CoverEvent.LYRICS_FOUND.value, "cover_path": found},
        )
    return found


__all__ = ["LYRICS_FILE_PATTERN", "find_lyrics"]
