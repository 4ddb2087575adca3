"""src/cmus_notify/features/cover/usecases/resolver.py
Where: Cover feature usecases layer.
What: Decide between embedded artwork, an external image file, or no cover.
Why: Encode the fallback order and override switches in a single policy.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

from cmus_notify.platform.logging import logger

from ..domain.track_cover import EmbeddedCover, ExternalCover, NoCover, TrackCover
from .cover_events import CoverEvent
from .embedded_art import extract_embedded_art
from .ports import SearchPort, TagReaderPort
from .search import search_upward

COVER_FILE_PATTERN: Final[re.Pattern[str]] = re.compile(r".*\.(jpg|jpeg|png|gif)$")


def resolve_cover(
    track_path: Path | str,
    max_hops: int,
    force_external: bool,
    suppress_external: bool,
    *,
    tag_reader: TagReaderPort | None = None,
    search: SearchPort = search_upward,
) -> TrackCover:
    """Resolve the cover of a track.

    Embedded artwork wins unless ``force_external`` is set. Otherwise, and
    unless ``suppress_external`` is set, the track's directory and up to
    ``max_hops`` of its ancestors are searched for an image file. Lookup
    failures count as "not found"; this function never raises for I/O.

    Args:
        track_path: Path of the audio file.
        max_hops: Parent directories the external search may climb.
        force_external: Skip embedded artwork entirely.
        suppress_external: Never search the filesystem.
        tag_reader: Embedded picture source. Defaults to mutagen.
        search: Upward file search. Defaults to :func:`search_upward`.

    Raises:
        ValueError: If ``max_hops`` is negative.
    """
    if max_hops < 0:
        raise ValueError(f"max_hops must be non-negative, got {max_hops}")

    track = Path(track_path)

    if not force_external:
        if tag_reader is None:
            from ..adapters.mutagen_tag_reader import MutagenTagReader

            tag_reader = MutagenTagReader()

        logger.debug("Trying the embedded cover of %s", track)
        try:
            embedded = extract_embedded_art(track, tag_reader)
        except OSError as exc:
            _log_error(track, "embedded", exc)
            embedded = None

        if embedded is not None:
            logger.info(
                "Embedded cover extracted to %s",
                embedded.path,
                extra={
                    "cover_event": CoverEvent.EMBEDDED.value,
                    "track_path": str(track),
                    "cover_path": str(embedded.path),
                },
            )
            return EmbeddedCover(embedded)

    if not suppress_external:
        logger.debug("Trying an external cover for %s", track)
        try:
            found = search(track.parent, max_hops, COVER_FILE_PATTERN)
        except OSError as exc:
            _log_error(track, "external", exc)
            found = None

        if found is not None:
            logger.info(
                "External cover found at %s",
                found,
                extra={
                    "cover_event": CoverEvent.EXTERNAL.value,
                    "track_path": str(track),
                    "cover_path": found,
                },
            )
            return ExternalCover(found)

    logger.info(
        "Could not get the cover of %s",
        track,
        extra={"cover_event": CoverEvent.NONE.value, "track_path": str(track)},
    )
    return NoCover()


def _log_error(track: Path, source: str, exc: OSError) -> None:
    error_message = str(exc) or type(exc).__name__
    logger.log(
        logging.WARNING if source == "external" else logging.DEBUG,
        "Failed to read %s cover for %s: %s",
        source,
        track,
        error_message,
        extra={
            "cover_event": CoverEvent.ERROR.value,
            "track_path": str(track),
            "error_message": error_message,
        },
    )


__all__ = ["COVER_FILE_PATTERN", "resolve_cover"]
