"""src/cmus_notify/features/cover/usecases/embedded_art.py
What: Copy the first picture embedded in a track's tags into a temporary file.
Why: Notification daemons load icons from disk, not from raw bytes.
"""

from __future__ import annotations

from pathlib import Path

from cmus_notify.platform.logging import logger
from cmus_notify.platform.tempfiles import TempFile

from .ports import TagReaderPort


def extract_embedded_art(track_path: Path | str, tag_reader: TagReaderPort) -> TempFile | None:
    """Extract the first embedded picture of ``track_path``.

    Returns:
        A temporary file owned by the caller, or ``None`` when the tags carry
        no picture.

    Raises:
        OSError: If the tags cannot be parsed or the temporary file cannot be
        written.
    """
    pictures = tag_reader.read_pictures(Path(track_path))
    if not pictures:
        logger.debug("No embedded picture in %s", track_path)
        return None

    picture = pictures[0]
    logger.debug(
        "Using embedded picture 1/%d from %s (%s, %d bytes)",
        len(pictures),
        track_path,
        picture.mime or "unknown type",
        len(picture.data),
    )
    return TempFile.with_contents(picture.data, suffix=picture.suffix)


__all__ = ["extract_embedded_art"]
