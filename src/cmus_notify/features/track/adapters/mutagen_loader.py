"""Build a Track from a file's tags.

Where: src/cmus_notify/features/track/adapters/mutagen_loader.py
What: Read easy-mode tags with mutagen and flatten them to string values.
Why: Let the CLI render notifications for a file without a running cmus.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import mutagen
from mutagen import MutagenError

from cmus_notify.platform.logging import logger
from cmus_notify.shared.track import Track


def load_track(track_path: Path | str) -> Track:
    """Load ``track_path`` into a :class:`Track`.

    The display name is the ``title`` tag, falling back to the file stem.

    Raises:
        OSError: If the file cannot be opened or its format is unsupported.
    """
    path = Path(track_path).expanduser().absolute()
    try:
        audio = mutagen.File(path, easy=True)
    except MutagenError as exc:
        if isinstance(exc, OSError):
            raise
        raise OSError(f"Unable to read tags of {path}: {exc}") from exc

    if audio is None:
        raise OSError(f"Unsupported audio container: {path}")

    metadata = _flatten_tags(audio.tags)
    info = getattr(audio, "info", None)
    length = getattr(info, "length", None) or 0

    track = Track(
        name=metadata.get("title") or path.stem,
        path=path,
        metadata=metadata,
        duration=int(length),
    )
    logger.debug("Loaded track %s with tags %s", path, sorted(metadata))
    return track


def _flatten_tags(tags: Any) -> dict[str, str]:
    """Map each tag key to the string form of its first value."""

    if tags is None:
        return {}

    metadata: dict[str, str] = {}
    for key, value in tags.items():
        if isinstance(value, list):
            if not value:
                continue
            value = value[0]
        if isinstance(value, bytes):
            continue
        metadata[str(key).lower()] = str(value)
    return metadata


__all__ = ["load_track"]
