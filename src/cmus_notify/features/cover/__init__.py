# Where: cmus_notify.features.cover.__init__
# What: Expose cover resolution, upward search and lyrics lookup.
# Why: Provide a cohesive import surface for notification and CLI layers.

from .domain import (
    EmbeddedCover,
    EmbeddedPicture,
    ExternalCover,
    NoCover,
    TrackCover,
    cover_path,
)
from .usecases import (
    COVER_FILE_PATTERN,
    LYRICS_FILE_PATTERN,
    CoverEvent,
    TagReaderPort,
    extract_embedded_art,
    find_lyrics,
    resolve_cover,
    search_upward,
)

__all__ = [
    "COVER_FILE_PATTERN",
    "LYRICS_FILE_PATTERN",
    "CoverEvent",
    "EmbeddedCover",
    "EmbeddedPicture",
    "ExternalCover",
    "NoCover",
    "TagReaderPort",
    "TrackCover",
    "cover_path",
    "extract_embedded_art",
    "find_lyrics",
    "resolve_cover",
    "search_upward",
]
