"""Cover value objects."""

from .track_cover import (
    EmbeddedCover,
    EmbeddedPicture,
    ExternalCover,
    NoCover,
    TrackCover,
    cover_path,
)

__all__ = [
    "EmbeddedCover",
    "EmbeddedPicture",
    "ExternalCover",
    "NoCover",
    "TrackCover",
    "cover_path",
]
