# Where: cmus_notify.shared.events
# What: Discrete player change events emitted by a cmus state differ.
# Why: Let the notification layer decide which changes warrant a re-render.

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .track import Track, TrackStatus


class Shuffle(StrEnum):
    OFF = "off"
    TRACKS = "tracks"
    ALBUMS = "albums"


class AAAMode(StrEnum):
    """Scope cmus auto-advances through."""

    ALL = "all"
    ARTIST = "artist"
    ALBUM = "album"


@dataclass(frozen=True, slots=True)
class StatusChanged:
    status: TrackStatus


@dataclass(frozen=True, slots=True)
class TrackChanged:
    track: Track


@dataclass(frozen=True, slots=True)
class VolumeChanged:
    """Left/right channel volume, each 0-100."""

    left: int
    right: int

    def __post_init__(self) -> None:
        for channel in (self.left, self.right):
            if not 0 <= channel <= 100:
                raise ValueError(f"Volume must be within 0-100, got {channel}")


@dataclass(frozen=True, slots=True)
class PositionChanged:
    seconds: int


@dataclass(frozen=True, slots=True)
class ShuffleChanged:
    shuffle: Shuffle


@dataclass(frozen=True, slots=True)
class RepeatChanged:
    enabled: bool


@dataclass(frozen=True, slots=True)
class AAAModeChanged:
    mode: AAAMode


CmusEvent = (
    StatusChanged
    | TrackChanged
    | VolumeChanged
    | PositionChanged
    | ShuffleChanged
    | RepeatChanged
    | AAAModeChanged
)


__all__ = [
    "AAAMode",
    "AAAModeChanged",
    "CmusEvent",
    "PositionChanged",
    "RepeatChanged",
    "Shuffle",
    "ShuffleChanged",
    "StatusChanged",
    "TrackChanged",
    "VolumeChanged",
]
