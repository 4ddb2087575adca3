# Where: cmus_notify.shared.__init__
# What: Expose the track model and player change events.
# Why: Give features one import surface for data shared across them.

from .events import (
    AAAMode,
    AAAModeChanged,
    CmusEvent,
    PositionChanged,
    RepeatChanged,
    Shuffle,
    ShuffleChanged,
    StatusChanged,
    TrackChanged,
    VolumeChanged,
)
from .track import Track, TrackStatus

__all__ = [
    "AAAMode",
    "AAAModeChanged",
    "CmusEvent",
    "PositionChanged",
    "RepeatChanged",
    "Shuffle",
    "ShuffleChanged",
    "StatusChanged",
    "Track",
    "TrackChanged",
    "TrackStatus",
    "VolumeChanged",
]
