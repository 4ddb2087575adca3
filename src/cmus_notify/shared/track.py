# Where: cmus_notify.shared.track
# What: Canonical Track dataclass consumed by cover and template rendering.
# Why: Keep the player-facing track shape in one place.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType


class TrackStatus(StrEnum):
    """Playback status reported by cmus."""

    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"


@dataclass(frozen=True, slots=True)
class Track:
    """One audio item and its tag fields.

    ``metadata`` maps lower-case tag keys (``artist``, ``album``,
    ``tracknumber`` ...) to their string value. A missing key means the tag
    is unset.
    """

    name: str
    path: Path
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)
    duration: int = 0
    position: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def get_name(self) -> str:
        """Return the display name used for the ``{title}`` placeholder."""

        return self.name


__all__ = ["Track", "TrackStatus"]
