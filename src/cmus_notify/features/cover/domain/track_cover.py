"""
Summary: Three-way cover outcome and the embedded picture value object.
Why: Callers must match embedded, external and missing covers explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from cmus_notify.platform.tempfiles import TempFile

_MIME_SUFFIXES: Final[dict[str, str]] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/bmp": ".bmp",
}


@dataclass(frozen=True, slots=True)
class EmbeddedPicture:
    """Raw image bytes stored inside a track's tag container."""

    data: bytes
    mime: str | None = None

    @property
    def suffix(self) -> str:
        """File suffix matching ``mime``, or an empty string when unknown."""

        if not self.mime:
            return ""
        return _MIME_SUFFIXES.get(self.mime.lower(), "")


class _ReleasableCover:
    """Context-manager support shared by every cover variant."""

    __slots__ = ()

    def close(self) -> None:
        return None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@dataclass(frozen=True, slots=True)
class EmbeddedCover(_ReleasableCover):
    """Artwork extracted from the track into a temporary file we own."""

    file: TempFile

    @property
    def path(self) -> Path:
        return self.file.path

    def close(self) -> None:
        self.file.close()


@dataclass(frozen=True, slots=True)
class ExternalCover(_ReleasableCover):
    """Absolute path of an image file found next to the track."""

    path: str


@dataclass(frozen=True, slots=True)
class NoCover(_ReleasableCover):
    """The track has no usable cover."""


TrackCover = EmbeddedCover | ExternalCover | NoCover


def cover_path(cover: TrackCover) -> str | None:
    """Return the on-disk path a cover can be displayed from."""

    match cover:
        case EmbeddedCover(file=file):
            return str(file.path)
        case ExternalCover(path=path):
            return path
        case NoCover():
            return None


__all__ = [
    "EmbeddedCover",
    "EmbeddedPicture",
    "ExternalCover",
    "NoCover",
    "TrackCover",
    "cover_path",
]
