"""Mutagen-backed tag reader for embedded artwork.

Where: src/cmus_notify/features/cover/adapters/mutagen_tag_reader.py
What: Pull picture frames out of ID3, FLAC, Vorbis comment and MP4 containers.
Why: Keep format-specific tag handling out of the cover resolution use cases.
"""

from __future__ import annotations

import base64
import binascii
import struct
from pathlib import Path
from typing import Any, final

import mutagen
from mutagen import MutagenError
from mutagen.flac import Picture
from mutagen.flac import error as FLACError
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Cover, MP4Tags

from cmus_notify.platform.logging import logger

from ..domain.track_cover import EmbeddedPicture

_VORBIS_PICTURE_KEY = "metadata_block_picture"


@final
class MutagenTagReader:
    """Read embedded pictures using :func:`mutagen.File` format detection."""

    def read_pictures(self, track_path: Path) -> list[EmbeddedPicture]:
        """Return every embedded picture of ``track_path`` in container order.

        Raises:
            OSError: If mutagen cannot open or recognise the file.
        """
        audio = self._open(track_path)

        pictures: list[EmbeddedPicture] = [
            EmbeddedPicture(data=picture.data, mime=picture.mime)
            for picture in getattr(audio, "pictures", None) or []
        ]

        tags = audio.tags
        if tags is None:
            return pictures

        if isinstance(tags, ID3):
            pictures.extend(
                EmbeddedPicture(data=frame.data, mime=frame.mime)
                for frame in tags.getall("APIC")
            )
        elif isinstance(tags, MP4Tags):
            pictures.extend(self._mp4_pictures(tags))
        else:
            pictures.extend(self._vorbis_pictures(tags, track_path))

        return pictures

    @staticmethod
    def _open(track_path: Path) -> Any:
        try:
            audio = mutagen.File(track_path)
        except MutagenError as exc:
            logger.debug("Failed to parse tags of %s: %s", track_path, exc)
            if isinstance(exc, OSError):
                raise
            raise OSError(f"Unable to read tags of {track_path}: {exc}") from exc

        if audio is None:
            raise OSError(f"Unsupported audio container: {track_path}")
        return audio

    @staticmethod
    def _mp4_pictures(tags: MP4Tags) -> list[EmbeddedPicture]:
        covers: list[MP4Cover] = tags.get("covr") or []
        return [
            EmbeddedPicture(
                data=bytes(cover),
                mime="image/png" if cover.imageformat == MP4Cover.FORMAT_PNG else "image/jpeg",
            )
            for cover in covers
        ]

    @staticmethod
    def _vorbis_pictures(tags: Any, track_path: Path) -> list[EmbeddedPicture]:
        blocks = tags.get(_VORBIS_PICTURE_KEY) if hasattr(tags, "get") else None
        if not isinstance(blocks, list):
            return []

        pictures: list[EmbeddedPicture] = []
        for block in blocks:
            try:
                picture = Picture(base64.b64decode(block))
            except (binascii.Error, ValueError, struct.error, FLACError) as exc:
                logger.debug("Skipping malformed picture block in %s: %s", track_path, exc)
                continue
            pictures.append(EmbeddedPicture(data=picture.data, mime=picture.mime))
        return pictures


__all__ = ["MutagenTagReader"]
