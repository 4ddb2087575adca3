"""
Summary: Ports defining cover resolution dependencies.
Why: Decouple use cases from mutagen and the filesystem so tests stay simple.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.track_cover import EmbeddedPicture


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading embedded pictures out of a track's tags."""

    def read_pictures(self, track_path: Path) -> list[EmbeddedPicture]:
        """Return pictures in container order.

        Raises:
            OSError: If the tag container cannot be parsed.
        """
        ...


class SearchPort(Protocol):
    """Signature shared by upward file searches."""

    def __call__(
        self,
        start_dir: Path | str,
        max_hops: int,
        pattern: re.Pattern[str] | str,
    ) -> str | None:
        ...


__all__ = ["SearchPort", "TagReaderPort"]
