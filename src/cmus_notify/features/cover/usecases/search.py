"""src/cmus_notify/features/cover/usecases/search.py
Where: Cover feature usecases layer.
What: Find the first file whose name matches a pattern, climbing parent directories.
Why: Covers and lyrics often live beside the album folder rather than the track.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from cmus_notify.platform.logging import logger

from .cover_events import CoverEvent


def search_upward(
    start_dir: Path | str,
    max_hops: int,
    pattern: re.Pattern[str] | str,
) -> str | None:
    """Search ``start_dir`` and up to ``max_hops`` of its ancestors for a file.

    Only regular files directly inside each visited directory are considered;
    subdirectories are never descended into. Within one directory the first
    match in filesystem enumeration order wins, so results are not sorted.

    Args:
        start_dir: Directory the search starts from.
        max_hops: How many parent directories may be visited after ``start_dir``.
        pattern: Regular expression searched for in each file name.

    Returns:
        The absolute path of the first matching file, or ``None``.

    Raises:
        ValueError: If ``max_hops`` is negative.
        OSError: If a visited directory cannot be listed.
    """
    if max_hops < 0:
        raise ValueError(f"max_hops must be non-negative, got {max_hops}")

    matcher = re.compile(pattern) if isinstance(pattern, str) else pattern
    directory = Path(os.path.abspath(start_dir))
    remaining = max_hops

    logger.debug(
        "Searching for %r from %s (max hops: %d)", matcher.pattern, directory, max_hops
    )

    start = directory
    while True:
        found = _search_directory(directory, matcher)
        if found is not None:
            return found

        parent = directory.parent
        if remaining == 0 or parent == directory:
            logger.debug(
                "no %r within %d hops",
                matcher.pattern,
                max_hops - remaining,
                extra={
                    "cover_event": CoverEvent.SEARCH_MISS.value,
                    "track_path": str(start),
                },
            )
            return None

        logger.debug(
            "No match for %r in %s, climbing to %s (%d hops left)",
            matcher.pattern,
            directory,
            parent,
            remaining - 1,
        )
        remaining -= 1
        directory = parent


def _search_directory(directory: Path, matcher: re.Pattern[str]) -> str | None:
    """Return the first regular file in ``directory`` whose name matches."""

    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue
            if matcher.search(entry.name):
                return os.path.abspath(entry.path)
    return None


__all__ = ["search_upward"]
