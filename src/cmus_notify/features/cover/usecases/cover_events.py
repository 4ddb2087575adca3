"""
Summary: Structured event identifiers for cover and lyrics lookup logs.
Why: Let the Rich console handler style resolution outcomes consistently.
"""

from __future__ import annotations

from enum import StrEnum


class CoverEvent(StrEnum):
    """Values attached to log records under the ``cover_event`` extra."""

    EMBEDDED = "cover.embedded"
    EXTERNAL = "cover.external"
    NONE = "cover.none"
    SEARCH_MISS = "cover.search.miss"
    ERROR = "cover.error"
    LYRICS_FOUND = "lyrics.found"


__all__ = ["CoverEvent"]
