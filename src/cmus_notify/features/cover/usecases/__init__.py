"""Cover and lyrics lookup use cases."""

from .cover_events import CoverEvent
from .embedded_art import extract_embedded_art
from .lyrics import LYRICS_FILE_PATTERN, find_lyrics
from .ports import SearchPort, TagReaderPort
from .resolver import COVER_FILE_PATTERN, resolve_cover
from .search import search_upward

__all__ = [
    "COVER_FILE_PATTERN",
    "LYRICS_FILE_PATTERN",
    "CoverEvent",
    "SearchPort",
    "TagReaderPort",
    "extract_embedded_art",
    "find_lyrics",
    "resolve_cover",
    "search_upward",
]
