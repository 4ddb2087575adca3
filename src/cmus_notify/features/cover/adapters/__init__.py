"""Concrete tag readers for cover extraction."""

from .mutagen_tag_reader import MutagenTagReader

__all__ = ["MutagenTagReader"]
