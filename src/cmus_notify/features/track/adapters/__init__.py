"""Track loaders backed by tag libraries."""

from .mutagen_loader import load_track

__all__ = ["load_track"]
