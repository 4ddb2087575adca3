"""Loading tracks from audio files."""

from .adapters import load_track

__all__ = ["load_track"]
