"""Cover resolution and template rendering for cmus track notifications."""

__version__ = "0.1.0"
