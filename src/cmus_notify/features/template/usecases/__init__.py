"""Template rendering use cases."""

from .placeholders import TITLE_KEY, render

__all__ = ["TITLE_KEY", "render"]
