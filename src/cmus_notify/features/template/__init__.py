"""Placeholder templates rendered from track metadata."""

from .usecases import TITLE_KEY, render

__all__ = ["TITLE_KEY", "render"]
