"""Utility helpers for settings file persistence."""

from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


__all__ = ["write_text_file"]
