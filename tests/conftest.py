"""Shared pytest fixtures for cover lookup and template rendering tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from cmus_notify.config.settings import Settings
from cmus_notify.shared.track import Track


@pytest.fixture
def sample_library(tmp_path: Path) -> Path:
    """Build the ``samples/Owl City/Cinematic`` tree used by search tests.

    Layout::

        samples/
          Owl City/
            Cinematic/
              08 - Always.lrc
              08 - Always.flac
              cover/
                cover.jpg
                cover.png
    """
    album = tmp_path / "samples" / "Owl City" / "Cinematic"
    cover_dir = album / "cover"
    cover_dir.mkdir(parents=True)
    _ = (album / "08 - Always.lrc").write_text("[00:00.00]Always\n", encoding="utf-8")
    _ = (album / "08 - Always.flac").write_bytes(b"\x00" * 64)
    _ = (cover_dir / "cover.jpg").write_bytes(b"\xff\xd8\xff")
    _ = (cover_dir / "cover.png").write_bytes(b"\x89PNG")
    return album


@pytest.fixture
def photograph_track(tmp_path: Path) -> Track:
    """Track matching the ``Photograph`` sample from the cmus fixtures."""

    return Track(
        name="Photograph",
        path=tmp_path / "Alex Goot" / "08 - Photograph.mp3",
        metadata={
            "artist": "Alex Goot",
            "album": "Alex Goot & Friends, Vol. 3",
            "tracknumber": "8",
        },
        duration=243,
    )


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Reset the settings singleton around every test."""

    original_instance = Settings._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Settings._loaded_from  # pyright: ignore[reportPrivateUsage]
    Settings._instance = None  # pyright: ignore[reportPrivateUsage]
    Settings._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Settings._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Settings._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
