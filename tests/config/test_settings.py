"""Tests for loading and saving the TOML settings file."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from cmus_notify.config.settings import (
    BODY_TEMPLATE_DEFAULT,
    DEPTH_DEFAULT,
    SUMMARY_TEMPLATE_DEFAULT,
    TIMEOUT_MS_DEFAULT,
    Settings,
)


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config" / "config.toml"

    settings = Settings.load(config_file)

    assert config_file.exists()
    assert settings == Settings()
    with open(config_file, "rb") as f:
        written = tomllib.load(f)
    assert written["depth"] == DEPTH_DEFAULT
    assert written["timeout_ms"] == TIMEOUT_MS_DEFAULT
    assert written["summary_template"] == SUMMARY_TEMPLATE_DEFAULT
    assert written["body_template"] == BODY_TEMPLATE_DEFAULT
    assert "static_icon" not in written


def test_save_then_load_keeps_values(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    original = Settings(
        timeout_ms=8000,
        persistent=True,
        static_icon=Path("/usr/share/icons/cmus.png"),
        cover_path_template='/covers/{artist}/"{album}".jpg',
        depth=3,
        force_use_external_cover=True,
        summary_template="{title}",
        body_template="{artist} \\ {album}",
        log_file=tmp_path / "notify.log",
    )

    original.save(config_file)
    loaded = Settings.load(config_file)

    assert loaded == original


def test_default_location_uses_the_repo_root(portable_repo_root: Path) -> None:
    _ = Settings.load()

    assert (portable_repo_root / "config" / "config.toml").exists()


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text('depth = 2\nnotifier = "dunst"\n', encoding="utf-8")

    settings = Settings.load(config_file)

    assert settings.depth == 2
    assert not hasattr(settings, "notifier")


@pytest.mark.parametrize("depth", [-1, "two", True])
def test_invalid_depth_falls_back_to_default(depth: object) -> None:
    settings = Settings(depth=depth)  # pyright: ignore[reportArgumentType]

    assert settings.depth == DEPTH_DEFAULT


def test_blank_paths_and_templates_become_none() -> None:
    settings = Settings(
        static_icon="  ",  # pyright: ignore[reportArgumentType]
        cover_path_template="",
        log_file="logs/notify.log",  # pyright: ignore[reportArgumentType]
    )

    assert settings.static_icon is None
    assert settings.cover_path_template is None
    assert settings.log_file == Path("logs/notify.log")


def test_load_is_cached_per_file(tmp_path: Path) -> None:
    first_file = tmp_path / "first.toml"
    second_file = tmp_path / "second.toml"
    _ = first_file.write_text("depth = 2\n", encoding="utf-8")
    _ = second_file.write_text("depth = 4\n", encoding="utf-8")

    first = Settings.load(first_file)
    assert Settings.load(first_file) is first

    second = Settings.load(second_file)
    assert second is not first
    assert second.depth == 4


def test_malformed_file_raises(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text("depth = = 2\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Settings.load(config_file)
