"""
Summary: Check embedded artwork extraction into scoped temporary files.
Why: The first picture must reach disk and be released by its owner.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cmus_notify.features.cover import EmbeddedPicture, extract_embedded_art


class StubTagReader:
    """Return canned pictures or raise a canned error."""

    def __init__(
        self,
        pictures: list[EmbeddedPicture] | None = None,
        error: OSError | None = None,
    ) -> None:
        self.pictures = pictures or []
        self.error = error

    def read_pictures(self, track_path: Path) -> list[EmbeddedPicture]:
        del track_path
        if self.error is not None:
            raise self.error
        return list(self.pictures)


def test_first_picture_is_written_to_a_temp_file(tmp_path: Path) -> None:
    reader = StubTagReader(
        pictures=[
            EmbeddedPicture(data=b"front", mime="image/png"),
            EmbeddedPicture(data=b"back", mime="image/jpeg"),
        ]
    )

    art = extract_embedded_art(tmp_path / "track.mp3", reader)

    assert art is not None
    with art:
        assert art.read_bytes() == b"front"
        assert art.path.suffix == ".png"
        assert art.path.parent != tmp_path
    assert not art.path.exists()


def test_no_pictures_returns_none(tmp_path: Path) -> None:
    assert extract_embedded_art(tmp_path / "track.mp3", StubTagReader()) is None


def test_unknown_mime_type_gets_no_suffix(tmp_path: Path) -> None:
    reader = StubTagReader(pictures=[EmbeddedPicture(data=b"raw", mime=None)])

    art = extract_embedded_art(tmp_path / "track.mp3", reader)

    assert art is not None
    try:
        assert art.path.suffix == ""
    finally:
        art.close()


def test_temp_file_outlives_the_track(tmp_path: Path) -> None:
    track = tmp_path / "track.mp3"
    _ = track.write_bytes(b"audio")
    reader = StubTagReader(pictures=[EmbeddedPicture(data=b"art", mime="image/jpeg")])

    art = extract_embedded_art(track, reader)
    track.unlink()

    assert art is not None
    try:
        assert art.path.read_bytes() == b"art"
    finally:
        art.close()


def test_tag_errors_propagate(tmp_path: Path) -> None:
    reader = StubTagReader(error=OSError("cannot parse"))

    with pytest.raises(OSError, match="cannot parse"):
        _ = extract_embedded_art(tmp_path / "track.mp3", reader)


@pytest.mark.parametrize(
    ("mime", "suffix"),
    [
        ("image/jpeg", ".jpg"),
        ("image/JPEG", ".jpg"),
        ("image/png", ".png"),
        ("image/gif", ".gif"),
        ("application/octet-stream", ""),
        ("", ""),
    ],
)
def test_picture_suffix(mime: str, suffix: str) -> None:
    assert EmbeddedPicture(data=b"", mime=mime).suffix == suffix
