"""
Summary: Pin down placeholder expansion, including its in-place rewrite order.
Why: Users rely on exact output for summaries, bodies and cover paths.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cmus_notify.features.template import render
from cmus_notify.shared.track import Track


def _track(name: str = "Always", **metadata: str) -> Track:
    return Track(name=name, path=Path("/music/track.mp3"), metadata=metadata)


def test_process_path_template(photograph_track: Track) -> None:
    rendered = render("{title}/{artist}/{album}/{tracknumber}", photograph_track)

    assert rendered == "Photograph/Alex Goot/Alex Goot & Friends, Vol. 3/8"


def test_title_is_the_display_name(photograph_track: Track) -> None:
    assert render("{title}", photograph_track) == "Photograph"


def test_title_ignores_a_title_tag() -> None:
    track = _track(name="Display Name", title="Tag Title")

    assert render("{title}", track) == "Display Name"


def test_unknown_key_renders_empty(photograph_track: Track) -> None:
    assert render("{nonexistent}", photograph_track) == ""


def test_text_outside_placeholders_passes_through(photograph_track: Track) -> None:
    rendered = render("Now playing: {artist} · track #{tracknumber}!", photograph_track)

    assert rendered == "Now playing: Alex Goot · track #8!"


def test_repeated_placeholders_are_all_replaced(photograph_track: Track) -> None:
    assert render("{artist} / {artist}", photograph_track) == "Alex Goot / Alex Goot"


def test_template_without_placeholders_is_unchanged(photograph_track: Track) -> None:
    assert render("plain text", photograph_track) == "plain text"
    assert render("", photograph_track) == ""


def test_value_containing_a_later_placeholder_is_rewritten() -> None:
    """Substitution works on the accumulated output, not the original template."""

    track = _track(a="{b}", b="X")

    assert render("{a}{b}", track) == "XX"


def test_value_containing_an_earlier_placeholder_is_kept() -> None:
    track = _track(a="{b}", b="X")

    assert render("{b}{a}", track) == "X{b}"


def test_value_containing_its_own_placeholder_is_not_expanded_again() -> None:
    track = _track(a="{a}")

    assert render("{a}", track) == "{a}"


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("{artist", "{artist"),
        ("{title} {artist", "Always {artist"),
        ("prefix {", "prefix {"),
    ],
)
def test_unterminated_placeholder_is_left_untouched(template: str, expected: str) -> None:
    track = _track(artist="Owl City")

    assert render(template, track) == expected


def test_stray_closing_brace_without_opening_uses_empty_key() -> None:
    track = _track(artist="Owl City")

    assert render("a}b", track) == "a}b"
    assert render("{}x}", track) == "x}"


def test_stray_closing_brace_reuses_the_last_key() -> None:
    track = _track(artist="Owl City")

    assert render("{artist}}", track) == "Owl City}"


def test_stray_closing_brace_rewrites_a_value_with_the_last_key() -> None:
    track = _track(a="{a}!")

    assert render("{a}}", track) == "{a}!!}"


def test_nested_open_brace_restarts_the_key() -> None:
    track = _track()

    assert render("{ti{title}}", track) == "{tiAlways}"


def test_empty_placeholder_is_removed() -> None:
    assert render("[{}]", _track()) == "[]"


def test_keys_are_case_sensitive() -> None:
    track = _track(artist="Owl City")

    assert render("{Artist}", track) == ""
