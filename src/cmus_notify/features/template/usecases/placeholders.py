"""
Summary: Expand ``{key}`` placeholders in a template against a track's tags.
Why: Notification summary, body and cover path are all user-supplied templates.
"""

from __future__ import annotations

from cmus_notify.platform.logging import logger
from cmus_notify.shared.track import Track

TITLE_KEY = "title"


def render(template: str, track: Track) -> str:
    """Replace every placeholder in ``template`` with its matching value.

    The template is scanned once, left to right. Each ``}`` replaces all
    occurrences of ``{key}`` in the output built so far, so a value that
    itself contains ``{other}`` is rewritten when ``other`` closes later in
    the scan. Unknown keys render as the empty string; an unterminated ``{``
    is left as is and a stray ``}`` reuses the last collected key.
    """
    processed = template
    key = ""
    collecting = False

    for char in template:
        if char == "{":
            key = ""
            collecting = True
        elif char == "}":
            collecting = False
            processed = processed.replace(f"{{{key}}}", _resolve(key, track))
        elif collecting:
            key += char

    logger.debug("Rendered template %r as %r", template, processed)
    return processed


def _resolve(key: str, track: Track) -> str:
    if key == TITLE_KEY:
        return track.get_name()
    return track.metadata.get(key, "")


__all__ = ["TITLE_KEY", "render"]
