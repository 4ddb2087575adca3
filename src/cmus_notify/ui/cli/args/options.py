"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class RenderArgs:
    """Command line arguments for the ``render`` subcommand."""

    command: Literal["render"]
    track_path: Path
    summary_template: str | None
    body_template: str | None
    cover_path_template: str | None
    depth: int | None
    force_external_cover: bool
    no_external_cover: bool
    no_cover: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class LyricsArgs:
    """Command line arguments for the ``lyrics`` subcommand."""

    command: Literal["lyrics"]
    track_path: Path
    depth: int | None
    verbose: bool
    quiet: bool


CLIArgs = RenderArgs | LyricsArgs

__all__ = ["CLIArgs", "LyricsArgs", "RenderArgs"]
