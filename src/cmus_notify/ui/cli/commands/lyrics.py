"""src/cmus_notify/ui/cli/commands/lyrics.py
What: Print the lyrics file found for a track.
Why: Expose the upward search for .lrc files on its own.
"""

from typing import final, override

from cmus_notify.features.cover import find_lyrics
from cmus_notify.ui.cli.args.options import LyricsArgs
from cmus_notify.ui.cli.commands.executor import CommandExecutor


@final
class LyricsCommand(CommandExecutor):
    """Command for locating a track's lyrics file."""

    args: LyricsArgs

    @override
    def execute(self) -> int:
        lyrics_path = find_lyrics(self.args.track_path, self.settings.depth)
        self.display.show_lyrics(self.args.track_path, lyrics_path)
        return 0 if lyrics_path is not None else 1
