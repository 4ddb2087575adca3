"""src/cmus_notify/ui/cli/commands/render.py
What: Render a track notification and print it.
Why: Preview templates and cover selection without a running cmus.
"""

from dataclasses import replace
from typing import final, override

from cmus_notify.config.settings import Settings
from cmus_notify.features.cover import find_lyrics
from cmus_notify.features.notification import build_notification
from cmus_notify.ui.cli.args.options import RenderArgs
from cmus_notify.ui.cli.commands.executor import CommandExecutor


@final
class RenderCommand(CommandExecutor):
    """Command for rendering one track notification."""

    args: RenderArgs

    def __init__(self, args: RenderArgs, settings: Settings | None = None) -> None:
        super().__init__(args, settings)
        overrides: dict[str, object] = {}
        if args.summary_template is not None:
            overrides["summary_template"] = args.summary_template
        if args.body_template is not None:
            overrides["body_template"] = args.body_template
        if args.cover_path_template is not None:
            overrides["cover_path_template"] = args.cover_path_template
        if args.force_external_cover:
            overrides["force_use_external_cover"] = True
        if args.no_external_cover:
            overrides["no_use_external_cover"] = True
        if args.no_cover:
            overrides["show_track_cover"] = False
        if overrides:
            self.settings = replace(self.settings, **overrides)

    @override
    def execute(self) -> int:
        track = self.load_track()
        with build_notification(track, self.settings) as content:
            lyrics_path = find_lyrics(track.path, self.settings.depth)
            self.display.show_notification(content, lyrics_path=lyrics_path)
        return 0
