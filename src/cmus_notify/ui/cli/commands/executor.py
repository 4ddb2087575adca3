"""src/cmus_notify/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse settings overrides and track loading across commands.
"""

from abc import ABC, abstractmethod
from dataclasses import replace

from cmus_notify.config.settings import Settings
from cmus_notify.features.track import load_track
from cmus_notify.shared.track import Track
from cmus_notify.ui.cli.args.options import CLIArgs
from cmus_notify.ui.cli.display.notification import NotificationDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    settings: Settings
    display: NotificationDisplay

    def __init__(self, args: CLIArgs, settings: Settings | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            settings: Base settings; loaded from the settings file when omitted.
        """
        self.args = args
        base = settings if settings is not None else Settings.load()
        self.settings = (
            replace(base, depth=args.depth) if args.depth is not None else base
        )
        self.display = NotificationDisplay(quiet=args.quiet)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """

    def load_track(self) -> Track:
        """Read the track named on the command line.

        Raises:
            OSError: If the file tags cannot be read.
        """
        return load_track(self.args.track_path)
