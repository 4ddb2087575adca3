"""Command line interface for cmus-notify."""

import sys
from typing import final

from cmus_notify.platform.logging import logger
from cmus_notify.ui.cli.args import ArgumentParser
from cmus_notify.ui.cli.args.options import CLIArgs, RenderArgs
from cmus_notify.ui.cli.commands import CommandExecutor, LyricsCommand, RenderCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command: CommandExecutor = (
                RenderCommand(args) if isinstance(args, RenderArgs) else LyricsCommand(args)
            )
            exit_code = command.execute()
            if exit_code != 0:
                sys.exit(exit_code)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except OSError as e:
            logger.error("Could not read the track: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
