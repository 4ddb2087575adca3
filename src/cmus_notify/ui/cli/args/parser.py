"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cmus_notify.config.settings import Settings
from cmus_notify.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from cmus_notify.ui.cli.args.options import CLIArgs, LyricsArgs, RenderArgs


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cmus-notify",
            description="Render cmus track notifications and resolve their cover art.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        render_parser = subparsers.add_parser(
            "render",
            help="Render the notification for an audio file",
        )
        ArgumentParser._add_track_arguments(render_parser)
        _ = render_parser.add_argument(
            "--summary",
            type=str,
            dest="summary_template",
            metavar="TEMPLATE",
            help="Summary template, e.g. '{title}'",
        )
        _ = render_parser.add_argument(
            "--body",
            type=str,
            dest="body_template",
            metavar="TEMPLATE",
            help="Body template, e.g. '{artist} - {album}'",
        )
        _ = render_parser.add_argument(
            "--cover-path",
            type=str,
            dest="cover_path_template",
            metavar="TEMPLATE",
            help="Template for a cover file path tried before the cover search",
        )
        _ = render_parser.add_argument(
            "--force-external-cover",
            action="store_true",
            help="Ignore embedded artwork and search for an image file",
        )
        _ = render_parser.add_argument(
            "--no-external-cover",
            action="store_true",
            help="Only use embedded artwork",
        )
        _ = render_parser.add_argument(
            "--no-cover",
            action="store_true",
            help="Do not show the track cover at all",
        )

        lyrics_parser = subparsers.add_parser(
            "lyrics",
            help="Locate the .lrc lyrics file for an audio file",
        )
        ArgumentParser._add_track_arguments(lyrics_parser)

        return parser

    @staticmethod
    def _add_track_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "track_path",
            type=str,
            help="Path to the audio file",
            metavar="TRACK_FILE",
        )
        _ = parser.add_argument(
            "--depth",
            type=_non_negative_int,
            metavar="N",
            help="Parent directories to search (overrides the settings file)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed lookup information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the track file does not exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        settings = Settings.load()
        _ = setup_logger(log_file=settings.log_file or DEFAULT_LOG_FILE, console_level=log_level)

        track_path = Path(parsed_args.track_path).expanduser()
        if not track_path.is_file():
            logger.error("Track file does not exist: %s", track_path)
            sys.exit(1)

        if parsed_args.command == "render":
            return RenderArgs(
                command="render",
                track_path=track_path.resolve(),
                summary_template=parsed_args.summary_template,
                body_template=parsed_args.body_template,
                cover_path_template=parsed_args.cover_path_template,
                depth=parsed_args.depth,
                force_external_cover=parsed_args.force_external_cover,
                no_external_cover=parsed_args.no_external_cover,
                no_cover=parsed_args.no_cover,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        return LyricsArgs(
            command="lyrics",
            track_path=track_path.resolve(),
            depth=parsed_args.depth,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
