"""Command-line interface for exporting YouTube playlists."""

import argparse
import sys
from typing import List, Optional

from . import auth, config, export
from .api import YouTubeAPI
from .errors import PlaylistExportError
from .logging_config import configure_logging, get_logger
from .sink import create_sink

logger = get_logger(__name__)


def default_output_path(base: str, fmt: str) -> str:
    """Get the default output filename for a format.

    Args:
        base: Filename without extension
        fmt: Output format

    Returns:
        Filename with the format's extension
    """
    return base + config.FORMAT_EXTENSIONS[fmt]


def resolve_output(
    output: Optional[str], use_default: bool, base: str, fmt: str
) -> Optional[str]:
    """Resolve the output options to an output path, or None for stdout."""
    if use_default:
        return default_output_path(base, fmt)
    return output


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-o", "--output", metavar="FILE", help="Output file (stdout if omitted)")
    output.add_argument(
        "--default-output",
        action="store_true",
        help="Write to the default output file for the format",
    )
    parser.add_argument(
        "--format",
        choices=export.FORMATS,
        default="json",
        help="Output format (default: json)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Export YouTube playlists")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--secrets",
        help="Application secrets JSON file from console.developers.google.com "
        "(YouTube Data API v3 OAuth client)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    playlists_parser = subparsers.add_parser(
        "save-playlists", help="Save all playlists and their items"
    )
    _add_output_arguments(playlists_parser)
    playlists_parser.add_argument(
        "--no-progress", action="store_true", help="Do not show a progress bar"
    )

    html_parser = subparsers.add_parser(
        "save-watch-later-html",
        help="Save the entries of a Watch Later page saved as HTML",
    )
    html_parser.add_argument("input", help="Saved HTML page of the playlist")
    _add_output_arguments(html_parser)

    return parser


def run_save_playlists(args: argparse.Namespace) -> int:
    youtube = auth.get_youtube_service(args.secrets)
    if not youtube:
        logger.error("Command failed: %s", "Failed to get YouTube service")
        return 1

    path = resolve_output(
        args.output, args.default_output, config.DEFAULT_PLAYLISTS_OUTPUT, args.format
    )
    playlists = export.export_playlists(
        YouTubeAPI(youtube),
        create_sink(path),
        args.format,
        progress=not args.no_progress,
    )
    logger.info("Wrote %d items", len(playlists))
    return 0


def run_save_watch_later(args: argparse.Namespace) -> int:
    path = resolve_output(
        args.output, args.default_output, config.DEFAULT_WATCH_LATER_OUTPUT, args.format
    )
    items = export.export_watch_later(args.input, create_sink(path), args.format)
    logger.info("Wrote %d items", len(items))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(args.debug)

    try:
        if args.command == "save-playlists":
            return run_save_playlists(args)
        elif args.command == "save-watch-later-html":
            return run_save_watch_later(args)
        else:
            parser.print_help()
            return 1
    except PlaylistExportError as e:
        logger.error("Command failed: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
