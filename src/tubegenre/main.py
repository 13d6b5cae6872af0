"""Main application entry point for tubegenre."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.prompt import Prompt

from tubegenre.genre_exporter import GenreExporter
from tubegenre.utils.config import setup_logging, load_config
from tubegenre.utils.errors import TubeGenreError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export YouTube videos for a genre, with metadata and captions, to CSV."
    )
    parser.add_argument("genre", nargs="?", help="Genre keyword to search for (prompted if omitted).")
    parser.add_argument("--max-results", type=int, help="Maximum number of videos to fetch.")
    parser.add_argument("--output-dir", help="Directory to write the CSV file to.")
    parser.add_argument("--language", help="Caption language code.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> dict:
    """Load configuration and apply command-line overrides."""
    config = load_config()
    if args.max_results is not None:
        config["max_results"] = args.max_results
    if args.output_dir:
        config["output_dir"] = args.output_dir
    if args.language:
        config["caption_language"] = args.language
    if args.log_level:
        config["log_level"] = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
        setup_logging(config["log_level"], config.get("log_file"))
        genre = args.genre if args.genre is not None else Prompt.ask("Enter the genre")
        exporter = GenreExporter(config)
        try:
            exporter.run(genre)
        finally:
            exporter.close()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except TubeGenreError as e:
        logger.error(f"Export failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
