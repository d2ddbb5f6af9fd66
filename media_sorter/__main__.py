"""Entry point for the media sorter package.

This module provides the command-line entry point for the sorting tool.
Run with: python -m media_sorter
"""

import sys
from typing import List, Optional

from loguru import logger

from media_sorter.config import (
    args_to_cli_args,
    load_environment,
    parse_arguments,
    resolve_config,
    validate_directories,
)
from media_sorter.config.settings import LOG_FILE, LOG_RETENTION, LOG_ROTATION
from media_sorter.exceptions import SorterError
from media_sorter.pipeline import Sorter
from media_sorter.ui import ConsoleUI, display_configuration, display_report


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def main(args: Optional[List[str]] = None, prog: str = "media-sorter") -> int:
    """
    Main entry point for the sorting tool.

    Args:
        args: Command-line arguments (None for sys.argv).
        prog: Program name shown in the help.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(args, prog)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    load_environment()
    try:
        config = resolve_config(cli_args)
    except SorterError as e:
        logger.error(str(e))
        console.print_error(str(e))
        return 1

    if not validate_directories(config.source_dir, config.target_dir):
        console.print_error("Directory validation failed")
        return 1

    if config.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No file will be renamed or moved\n"
            "• No directory will be created"
        )

    display_configuration(config, console)

    sorter = Sorter.from_config(config, show_progress=sys.stderr.isatty())
    try:
        report = sorter.sort()
    except SorterError as e:
        logger.error(f"Sorting aborted: {e}")
        console.print_error(str(e))
        return 1

    display_report(report, config.target_dir, console)
    return 0


def anime_main() -> int:
    """Entry point kept for the anime-sorter command."""
    return main(prog="anime-sorter")


if __name__ == "__main__":
    sys.exit(main())
