"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from media_sorter.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SOURCE_SUBDIR,
    DEFAULT_TARGET_SUBDIR,
    ENV_SOURCE_DIR,
    ENV_TARGET_DIR,
)


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Directories left to None are resolved later from the environment.

    Attributes:
        source_dir: Directory holding the files to sort.
        target_dir: Root of the destination tree.
        extensions: Extensions given on the command line.
        keep_prefix: If True, don't strip bracketed prefixes.
        dry_run: If True, simulate without making changes.
        debug: If True, enable debug logging.
    """

    source_dir: Optional[Path] = None
    target_dir: Optional[Path] = None
    extensions: List[str] = field(default_factory=list)
    keep_prefix: bool = False
    dry_run: bool = False
    debug: bool = False


def create_parser(prog: str = 'media-sorter') -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Args:
        prog: Program name shown in the help.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description="""
        Moves downloaded files into the directory that already holds
        the other episodes of the same series, creating it if needed.
        """
    )

    parser.add_argument(
        '-t', '--target',
        help=f"the directory to put the files into "
             f"(default: $HOME/{DEFAULT_TARGET_SUBDIR}, use the {ENV_TARGET_DIR} env to change this)"
    )

    parser.add_argument(
        '-s', '--src',
        help=f"the directory to be used as a source for the files "
             f"(default: $HOME/{DEFAULT_SOURCE_SUBDIR}, use the {ENV_SOURCE_DIR} env to change this)"
    )

    parser.add_argument(
        '-e', '--ext',
        action='extend',
        nargs='+',
        default=[],
        help=f"the extensions of the files to be sorted (default: {', '.join(sorted(DEFAULT_EXTENSIONS))})"
    )

    parser.add_argument(
        '-k', '--keep',
        action='store_true',
        help="keep the bracketed prefix in the file names"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - no file modifications"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None, prog: str = 'media-sorter') -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).
        prog: Program name shown in the help.

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser(prog)
    return parser.parse_args(args)


def validate_directories(source_dir: Path, target_dir: Path) -> bool:
    """
    Check that the source and target directories exist.

    Neither is created: a missing directory is a configuration mistake.

    Args:
        source_dir: Directory holding the files to sort.
        target_dir: Root of the destination tree.

    Returns:
        True if validation passed, False otherwise.
    """
    valid = True
    for label, directory in (("Source", source_dir), ("Target", target_dir)):
        if not directory.is_dir():
            logger.error(f"{label} directory {directory} does not exist")
            valid = False
    return valid


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        source_dir=Path(namespace.src) if namespace.src else None,
        target_dir=Path(namespace.target) if namespace.target else None,
        extensions=list(namespace.ext or []),
        keep_prefix=namespace.keep,
        dry_run=namespace.dry_run,
        debug=namespace.debug,
    )
