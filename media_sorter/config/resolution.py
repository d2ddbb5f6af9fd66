"""Resolution of the sorter configuration from CLI, environment and defaults."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from media_sorter.config.cli import CLIArgs
from media_sorter.config.settings import (
    DEFAULT_EXTENSIONS,
    DEFAULT_SOURCE_SUBDIR,
    DEFAULT_TARGET_SUBDIR,
    DOTENV_FILE,
    ENV_SOURCE_DIR,
    ENV_TARGET_DIR,
)
from media_sorter.exceptions import ConfigurationError


@dataclass(frozen=True)
class SorterConfig:
    """
    Fully resolved configuration handed to the sorter.

    Attributes:
        source_dir: Directory holding the files to sort.
        target_dir: Root of the destination tree.
        extensions: Extensions to sort, without leading dot.
        keep_prefix: If True, file names keep their bracketed prefix.
        dry_run: If True, simulate without making changes.
    """

    source_dir: Path
    target_dir: Path
    extensions: FrozenSet[str] = DEFAULT_EXTENSIONS
    keep_prefix: bool = False
    dry_run: bool = False


def load_environment(dotenv_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the environment.

    Args:
        dotenv_path: File to read (default: .env in the working directory).

    Returns:
        True if a file was loaded.
    """
    path = dotenv_path or Path.cwd() / DOTENV_FILE
    loaded = load_dotenv(dotenv_path=path, override=False)
    if loaded:
        logger.debug(f"Environment loaded from {path}")
    return loaded


def resolve_directory(
    explicit: Optional[Path],
    env_var: str,
    subdir: str,
    environ: Mapping[str, str],
    home: Optional[Path] = None,
) -> Path:
    """
    Resolve a directory: explicit value, then env variable, then $HOME/subdir.

    Raises:
        ConfigurationError: If the home directory is needed but unknown.
    """
    if explicit is not None:
        return explicit

    value = environ.get(env_var)
    if value:
        return Path(value)

    logger.info(f"Env variable {env_var} not found. Using default")
    if home is None:
        home_value = environ.get("HOME")
        if not home_value:
            raise ConfigurationError(f"Unable to get $HOME to resolve {env_var}")
        home = Path(home_value)
    return home / subdir


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """Drop leading dots and empty values from user supplied extensions."""
    return frozenset(ext.lstrip(".") for ext in extensions if ext.lstrip("."))


def resolve_config(
    cli_args: CLIArgs,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> SorterConfig:
    """
    Build the sorter configuration from parsed arguments.

    Args:
        cli_args: Parsed command-line arguments.
        environ: Environment to read (default: os.environ).
        home: Home directory override (default: $HOME from environ).

    Returns:
        Resolved SorterConfig.

    Raises:
        ConfigurationError: If a directory can't be resolved or the
            extension list is empty.
    """
    if environ is None:
        environ = os.environ

    source_dir = resolve_directory(cli_args.source_dir, ENV_SOURCE_DIR, DEFAULT_SOURCE_SUBDIR, environ, home)
    target_dir = resolve_directory(cli_args.target_dir, ENV_TARGET_DIR, DEFAULT_TARGET_SUBDIR, environ, home)

    if cli_args.extensions:
        extensions = normalize_extensions(cli_args.extensions)
        if not extensions:
            raise ConfigurationError(f"No usable extension in {cli_args.extensions}")
    else:
        extensions = DEFAULT_EXTENSIONS

    return SorterConfig(
        source_dir=source_dir,
        target_dir=target_dir,
        extensions=extensions,
        keep_prefix=cli_args.keep_prefix,
        dry_run=cli_args.dry_run,
    )
