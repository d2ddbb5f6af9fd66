"""Configuration and CLI handling."""

from media_sorter.config.settings import (
    ENV_SOURCE_DIR,
    ENV_TARGET_DIR,
    DEFAULT_SOURCE_SUBDIR,
    DEFAULT_TARGET_SUBDIR,
    DEFAULT_EXTENSIONS,
)
from media_sorter.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    validate_directories,
    args_to_cli_args,
)
from media_sorter.config.resolution import (
    SorterConfig,
    load_environment,
    resolve_directory,
    normalize_extensions,
    resolve_config,
)

__all__ = [
    "ENV_SOURCE_DIR",
    "ENV_TARGET_DIR",
    "DEFAULT_SOURCE_SUBDIR",
    "DEFAULT_TARGET_SUBDIR",
    "DEFAULT_EXTENSIONS",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "validate_directories",
    "args_to_cli_args",
    "SorterConfig",
    "load_environment",
    "resolve_directory",
    "normalize_extensions",
    "resolve_config",
]
