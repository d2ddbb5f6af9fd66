"""Custom exceptions raised while sorting files."""

from pathlib import Path
from typing import Optional


class SorterError(Exception):
    """Base class for all sorting errors."""

    pass


class ConfigurationError(SorterError):
    """Configuration could not be resolved (missing $HOME, no extensions, etc.)."""

    pass


class DirectoryAccessError(SorterError):
    """A directory could not be listed."""

    pass


class NameExtractionError(SorterError):
    """A file name could not be interpreted as text."""

    pass


class RenameError(SorterError):
    """Renaming a file in place failed."""

    pass


class DirectoryCreateError(SorterError):
    """Creating a destination directory failed."""

    pass


class MoveError(SorterError):
    """Moving a file into its destination directory failed."""

    pass


class PlacementError(SorterError):
    """
    A file could not be placed in the destination tree.

    Attributes:
        file_name: Name of the file being placed.
        source: Path the file was moved from.
        target: Directory the file was meant to land in.
    """

    def __init__(self, file_name: str, source: Path, target: Path, reason: Optional[str] = None):
        self.file_name = file_name
        self.source = source
        self.target = target
        message = f"Couldn't move file {file_name!r} from {source} to directory {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
