"""Data models for a sorting pass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List


@dataclass
class CandidateFile:
    """
    A source file selected for sorting.

    Attributes:
        path: Current full path of the file.
        original_name: Name of the file as found in the source directory.
        display_name: Name after optional prefix removal.
    """

    path: Path
    original_name: str
    display_name: str = ''

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.original_name


@dataclass
class Placement:
    """
    Outcome of placing one file.

    Attributes:
        source: Path of the file before sorting (prefix included).
        destination: Final path of the file.
        directory: Directory the file was moved into.
        created_directory: True if the directory was created for this file.
    """

    source: Path
    destination: Path
    directory: Path
    created_directory: bool = False


@dataclass
class SortReport:
    """Summary of a sorting pass."""

    source_dir: Path
    extensions: FrozenSet[str] = frozenset()
    dry_run: bool = False
    placements: List[Placement] = field(default_factory=list)

    @property
    def moved(self) -> int:
        """Number of files placed."""
        return len(self.placements)

    @property
    def created_directories(self) -> List[Path]:
        """Directories created during the pass, in creation order."""
        created: List[Path] = []
        for placement in self.placements:
            if placement.created_directory and placement.directory not in created:
                created.append(placement.directory)
        return created

    @property
    def is_empty(self) -> bool:
        """True when no file matched the extension filter."""
        return not self.placements
