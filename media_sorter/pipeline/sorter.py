"""Placement engine: moves downloaded files into the destination tree."""

from pathlib import Path
from typing import Dict, List, Set

from loguru import logger
from tqdm import tqdm

from media_sorter.config.resolution import SorterConfig
from media_sorter.exceptions import (
    DirectoryAccessError,
    DirectoryCreateError,
    MoveError,
    PlacementError,
)
from media_sorter.filesystem import (
    create_directory,
    find_matching_directory,
    get_candidates,
    move_into,
    rename_in_place,
)
from media_sorter.models.placement import CandidateFile, Placement, SortReport
from media_sorter.naming import strip_prefix


class Sorter:
    """
    Sorts the files of a source directory into a destination tree.

    Each matching file goes through a fixed pipeline: optional prefix
    removal, lookup of an existing directory holding a similar file,
    creation of a new directory otherwise, then the move. The first error
    aborts the pass; files already moved stay where they are.
    """

    def __init__(self, config: SorterConfig, show_progress: bool = False):
        """
        Initialize the sorter.

        Args:
            config: Resolved configuration.
            show_progress: Display a tqdm progress bar while sorting.
        """
        self.config = config
        self.show_progress = show_progress
        # Dry run state: files placed so far by directory, and paths they left
        self._pending: Dict[Path, List[str]] = {}
        self._vacated: Set[Path] = set()

    @classmethod
    def from_config(cls, config: SorterConfig, **kwargs) -> "Sorter":
        """Build a sorter from a resolved configuration."""
        return cls(config, **kwargs)

    def sort(self) -> SortReport:
        """
        Sort every matching file of the source directory.

        Returns:
            SortReport listing the placements made.

        Raises:
            DirectoryAccessError: If a directory can't be listed.
            NameExtractionError: If a file name isn't valid text.
            RenameError: If removing a prefix on disk fails.
            PlacementError: If a file can't be moved into the target tree.
        """
        config = self.config
        self._check_directories()
        self._pending.clear()
        self._vacated.clear()

        report = SortReport(
            source_dir=config.source_dir,
            extensions=config.extensions,
            dry_run=config.dry_run,
        )

        candidates = list(get_candidates(config.source_dir, config.extensions))
        with tqdm(
            candidates,
            desc="Sorting files",
            unit="file",
            disable=not self.show_progress or not candidates,
        ) as pbar:
            for candidate in pbar:
                pbar.set_postfix_str(f"{candidate.original_name[:30]}...")
                report.placements.append(self.place(candidate))

        if report.is_empty:
            logger.info(f"No {sorted(config.extensions)} files found in {config.source_dir}")
        else:
            logger.info(f"{report.moved} file(s) sorted into {config.target_dir}")

        return report

    def place(self, candidate: CandidateFile) -> Placement:
        """
        Rename a candidate if needed and move it into the destination tree.

        Args:
            candidate: File selected from the source directory.

        Returns:
            Placement describing where the file went.
        """
        config = self.config
        original_path = candidate.path

        if not config.keep_prefix:
            candidate.display_name = strip_prefix(candidate.original_name)
            candidate.path = rename_in_place(candidate.path, candidate.display_name, config.dry_run)

        file_name = candidate.path.name
        exclude = {original_path, candidate.path} | self._vacated
        directory = find_matching_directory(
            config.target_dir,
            file_name,
            exclude=exclude,
            pending=self._pending if config.dry_run else None,
        )
        created = False

        try:
            if directory is None:
                directory, created = create_directory(config.target_dir, file_name, config.dry_run)
            destination = move_into(candidate.path, directory, config.dry_run)
        except (DirectoryCreateError, MoveError) as e:
            target = directory if directory is not None else config.target_dir
            logger.error(f"Couldn't place {file_name}: {e}")
            raise PlacementError(file_name, candidate.path, target, str(e)) from e

        if config.dry_run:
            created = created and directory not in self._pending
            self._pending.setdefault(directory, []).append(destination.name)
            self._vacated.add(original_path)

        return Placement(
            source=original_path,
            destination=destination,
            directory=directory,
            created_directory=created,
        )

    def _check_directories(self) -> None:
        for label, directory in (
            ("source", self.config.source_dir),
            ("target", self.config.target_dir),
        ):
            if not directory.is_dir():
                raise DirectoryAccessError(f"The {label} directory {directory} does not exist")
