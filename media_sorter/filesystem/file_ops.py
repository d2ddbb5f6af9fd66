"""File operations for renaming, creating directories and moving files."""

import os
from pathlib import Path
from typing import Tuple

from loguru import logger

from media_sorter.exceptions import DirectoryCreateError, MoveError, RenameError
from media_sorter.naming.keys import derive_directory_key


def renamed_path(path: Path, name: str) -> Path:
    """
    Return path with its file name replaced by name.

    The original extension is applied again so names containing dots
    don't lose it.

    Args:
        path: Current file path.
        name: New file name.

    Returns:
        New path in the same directory.
    """
    new_path = path.with_name(name)
    if path.suffix:
        new_path = new_path.with_suffix(path.suffix)
    return new_path


def rename_in_place(path: Path, name: str, dry_run: bool = False) -> Path:
    """
    Rename a file within its directory.

    Args:
        path: File to rename.
        name: New file name.
        dry_run: If True, only simulate the operation.

    Returns:
        The new path (path itself if the name doesn't change).

    Raises:
        RenameError: If the name is unusable, another file already has it
            or the rename fails.
    """
    try:
        new_path = renamed_path(path, name)
    except ValueError as e:
        raise RenameError(f"Failed to rename {path} to {name!r}: {e}") from e

    if new_path == path:
        return path

    if new_path.exists():
        raise RenameError(f"Can't rename {path.name}: {new_path} already exists")

    if dry_run:
        logger.info(f'SIMULATION - Rename: {path.name} -> {new_path.name}')
        return new_path

    try:
        path.rename(new_path)
    except OSError as e:
        raise RenameError(f"Failed to rename {path}: {e}") from e

    logger.info(f'File renamed: {path.name} -> {new_path.name}')
    return new_path


def create_directory(parent: Path, name: str, dry_run: bool = False) -> Tuple[Path, bool]:
    """
    Create the directory derived from a file name under parent.

    Only one level is created; an existing directory with that name is reused.

    Args:
        parent: Destination root.
        name: Display name of the file.
        dry_run: If True, only simulate the operation.

    Returns:
        Tuple (directory path, True if it was created).

    Raises:
        DirectoryCreateError: If the key is unusable or mkdir fails.
    """
    key = derive_directory_key(name)
    if not key or key in (".", "..") or os.sep in key or (os.altsep and os.altsep in key):
        raise DirectoryCreateError(f"Can't derive a directory name from {name!r}")

    new_dir = parent / key
    if new_dir.is_dir():
        logger.debug(f"Reusing existing directory {new_dir}")
        return new_dir, False

    if dry_run:
        logger.info(f'SIMULATION - Create directory: {new_dir}')
        return new_dir, True

    try:
        new_dir.mkdir()
    except OSError as e:
        raise DirectoryCreateError(f"Couldn't create directory {new_dir}: {e}") from e

    logger.info(f'Directory created: {new_dir}')
    return new_dir, True


def move_into(source: Path, directory: Path, dry_run: bool = False) -> Path:
    """
    Move a file into directory keeping its name.

    This is a plain rename: moves across filesystems fail.

    Args:
        source: File to move.
        directory: Destination directory.
        dry_run: If True, only simulate the operation.

    Returns:
        Final path of the file.

    Raises:
        MoveError: If the file has no name, the destination exists or the
            rename fails.
    """
    if not source.name:
        raise MoveError(f"Couldn't get filename for {source}")

    destination = directory / source.name
    if destination == source:
        return source

    if destination.exists():
        raise MoveError(f"Destination file exists: {destination}")

    if dry_run:
        logger.info(f'SIMULATION - Move: {source.name} -> {directory}')
        return destination

    try:
        source.rename(destination)
    except OSError as e:
        raise MoveError(f"Error moving {source} to {directory}: {e}") from e

    logger.info(f'File moved: {destination}')
    return destination
