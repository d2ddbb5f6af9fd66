"""Directory scanning: candidate files and similarly named episodes."""

import os
from pathlib import Path
from typing import AbstractSet, Dict, Generator, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from media_sorter.exceptions import DirectoryAccessError, NameExtractionError
from media_sorter.models.placement import CandidateFile
from media_sorter.naming.keys import match_key


def list_entries(directory: Path) -> List[os.DirEntry]:
    """
    List the direct entries of a directory in lexical order.

    Args:
        directory: Directory to list.

    Returns:
        Entries sorted by name.

    Raises:
        DirectoryAccessError: If the directory cannot be listed.
    """
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as e:
        raise DirectoryAccessError(f"Couldn't list entries for directory {directory}: {e}") from e


def decode_name(path: Path) -> str:
    """
    Return the file name of a path as valid text.

    Raises:
        NameExtractionError: If the path has no name or it isn't valid UTF-8.
    """
    name = path.name
    if not name:
        raise NameExtractionError(f"Couldn't get file name for file path {path}")
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NameExtractionError(f"Couldn't parse file name {path!r} to string") from e
    return name


def get_candidates(
    source_dir: Path,
    extensions: AbstractSet[str],
) -> Generator[CandidateFile, None, None]:
    """
    Generate the files of source_dir whose extension is in extensions.

    Only direct children are considered; extensions are compared without
    their leading dot and case-sensitively.

    Args:
        source_dir: Directory holding downloaded files.
        extensions: Accepted extensions.

    Yields:
        CandidateFile for each matching file.
    """
    for entry in list_entries(source_dir):
        path = Path(entry.path)
        extension = path.suffix[1:]
        if not extension or extension not in extensions:
            logger.debug(f"Skipping {entry.name!r}: extension not sorted")
            continue
        if not entry.is_file():
            logger.debug(f"Skipping {entry.name!r}: not a regular file")
            continue
        yield CandidateFile(path=path, original_name=decode_name(path))


def _children(
    directory: Path,
    pending: Optional[Mapping[Path, Sequence[str]]] = None,
) -> List[Tuple[str, Path, bool]]:
    """
    Sorted (name, path, is_dir) children of directory.

    Files and directories on disk are merged with what a dry run has
    placed so far; directories that only exist in pending aren't listed.
    """
    children: Dict[str, Tuple[str, Path, bool]] = {}
    if not (pending and directory in pending and not directory.exists()):
        for entry in list_entries(directory):
            if entry.is_dir(follow_symlinks=False):
                children[entry.name] = (entry.name, Path(entry.path), True)
            elif entry.is_file():
                children[entry.name] = (entry.name, Path(entry.path), False)

    if pending:
        for pending_dir in pending:
            if pending_dir.parent == directory and pending_dir.name not in children:
                children[pending_dir.name] = (pending_dir.name, pending_dir, True)
        for name in pending.get(directory, ()):
            children.setdefault(name, (name, directory / name, False))

    return [children[name] for name in sorted(children)]


def find_similarly_named(
    directory: Path,
    key: str,
    exclude: AbstractSet[Path] = frozenset(),
    pending: Optional[Mapping[Path, Sequence[str]]] = None,
) -> Optional[Path]:
    """
    Depth-first search for a file whose name contains key.

    Children are visited in lexical order and directory symlinks are not
    followed. Only file names are compared, never directory names.

    Args:
        directory: Directory to walk.
        key: Substring looked up in file names.
        exclude: Files to ignore (the one being placed, files a dry run
            has already moved away).
        pending: Files placed by a dry run, by destination directory.

    Returns:
        Parent directory of the first matching file, or None.
    """
    for name, path, is_dir in _children(directory, pending):
        if is_dir:
            found = find_similarly_named(path, key, exclude, pending)
            if found is not None:
                return found
        elif key in name and path not in exclude:
            return path.parent
    return None


def find_matching_directory(
    target_dir: Path,
    name: str,
    exclude: AbstractSet[Path] = frozenset(),
    pending: Optional[Mapping[Path, Sequence[str]]] = None,
) -> Optional[Path]:
    """
    Find the directory of target_dir that already holds a similar file.

    The name is reduced to the first two words of its directory key, so
    "Cool show e02.mkv" matches a directory containing "Cool show e01.mkv".

    Args:
        target_dir: Root of the destination tree.
        name: Name of the file being placed.
        exclude: Files to ignore during the walk.
        pending: Files placed by a dry run, by destination directory.

    Returns:
        Matching directory, or None if nothing matches.
    """
    key = match_key(name)
    if not key:
        logger.debug(f"No match key for {name!r}")
        return None

    logger.debug(f"Searching {target_dir} for files containing {key!r}")
    found = find_similarly_named(target_dir, key, exclude, pending)
    if found is not None:
        logger.info(f"Found existing directory {found} for {name!r}")
    return found
