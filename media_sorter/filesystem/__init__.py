"""Filesystem operations for sorting files."""

from media_sorter.filesystem.discovery import (
    list_entries,
    decode_name,
    get_candidates,
    find_similarly_named,
    find_matching_directory,
)
from media_sorter.filesystem.file_ops import (
    renamed_path,
    rename_in_place,
    create_directory,
    move_into,
)

__all__ = [
    "list_entries",
    "decode_name",
    "get_candidates",
    "find_similarly_named",
    "find_matching_directory",
    "renamed_path",
    "rename_in_place",
    "create_directory",
    "move_into",
]
