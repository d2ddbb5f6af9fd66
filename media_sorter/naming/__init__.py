"""File name handling: prefixes and directory keys."""

from media_sorter.naming.prefix import (
    extract_prefix,
    strip_prefix,
)
from media_sorter.naming.keys import (
    MATCH_KEY_WORDS,
    derive_directory_key,
    match_key,
)

__all__ = [
    "extract_prefix",
    "strip_prefix",
    "MATCH_KEY_WORDS",
    "derive_directory_key",
    "match_key",
]
