"""Directory keys derived from file names."""

from media_sorter.naming.prefix import strip_prefix

# Number of leading words compared when looking for an existing directory
MATCH_KEY_WORDS = 2


def derive_directory_key(name: str) -> str:
    """
    Derive a directory name from a display name.

    Takes the text before the first '-', or before the first '.' when there
    is no dash, or the whole name otherwise.

    Args:
        name: Display name of the file.

    Returns:
        Trimmed directory key (may be empty).

    Examples:
        >>> derive_directory_key("Cool show - 01.mkv")
        'Cool show'
        >>> derive_directory_key("Cool show e01.mkv")
        'Cool show e01'
    """
    for separator in ("-", "."):
        index = name.find(separator)
        if index != -1:
            return name[:index].strip()
    return name.strip()


def match_key(name: str) -> str:
    """
    Build the substring searched for among already sorted files.

    Each of the first two words of the directory key is followed by a space,
    so "Cool show e01.mkv" gives "Cool show ".
    """
    key = derive_directory_key(strip_prefix(name))
    return "".join(f"{word} " for word in key.split()[:MATCH_KEY_WORDS])
