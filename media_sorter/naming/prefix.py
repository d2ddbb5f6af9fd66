"""Release-group prefix handling for downloaded file names."""

from typing import Optional


def extract_prefix(name: str) -> Optional[str]:
    """
    Return the bracketed prefix of a file name.

    The prefix runs from the first '[' through the first ']' after it.

    Args:
        name: File name to inspect.

    Returns:
        The prefix including both brackets, or None if there is none.

    Examples:
        >>> extract_prefix("[Group] Title - 01.mkv")
        '[Group]'
        >>> extract_prefix("Title - 01.mkv") is None
        True
    """
    opening = name.find("[")
    if opening == -1:
        return None
    closing = name.find("]", opening)
    if closing == -1:
        return None
    return name[opening:closing + 1]


def strip_prefix(name: str) -> str:
    """
    Remove a leading bracketed prefix and trim the remainder.

    Names that don't start with their prefix are returned unchanged.

    Args:
        name: File name, possibly starting with "[Group]".

    Returns:
        The display name.

    Examples:
        >>> strip_prefix("[Group] Title - 01.mkv")
        'Title - 01.mkv'
    """
    prefix = extract_prefix(name)
    if prefix and name.startswith(prefix):
        return name[len(prefix):].strip()
    return name
