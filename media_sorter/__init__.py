"""
Media Sorter - Download folder organization tool.

Sorts downloaded media files by:
- Filtering the source directory on configured extensions
- Stripping bracketed release-group prefixes from file names
- Finding the series directory that already holds a similar episode
- Creating a new directory from the file name otherwise
"""

__version__ = "0.3.0"
