"""Sorting pipeline."""

from media_sorter.pipeline.sorter import Sorter

__all__ = ["Sorter"]
