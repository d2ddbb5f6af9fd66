"""Data models."""

from media_sorter.models.placement import CandidateFile, Placement, SortReport

__all__ = ["CandidateFile", "Placement", "SortReport"]
