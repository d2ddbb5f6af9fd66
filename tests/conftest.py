"""Pytest configuration and fixtures."""

import pytest

from media_sorter.config.resolution import SorterConfig


@pytest.fixture
def sample_release_names():
    """Sample downloaded file names for testing."""
    return [
        "[SubsPlease] Frieren - 12 (1080p) [ABCD1234].mkv",
        "[Ohys-Raws] Spy x Family - 05 (BS11 1280x720 x264 AAC).mp4",
        "Best show - EP 01.mkv",
        "Cool show e01.mp4",
    ]


@pytest.fixture
def sort_dirs(tmp_path):
    """Create empty source and target directories."""
    source = tmp_path / "downloads"
    target = tmp_path / "tv"
    source.mkdir()
    target.mkdir()
    return source, target


@pytest.fixture
def make_config(sort_dirs):
    """Factory building a SorterConfig on the sort_dirs directories."""
    source, target = sort_dirs

    def _make(**kwargs) -> SorterConfig:
        kwargs.setdefault("source_dir", source)
        kwargs.setdefault("target_dir", target)
        kwargs.setdefault("extensions", frozenset({"mkv", "mp4"}))
        return SorterConfig(**kwargs)

    return _make
