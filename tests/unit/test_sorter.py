"""Tests for the Sorter placement engine."""

import pytest
from unittest.mock import patch

from media_sorter.config.resolution import SorterConfig
from media_sorter.exceptions import (
    DirectoryAccessError,
    NameExtractionError,
    PlacementError,
    RenameError,
)
from media_sorter.models.placement import CandidateFile
from media_sorter.pipeline.sorter import Sorter


class TestSorterPlace:
    """Tests for Sorter.place method."""

    def test_moves_into_existing_directory(self, make_config, sort_dirs):
        """A file joins the directory of its previous episode."""
        source, target = sort_dirs
        show_dir = target / "Whatever"
        show_dir.mkdir()
        (show_dir / "Best show - EP 01.mkv").touch()
        (source / "[Group] Best show - EP 02.mkv").touch()
        sorter = Sorter(make_config())

        placement = sorter.place(CandidateFile(source / "[Group] Best show - EP 02.mkv", "[Group] Best show - EP 02.mkv"))

        assert placement.directory == show_dir
        assert placement.destination == show_dir / "Best show - EP 02.mkv"
        assert placement.source == source / "[Group] Best show - EP 02.mkv"
        assert placement.created_directory is False
        assert placement.destination.exists()

    def test_creates_new_directory(self, make_config, sort_dirs):
        """A file without previous episode gets a new directory."""
        source, target = sort_dirs
        (source / "Best show - EP 01.mkv").touch()
        sorter = Sorter(make_config())

        placement = sorter.place(CandidateFile(source / "Best show - EP 01.mkv", "Best show - EP 01.mkv"))

        assert placement.directory == target / "Best show"
        assert placement.created_directory is True
        assert (target / "Best show" / "Best show - EP 01.mkv").exists()

    def test_keep_prefix_does_not_rename(self, make_config, sort_dirs):
        """With keep_prefix the original name is kept."""
        source, target = sort_dirs
        (source / "[Group] Best show - EP 01.mkv").touch()
        sorter = Sorter(make_config(keep_prefix=True))

        placement = sorter.place(CandidateFile(source / "[Group] Best show - EP 01.mkv", "[Group] Best show - EP 01.mkv"))

        assert placement.destination == target / "[Group] Best show" / "[Group] Best show - EP 01.mkv"

    def test_empty_key_raises_placement_error(self, make_config, sort_dirs):
        """An unusable directory name aborts with PlacementError."""
        source, target = sort_dirs
        (source / "[Group] - 01.mkv").touch()
        sorter = Sorter(make_config())

        with pytest.raises(PlacementError) as exc_info:
            sorter.place(CandidateFile(source / "[Group] - 01.mkv", "[Group] - 01.mkv"))

        error = exc_info.value
        assert error.file_name == "- 01.mkv"
        assert error.source == source / "- 01.mkv"
        assert error.target == target
        assert error.__cause__ is not None

    def test_move_failure_raises_placement_error(self, make_config, sort_dirs):
        """A failed move is wrapped in PlacementError."""
        source, target = sort_dirs
        (source / "Best show - EP 01.mkv").touch()
        (target / "Best show").mkdir()
        (target / "Best show" / "Best show - EP 01.mkv").touch()
        sorter = Sorter(make_config())

        with pytest.raises(PlacementError) as exc_info:
            sorter.place(CandidateFile(source / "Best show - EP 01.mkv", "Best show - EP 01.mkv"))

        assert exc_info.value.target == target / "Best show"


class TestSorterSort:
    """Tests for Sorter.sort method."""

    def test_no_matching_files(self, make_config, sort_dirs):
        """No matching extension is not an error."""
        source, target = sort_dirs
        (source / "notes.txt").touch()

        report = Sorter(make_config()).sort()

        assert report.is_empty
        assert (source / "notes.txt").exists()
        assert list(target.iterdir()) == []

    def test_missing_source_raises(self, make_config, tmp_path):
        """A missing source directory is a hard failure."""
        with pytest.raises(DirectoryAccessError):
            Sorter(make_config(source_dir=tmp_path / "missing")).sort()

    def test_missing_target_raises(self, make_config, tmp_path):
        """A missing target directory is a hard failure and isn't created."""
        missing = tmp_path / "missing"

        with pytest.raises(DirectoryAccessError):
            Sorter(make_config(target_dir=missing)).sort()

        assert not missing.exists()

    def test_error_aborts_remaining_files(self, make_config, sort_dirs):
        """Files after a failing one are left untouched."""
        source, target = sort_dirs
        (source / "A show - 01.mkv").touch()
        (source / "[x] - 02.mkv").touch()
        (source / "z show - 01.mkv").touch()

        with pytest.raises(PlacementError):
            Sorter(make_config()).sort()

        assert (target / "A show" / "A show - 01.mkv").exists()
        assert (source / "z show - 01.mkv").exists()

    def test_undecodable_name_aborts(self, make_config, sort_dirs):
        """Invalid names abort the run."""
        with patch("media_sorter.filesystem.discovery.decode_name", side_effect=NameExtractionError("bad")):
            source, _ = sort_dirs
            (source / "Show - 01.mkv").touch()

            with pytest.raises(NameExtractionError):
                Sorter(make_config()).sort()

    def test_dry_run_changes_nothing(self, make_config, sort_dirs):
        """Dry run reports placements without touching the disk."""
        source, target = sort_dirs
        (source / "[Group] Best show - EP 01.mkv").touch()

        report = Sorter(make_config(dry_run=True)).sort()

        assert report.moved == 1
        assert report.dry_run is True
        assert report.placements[0].destination == target / "Best show" / "Best show - EP 01.mkv"
        assert (source / "[Group] Best show - EP 01.mkv").exists()
        assert list(target.iterdir()) == []

    def test_from_config(self, make_config):
        """from_config builds a sorter."""
        config = make_config()
        sorter = Sorter.from_config(config, show_progress=True)

        assert sorter.config is config
        assert sorter.show_progress is True

    def test_rename_never_replaces_another_source_file(self, make_config, sort_dirs):
        """A stripped name colliding with another download aborts the run."""
        source, target = sort_dirs
        (source / "[A]show - 01.mkv").write_text("A")
        (source / "show - 01.mkv").write_text("plain")

        with pytest.raises(RenameError):
            Sorter(make_config()).sort()

        assert (source / "[A]show - 01.mkv").read_text() == "A"
        assert (source / "show - 01.mkv").read_text() == "plain"
        assert list(target.iterdir()) == []


class TestSorterDryRun:
    """A dry run reports what a real run does."""

    @staticmethod
    def _placements(root, dry_run):
        source = root / "downloads"
        target = root / "tv"
        source.mkdir(parents=True)
        target.mkdir()
        for name in ["[Group] Other show e07.mp4", "[Group] Other show e08.mp4", "Best show - EP 01.mkv"]:
            (source / name).touch()
        config = SorterConfig(
            source_dir=source,
            target_dir=target,
            extensions=frozenset({"mkv", "mp4"}),
            dry_run=dry_run,
        )
        report = Sorter(config).sort()
        return [
            (p.destination.relative_to(root), p.directory.relative_to(root), p.created_directory)
            for p in report.placements
        ]

    def test_matches_real_run(self, tmp_path):
        """Episodes of a new series share one simulated directory."""
        dry = self._placements(tmp_path / "dry", dry_run=True)
        real = self._placements(tmp_path / "real", dry_run=False)

        assert dry == real
        assert [directory.name for _, directory, _ in dry] == ["Best show", "Other show e07", "Other show e07"]
        assert [created for _, _, created in dry] == [True, True, False]

    def test_report_lists_one_new_directory_per_series(self, make_config, sort_dirs):
        """Created directories aren't counted twice."""
        source, target = sort_dirs
        (source / "Other show e07.mp4").touch()
        (source / "Other show e08.mp4").touch()

        report = Sorter(make_config(dry_run=True)).sort()

        assert report.created_directories == [target / "Other show e07"]
        assert list(target.iterdir()) == []

    def test_source_inside_target_does_not_match_itself(self, tmp_path):
        """The original name of a renamed download is excluded."""
        target = tmp_path / "tv"
        source = target / "downloads"
        source.mkdir(parents=True)
        (source / "[prefix]Cool show e01.mkv").touch()
        config = SorterConfig(source_dir=source, target_dir=target, extensions=frozenset({"mkv"}), dry_run=True)

        report = Sorter(config).sort()

        assert report.placements[0].directory == target / "Cool show e01"

    def test_state_reset_between_passes(self, make_config, sort_dirs):
        """A second dry run starts from the real tree again."""
        source, target = sort_dirs
        (source / "Other show e07.mp4").touch()
        sorter = Sorter(make_config(dry_run=True))

        sorter.sort()
        report = sorter.sort()

        assert report.placements[0].created_directory is True
