"""Tests for the high-level listing operation."""

import os
from unittest.mock import patch

import pytest

from dirwalk.models import FilterSet
from dirwalk.operations import list_entries


@pytest.fixture
def tree(tmp_path, monkeypatch):
    """Tree a/b.txt, a/c.txt, a/sub/d.txt with the cwd at its root."""
    (tmp_path / "a" / "sub").mkdir(parents=True)
    (tmp_path / "a" / "c.txt").write_text("c")
    (tmp_path / "a" / "b.txt").write_text("b")
    (tmp_path / "a" / "sub" / "d.txt").write_text("d")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestListEntries:
    """Tests for list_entries()."""

    def test_files_sorted(self, tree, c_collation):
        """Test listing regular files in collation order."""
        result = list_entries(".", FilterSet(files=True), sort=True)

        assert list(result) == ["./a/b.txt", "./a/c.txt", "./a/sub/d.txt"]

    def test_directories_sorted(self, tree, c_collation):
        """Test listing directories in collation order."""
        result = list_entries(".", FilterSet(directories=True), sort=True)

        assert list(result) == ["./a", "./a/sub"]

    def test_unsorted_keeps_discovery_order(self, tree):
        """Test that without sort the result is pre-order discovery order."""
        result = list_entries(".", FilterSet())

        paths = list(result)
        assert paths[0] == "./a"
        assert paths.index("./a/sub") < paths.index("./a/sub/d.txt")

    def test_sorted_twice_is_identical(self, tree, c_collation):
        """Test that repeated sorted listings are identical."""
        first = list(list_entries(".", FilterSet(), sort=True))
        second = list(list_entries(".", FilterSet(), sort=True))

        assert first == second

    def test_does_not_collate_without_sort(self, tree):
        """Test that collate is only called when sorting is requested."""
        with patch("dirwalk.operations.listing.collate") as mock_collate:
            list_entries(".", FilterSet())
            mock_collate.assert_not_called()

        with patch("dirwalk.operations.listing.collate") as mock_collate:
            list_entries(".", FilterSet(), sort=True)
            mock_collate.assert_called_once()

    def test_reports_errors_to_callback(self, tmp_path):
        """Test that traversal failures reach on_error."""
        errors = []

        result = list_entries(str(tmp_path / "missing"), FilterSet(), on_error=errors.append)

        assert len(result) == 0
        assert len(errors) == 1
        assert errors[0].operation == "opendir"

    def test_errors_ignored_without_callback(self, tmp_path):
        """Test that a missing directory gives an empty result without raising."""
        result = list_entries(str(tmp_path / "missing"), FilterSet())

        assert len(result) == 0

    def test_memory_error_propagates(self, tree):
        """Test that allocation failure is not swallowed."""
        with patch("dirwalk.models.Collector.push", side_effect=MemoryError):
            with pytest.raises(MemoryError):
                list_entries(".", FilterSet())

    def test_release_empties_result(self, tree):
        """Test that releasing the result drops all paths."""
        result = list_entries(".", FilterSet())
        assert len(result) > 0

        result.release()

        assert len(result) == 0
        assert list(result) == []

    def test_all_results_below_start(self, tree):
        """Test that every result lives under the start directory."""
        start = os.fspath(tree)

        result = list_entries(start, FilterSet())

        assert all(p.startswith(f"{start}/") and p != start for p in result)
