"""Tests for data models."""

from pathlib import Path

import pytest

from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import ByDirectories
from testlocator.models import ByPath
from testlocator.models import DirectoryEntry
from testlocator.models import DiscoveryConfig
from testlocator.models import Validation


class TestConventions:
    """Tests for Conventions."""

    def test_file_patterns_derived_from_suffixes(self):
        """Test that glob patterns are built from the file suffixes."""
        assert DEFAULT_CONVENTIONS.file_patterns == ("*.Test.ps1", "*.Tests.ps1")

    def test_is_immutable(self):
        """Test that conventions cannot be modified."""
        with pytest.raises(AttributeError):
            DEFAULT_CONVENTIONS.default_max_depth = 10


class TestValidation:
    """Tests for Validation."""

    @pytest.mark.parametrize(
        ("has_dirs", "has_files"),
        [(True, True), (True, False), (False, True), (False, False)],
    )
    def test_conventions_followed_requires_both(self, has_dirs, has_files):
        """Test that conventions are followed only with directories and files."""
        validation = Validation(
            has_valid_directories=has_dirs, has_valid_files=has_files
        )

        assert validation.conventions_followed == (has_dirs and has_files)


class TestSearchSource:
    """Tests for ByDirectories and ByPath."""

    def test_by_directories_roots_in_order(self):
        """Test that directory search roots keep their order."""
        source = ByDirectories(
            (DirectoryEntry(Path("/r/b"), 1), DirectoryEntry(Path("/r/a"), 1))
        )

        assert source.search_roots() == [Path("/r/b"), Path("/r/a")]

    def test_by_path_single_root(self):
        """Test that an explicit path is the single search root."""
        assert ByPath(Path("/r/x")).search_roots() == [Path("/r/x")]


class TestDiscoveryConfig:
    """Tests for DiscoveryConfig."""

    @pytest.mark.parametrize("test_path", [None, "", "  \t"])
    def test_blank_test_path(self, test_path):
        """Test that a missing or blank test path selects auto-discovery."""
        assert not DiscoveryConfig(test_path=test_path).has_test_path

    def test_test_path_set(self):
        """Test that a non-blank test path selects explicit mode."""
        assert DiscoveryConfig(test_path=Path("Tests")).has_test_path

    def test_zero_depth_allowed(self):
        """Test that a max_depth of 0 is accepted."""
        assert DiscoveryConfig(max_depth=0).max_depth == 0
