"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from testlocator import __version__
from testlocator.cli import app
from testlocator.exceptions import TraversalError

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_ci_env(monkeypatch):
    """Keep a CI runner's $GITHUB_OUTPUT from leaking into tests."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)


@pytest.fixture
def single_suite(tmp_path, make_tree):
    """A project with exactly one test directory, so no warnings are printed."""
    return make_tree(tmp_path / "suite", ["Tests/A.Tests.ps1", "Tests/B.Test.ps1"])


class TestVersion:
    """Tests for --version."""

    def test_prints_version(self):
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"testlocator {__version__}" in result.output


class TestDiscoverCommand:
    """Tests for the discover command."""

    def test_text_output(self, project):
        """Test that the text report shows the summary and warnings."""
        result = runner.invoke(app, ["discover", str(project), "-e", "bin"])

        assert result.exit_code == 0
        assert "✓ Conventions followed (2 directories, 3 files)" in result.output
        assert "2 test directories" in result.output

    def test_json_output(self, single_suite):
        """Test that --format json prints the result document to stdout."""
        result = runner.invoke(app, ["discover", str(single_suite), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["mode"] == "auto"
        assert data["testFilesCount"] == 2
        assert data["discoveredPaths"] == [str(single_suite / "Tests")]

    def test_max_depth_option(self, project):
        """Test that --max-depth limits the directory search."""
        result = runner.invoke(
            app, ["discover", str(project), "-e", "bin", "--max-depth", "1"]
        )

        assert result.exit_code == 0
        assert "(1 directory, 2 files)" in result.output

    def test_negative_max_depth_rejected(self, project):
        """Test that a negative --max-depth is a usage error."""
        result = runner.invoke(app, ["discover", str(project), "--max-depth", "-1"])

        assert result.exit_code == 2

    def test_test_path_option(self, project):
        """Test that --test-path switches to explicit mode."""
        result = runner.invoke(
            app, ["discover", str(project), "--test-path", str(project / "UnitTests")]
        )

        assert result.exit_code == 0
        assert "Mode: explicit test path" in result.output
        assert "(1 directory, 1 file)" in result.output

    def test_missing_root_still_succeeds(self, tmp_path):
        """Test that a missing root reports failure but exits 0."""
        result = runner.invoke(app, ["discover", str(tmp_path / "missing")])

        assert result.exit_code == 0
        assert "✗ Conventions not followed" in result.output

    def test_strict_fails_when_conventions_not_followed(self, tmp_path):
        """Test that --strict exits 1 when conventions are not followed."""
        result = runner.invoke(app, ["discover", str(tmp_path / "missing"), "--strict"])

        assert result.exit_code == 1

    def test_strict_passes_when_conventions_followed(self, single_suite):
        """Test that --strict exits 0 when conventions are followed."""
        result = runner.invoke(app, ["discover", str(single_suite), "--strict"])

        assert result.exit_code == 0

    def test_writes_ci_output_file(self, single_suite, tmp_path):
        """Test that --ci-output appends the CI key/value lines."""
        sink = tmp_path / "outputs.txt"

        result = runner.invoke(
            app, ["discover", str(single_suite), "--ci-output", str(sink)]
        )

        assert result.exit_code == 0
        lines = sink.read_text().splitlines()
        assert "test-file-count=2" in lines
        assert "test-directory-count=1" in lines
        assert "conventions-followed=true" in lines
        assert f"test-paths={single_suite / 'Tests'}" in lines

    def test_ci_output_from_environment(self, single_suite, tmp_path):
        """Test that $GITHUB_OUTPUT is used as the CI output file."""
        sink = tmp_path / "github_output"

        result = runner.invoke(
            app, ["discover", str(single_suite)], env={"GITHUB_OUTPUT": str(sink)}
        )

        assert result.exit_code == 0
        assert "test-path-exists=true" in sink.read_text()

    def test_traversal_error_exits_nonzero(self, project):
        """Test that a root traversal error exits 1 with a message."""
        with patch(
            "testlocator.cli.discover",
            side_effect=TraversalError(project, "Permission denied"),
        ):
            result = runner.invoke(app, ["discover", str(project)])

        assert result.exit_code == 1
        assert "Cannot read search root" in result.output


class TestManifestCommand:
    """Tests for the manifest command."""

    def test_prints_manifest_path(self, tmp_path, make_tree):
        """Test that the manifest command prints the manifest found."""
        root = make_tree(tmp_path / "module", ["Module.psd1"])

        result = runner.invoke(app, ["manifest", str(root)])

        assert result.exit_code == 0
        assert "Module.psd1" in result.output

    def test_missing_manifest_exits_nonzero(self, tmp_path, make_tree):
        """Test that a missing manifest exits 1 with a message."""
        root = make_tree(tmp_path / "module", ["Module.psm1"])

        result = runner.invoke(app, ["manifest", str(root)])

        assert result.exit_code == 1
        assert "No module manifest" in result.output

    def test_writes_manifest_ci_output(self, tmp_path, make_tree):
        """Test that the manifest path is written as a CI output."""
        root = make_tree(tmp_path / "module", ["Module.psd1"])
        sink = tmp_path / "outputs.txt"

        result = runner.invoke(
            app, ["manifest", str(root), "--name", "Module", "--ci-output", str(sink)]
        )

        assert result.exit_code == 0
        assert sink.read_text() == f"manifest-path={root / 'Module.psd1'}\n"
