"""Shared fixtures for testlocator tests."""

import pytest

PROJECT_FILES = [
    "Tests/Feature.Tests.ps1",
    "Tests/Component.Test.ps1",
    "Tests/NotATest.ps1",
    "src/Test/Module.Tests.ps1",
    "UnitTests/Unit.Tests.ps1",
    "bin/Tests/Excluded.Tests.ps1",
]


@pytest.fixture
def make_tree():
    """Return a helper that creates empty files under a root directory."""

    def _make_tree(root, rel_paths):
        root.mkdir(parents=True, exist_ok=True)
        for rel_path in rel_paths:
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("")
        return root.resolve()

    return _make_tree


@pytest.fixture
def project(tmp_path, make_tree):
    """A project tree with valid, misnamed and excluded test artifacts."""
    return make_tree(tmp_path / "project", PROJECT_FILES)
