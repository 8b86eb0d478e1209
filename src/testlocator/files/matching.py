"""Naming-convention predicates."""

import os

from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import Conventions


def is_valid_test_directory_name(
    name: str, conventions: Conventions = DEFAULT_CONVENTIONS
) -> bool:
    """Check if a directory name is exactly one of the test directory names.

    Matching is case-sensitive and never partial: "UnitTests" and "tests"
    are both rejected.
    """
    return name in conventions.directory_names


def is_valid_test_file_name(
    name: str, conventions: Conventions = DEFAULT_CONVENTIONS
) -> bool:
    """Check if a file name ends with one of the test file suffixes.

    Case-sensitivity follows the host filesystem (insensitive on Windows).
    """
    normalized = os.path.normcase(name)
    return any(
        normalized.endswith(os.path.normcase(suffix))
        for suffix in conventions.file_suffixes
    )
