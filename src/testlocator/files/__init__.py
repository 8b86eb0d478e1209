"""Filesystem operations for testlocator."""

from testlocator.files.discover import find_test_directories
from testlocator.files.discover import find_test_files
from testlocator.files.matching import is_valid_test_directory_name
from testlocator.files.matching import is_valid_test_file_name
from testlocator.files.walk import is_excluded
from testlocator.files.walk import walk_directories

__all__ = [
    "find_test_directories",
    "find_test_files",
    "is_excluded",
    "is_valid_test_directory_name",
    "is_valid_test_file_name",
    "walk_directories",
]
