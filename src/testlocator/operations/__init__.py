"""High-level operations for testlocator."""

from testlocator.operations.discover import DiscoveryEngine
from testlocator.operations.discover import discover
from testlocator.operations.manifest import find_manifest
from testlocator.operations.paths import normalize_exclusions
from testlocator.operations.paths import normalize_root
from testlocator.operations.paths import resolve_test_path

__all__ = [
    "DiscoveryEngine",
    "discover",
    "find_manifest",
    "normalize_exclusions",
    "normalize_root",
    "resolve_test_path",
]
