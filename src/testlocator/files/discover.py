"""Test directory and test file discovery."""

import logging
from collections.abc import Iterable
from pathlib import Path

from testlocator.files.matching import is_valid_test_directory_name
from testlocator.files.matching import is_valid_test_file_name
from testlocator.files.walk import walk_directories
from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import Conventions
from testlocator.models import Diagnostic
from testlocator.models import DiagnosticLevel
from testlocator.models import DirectoryScan
from testlocator.models import FileEntry
from testlocator.models import FileScan
from testlocator.models import SearchSource

logger = logging.getLogger(__name__)


def find_test_directories(
    root: Path,
    max_depth: int,
    exclude: Iterable[str] = (),
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> DirectoryScan:
    """Find directories named after the test directory convention.

    Args:
        root: Directory to search below
        max_depth: Deepest level to consider (immediate children are depth 1)
        exclude: Path substrings to skip
        conventions: Naming conventions to match against

    Returns:
        DirectoryScan with matches in traversal order. More than one match is
        allowed but adds a warning diagnostic listing all of them.
    """
    scan = DirectoryScan()
    for entry in walk_directories(root, max_depth, exclude):
        if is_valid_test_directory_name(entry.path.name, conventions):
            scan.directories.append(entry)

    if len(scan.directories) > 1:
        scan.diagnostics.append(
            Diagnostic(
                level=DiagnosticLevel.WARNING,
                message=(
                    f"Found {len(scan.directories)} test directories; "
                    "a single test directory is recommended"
                ),
                paths=tuple(entry.path for entry in scan.directories),
            )
        )

    logger.debug("Found %d test directories under %s", len(scan.directories), root)
    return scan


def find_test_files(
    source: SearchSource,
    recursive: bool = True,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> FileScan:
    """Find test files inside the search roots of source.

    Args:
        source: Discovered directories or a single explicit path
        recursive: Search subdirectories of each root
        conventions: Naming conventions to match against

    Returns:
        FileScan with files sorted by path, each listed once even when several
        roots, patterns or symlinks reach the same file. Entries keep the
        matched path, so they always lie under a search root. Missing roots are
        skipped with a warning diagnostic.
    """
    scan = FileScan()
    found: dict[Path, Path] = {}

    for search_root in source.search_roots():
        if not search_root.exists():
            logger.debug("Skipping missing search root %s", search_root)
            scan.diagnostics.append(
                Diagnostic(
                    level=DiagnosticLevel.WARNING,
                    message=f"Search path does not exist: {search_root}",
                    paths=(search_root,),
                )
            )
            continue

        if search_root.is_file():
            if is_valid_test_file_name(search_root.name, conventions):
                _keep_match(found, search_root.absolute())
            continue

        for pattern in conventions.file_patterns:
            if recursive:
                matches = search_root.rglob(pattern)
            else:
                matches = search_root.glob(pattern)
            for match in matches:
                # Glob engines can be looser than the suffix rule; the name
                # check is authoritative
                if match.is_file() and is_valid_test_file_name(match.name, conventions):
                    _keep_match(found, match.absolute())

    scan.files = [FileEntry(path=path) for path in sorted(found.values())]
    logger.debug("Found %d test files", len(scan.files))
    return scan


def _keep_match(found: dict[Path, Path], match: Path) -> None:
    """Record match under its canonical path.

    When several matches share a canonical path, the file itself wins over
    links to it, then the lowest path.
    """
    canonical = match.resolve()
    current = found.get(canonical)
    if current is None or _rank(match, canonical) < _rank(current, canonical):
        found[canonical] = match


def _rank(path: Path, canonical: Path) -> tuple[bool, Path]:
    return (path != canonical, path)
