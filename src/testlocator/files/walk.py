"""Depth-bounded directory traversal."""

import logging
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from testlocator.exceptions import TraversalError
from testlocator.models import DirectoryEntry

logger = logging.getLogger(__name__)


def is_excluded(path: Path, exclude: Iterable[str]) -> bool:
    """Check if any exclusion appears anywhere in the path text.

    Plain substring containment: "bin" also excludes "cabinet".
    """
    text = str(path)
    return any(pattern in text for pattern in exclude)


def walk_directories(
    root: Path, max_depth: int, exclude: Iterable[str] = ()
) -> Iterator[DirectoryEntry]:
    """Yield every directory below root, down to max_depth.

    Args:
        root: Directory to start from. The root itself is never yielded.
        max_depth: Deepest level to yield (immediate children are depth 1)
        exclude: Substrings; directories whose absolute path contains any of
            them are skipped along with their subtrees

    Yields:
        DirectoryEntry for each directory, siblings in sorted order so repeated
        walks over an unchanged tree produce the same sequence.

    Raises:
        TraversalError: If root exists but cannot be listed
    """
    if not root.is_dir():
        logger.debug("Search root does not exist: %s", root)
        return

    root = root.absolute()
    exclude = [pattern for pattern in exclude if pattern]

    for dirpath, dirnames, _ in root.walk(on_error=_skip_unreadable(root)):
        child_depth = len(dirpath.relative_to(root).parts) + 1
        if child_depth > max_depth:
            dirnames.clear()
            continue

        kept = []
        for name in sorted(dirnames):
            child = dirpath / name
            if is_excluded(child, exclude):
                logger.debug("Excluded %s", child)
                continue
            kept.append(name)
            yield DirectoryEntry(path=child, depth=child_depth)

        # Only descend where grandchildren can still be within max_depth
        dirnames[:] = kept if child_depth < max_depth else []


def _skip_unreadable(root: Path) -> Callable[[OSError], None]:
    """Build an on_error handler for Path.walk.

    Unreadable subdirectories are logged and skipped; an unreadable root is
    fatal.
    """

    def on_error(error: OSError) -> None:
        if error.filename is not None and Path(error.filename) == root:
            raise TraversalError(root, error.strerror or str(error)) from error
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

    return on_error
