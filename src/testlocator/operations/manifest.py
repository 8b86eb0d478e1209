"""Module manifest lookup."""

import os
from collections.abc import Iterable
from pathlib import Path

from testlocator.exceptions import AmbiguousManifestError
from testlocator.exceptions import ManifestNotFoundError
from testlocator.files.walk import walk_directories
from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import ManifestInfo
from testlocator.operations.paths import normalize_exclusions
from testlocator.operations.paths import normalize_root

MANIFEST_SUFFIX = ".psd1"
DEFAULT_MANIFEST_DEPTH = 2


def find_manifest(
    root: Path | None = None,
    module_name: str | None = None,
    max_depth: int = DEFAULT_MANIFEST_DEPTH,
    exclude: Iterable[str] = DEFAULT_CONVENTIONS.default_exclusions,
) -> ManifestInfo:
    """Locate the module manifest in a project tree.

    Looks in root and in every directory down to max_depth, skipping excluded
    paths. Manifest contents are never read.

    Args:
        root: Project root (default: current directory)
        module_name: If given, only <module_name>.psd1 qualifies
        max_depth: Deepest directory level to look in
        exclude: Path substrings to skip

    Returns:
        ManifestInfo for the single qualifying manifest

    Raises:
        ManifestNotFoundError: If root is missing or no manifest qualifies
        AmbiguousManifestError: If more than one manifest qualifies
        TraversalError: If root exists but cannot be read
    """
    root = normalize_root(root)
    if not root.is_dir():
        raise ManifestNotFoundError(f"Search root does not exist: {root}")

    search_dirs = [root]
    search_dirs.extend(
        entry.path
        for entry in walk_directories(root, max_depth, normalize_exclusions(exclude))
    )
    candidates = sorted(
        path
        for directory in search_dirs
        for path in directory.glob(f"*{MANIFEST_SUFFIX}")
        if path.is_file()
    )

    if module_name:
        expected = os.path.normcase(f"{module_name}{MANIFEST_SUFFIX}")
        qualifying = [p for p in candidates if os.path.normcase(p.name) == expected]
    else:
        qualifying = candidates

    if not qualifying:
        wanted = f"{module_name}{MANIFEST_SUFFIX}" if module_name else "any manifest"
        raise ManifestNotFoundError(f"No module manifest ({wanted}) under {root}")
    if len(qualifying) > 1:
        raise AmbiguousManifestError(qualifying)

    return ManifestInfo(root=root, path=qualifying[0], candidates=tuple(candidates))
