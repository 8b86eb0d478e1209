"""Path normalization utilities."""

from collections.abc import Iterable
from pathlib import Path


def normalize_root(root: Path | None) -> Path:
    """Normalize search root path to absolute.

    Args:
        root: Directory to search, or None for the current directory

    Returns:
        Absolute, resolved path (which may not exist)
    """
    if root is None:
        root = Path.cwd()
    return root.expanduser().resolve()


def resolve_test_path(test_path: str | Path, root: Path) -> Path:
    """Resolve an explicit test path, relative paths against root.

    Args:
        test_path: Path supplied by the caller (surrounding whitespace ignored)
        root: Absolute search root

    Returns:
        Absolute, resolved path (which may not exist)
    """
    path = Path(str(test_path).strip()).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def normalize_exclusions(exclude: Iterable[str]) -> tuple[str, ...]:
    """Drop empty exclusions and duplicates, keeping order.

    Exclusions are matched as raw substrings, so surrounding whitespace is
    kept. An empty exclusion would match every path.
    """
    return tuple(dict.fromkeys(pattern for pattern in exclude if pattern))
