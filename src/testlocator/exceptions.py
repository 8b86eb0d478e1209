"""Custom exceptions for testlocator."""

from collections.abc import Sequence
from pathlib import Path


class LocatorError(Exception):
    """Base exception for testlocator."""


class TraversalError(LocatorError):
    """The search root exists but could not be read."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        super().__init__(f"Cannot read search root {root}: {reason}")


class ManifestNotFoundError(LocatorError):
    """No module manifest found under the search root."""


class AmbiguousManifestError(LocatorError):
    """More than one module manifest qualifies."""

    def __init__(self, candidates: Sequence[Path]):
        self.candidates = candidates
        candidate_paths = ", ".join(str(c) for c in candidates[:3])
        if len(candidates) > 3:
            candidate_paths += f", ... ({len(candidates)} total)"
        super().__init__(f"Multiple module manifests found: {candidate_paths}")
