"""Top-level discovery: mode selection, validation and result assembly."""

import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from testlocator.files.discover import find_test_directories
from testlocator.files.discover import find_test_files
from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import ByDirectories
from testlocator.models import ByPath
from testlocator.models import Conventions
from testlocator.models import Diagnostic
from testlocator.models import DiagnosticLevel
from testlocator.models import DirectoryEntry
from testlocator.models import DiscoveryConfig
from testlocator.models import DiscoveryMetadata
from testlocator.models import DiscoveryMode
from testlocator.models import DiscoveryResult
from testlocator.models import FileEntry
from testlocator.models import Validation
from testlocator.operations.paths import normalize_exclusions
from testlocator.operations.paths import normalize_root
from testlocator.operations.paths import resolve_test_path

logger = logging.getLogger(__name__)


class DiscoveryEngine:
    """Runs discovery against a fixed set of naming conventions."""

    def __init__(self, conventions: Conventions = DEFAULT_CONVENTIONS):
        self.conventions = conventions

    def discover(self, config: DiscoveryConfig | None = None) -> DiscoveryResult:
        """Discover test directories and files.

        Args:
            config: Root, depth, exclusions and optional explicit test path.
                A non-blank test_path selects explicit mode; otherwise the
                root is auto-discovered.

        Returns:
            A new DiscoveryResult. Missing paths and convention violations are
            reported through validation flags and diagnostics, never raised.

        Raises:
            TraversalError: If the root exists but cannot be read
        """
        if config is None:
            config = DiscoveryConfig()

        root = normalize_root(config.root)
        max_depth = config.max_depth
        if max_depth is None:
            max_depth = self.conventions.default_max_depth
        exclude_paths = config.exclude_paths
        if exclude_paths is None:
            exclude_paths = self.conventions.default_exclusions
        exclude = normalize_exclusions(exclude_paths)

        diagnostics: list[Diagnostic] = []
        if config.has_test_path:
            mode = DiscoveryMode.EXPLICIT
            test_path = resolve_test_path(config.test_path, root)
            directories, files = self._discover_explicit(test_path, diagnostics)
        else:
            mode = DiscoveryMode.AUTO_DISCOVERY
            directories, files = self._discover_auto(
                root, max_depth, exclude, diagnostics
            )

        validation = Validation(
            has_valid_directories=len(directories) > 0,
            has_valid_files=len(files) > 0,
        )
        metadata = DiscoveryMetadata(
            root=root,
            search_depth=max_depth,
            excluded_paths=exclude,
            valid_directory_names=tuple(sorted(self.conventions.directory_names)),
            valid_file_patterns=self.conventions.file_patterns,
            timestamp=datetime.now(UTC),
        )
        logger.debug(
            "Discovery (%s) found %d directories and %d files",
            mode.value,
            len(directories),
            len(files),
        )

        return DiscoveryResult(
            mode=mode,
            test_directories=tuple(directories),
            test_files=tuple(files),
            validation=validation,
            metadata=metadata,
            diagnostics=tuple(diagnostics),
        )

    def _discover_explicit(
        self, test_path: Path, diagnostics: list[Diagnostic]
    ) -> tuple[list[DirectoryEntry], list[FileEntry]]:
        if not test_path.exists():
            diagnostics.append(
                Diagnostic(
                    level=DiagnosticLevel.WARNING,
                    message=f"Test path does not exist: {test_path}",
                    paths=(test_path,),
                )
            )
            return [], []

        # Explicit paths are trusted; the name is not checked
        directories = [DirectoryEntry(path=test_path, depth=0)]
        scan = find_test_files(
            ByPath(test_path), recursive=True, conventions=self.conventions
        )
        diagnostics.extend(scan.diagnostics)
        if not scan.files:
            diagnostics.append(self._no_files_diagnostic())
        return directories, scan.files

    def _discover_auto(
        self,
        root: Path,
        max_depth: int,
        exclude: tuple[str, ...],
        diagnostics: list[Diagnostic],
    ) -> tuple[list[DirectoryEntry], list[FileEntry]]:
        if not root.exists():
            diagnostics.append(
                Diagnostic(
                    level=DiagnosticLevel.INFO,
                    message=f"Search root does not exist: {root}",
                    paths=(root,),
                )
            )
            return [], []

        directory_scan = find_test_directories(
            root, max_depth, exclude, self.conventions
        )
        diagnostics.extend(directory_scan.diagnostics)
        if not directory_scan.directories:
            names = ", ".join(sorted(self.conventions.directory_names))
            diagnostics.append(
                Diagnostic(
                    level=DiagnosticLevel.INFO,
                    message=(
                        f"No test directories found within depth {max_depth}; "
                        f"expected a directory named one of: {names}"
                    ),
                )
            )
            return [], []

        file_scan = find_test_files(
            ByDirectories(tuple(directory_scan.directories)),
            recursive=True,
            conventions=self.conventions,
        )
        diagnostics.extend(file_scan.diagnostics)
        if not file_scan.files:
            diagnostics.append(self._no_files_diagnostic())
        return directory_scan.directories, file_scan.files

    def _no_files_diagnostic(self) -> Diagnostic:
        patterns = ", ".join(self.conventions.file_patterns)
        return Diagnostic(
            level=DiagnosticLevel.INFO,
            message=f"No test files found; expected files matching: {patterns}",
        )


def discover(
    config: DiscoveryConfig | None = None,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> DiscoveryResult:
    """Discover test directories and files with the given conventions."""
    return DiscoveryEngine(conventions).discover(config)
