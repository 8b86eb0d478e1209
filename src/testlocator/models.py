"""Data models for testlocator."""

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Conventions:
    """Fixed naming conventions and defaults used during discovery."""

    directory_names: frozenset[str] = frozenset({"Test", "Tests"})
    file_suffixes: tuple[str, ...] = (".Test.ps1", ".Tests.ps1")
    default_max_depth: int = 5
    default_exclusions: tuple[str, ...] = (".git", "node_modules", "bin", "obj")

    @property
    def file_patterns(self) -> tuple[str, ...]:
        """Glob patterns derived from the file suffixes."""
        return tuple(f"*{suffix}" for suffix in self.file_suffixes)


DEFAULT_CONVENTIONS = Conventions()


class DiscoveryMode(str, Enum):
    """How the search roots were chosen."""

    EXPLICIT = "explicit"
    AUTO_DISCOVERY = "auto"


class DiagnosticLevel(str, Enum):
    """Severity of an advisory diagnostic."""

    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Advisory event produced during discovery, rendered by the output layer."""

    level: DiagnosticLevel
    message: str
    paths: tuple[Path, ...] = ()

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "level": self.level.value,
            "message": self.message,
            "paths": [str(p) for p in self.paths],
        }


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory found while walking the tree."""

    path: Path  # Absolute
    depth: int  # Segments below the walk root (immediate children are 1)


@dataclass(frozen=True, order=True)
class FileEntry:
    """A test file, identified by its canonical absolute path."""

    path: Path


@dataclass(frozen=True)
class ByDirectories:
    """Search inside a set of already discovered directories."""

    directories: tuple[DirectoryEntry, ...]

    def search_roots(self) -> list[Path]:
        return [entry.path for entry in self.directories]


@dataclass(frozen=True)
class ByPath:
    """Search inside one explicitly supplied path."""

    path: Path

    def search_roots(self) -> list[Path]:
        return [self.path]


SearchSource = ByDirectories | ByPath


@dataclass
class DirectoryScan:
    """Outcome of a test directory search."""

    directories: list[DirectoryEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class FileScan:
    """Outcome of a test file search."""

    files: list[FileEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass(frozen=True)
class DiscoveryConfig:
    """Per-call discovery settings.

    Unset values fall back to the engine's Conventions defaults, and a missing
    root falls back to the current working directory. A non-blank test_path
    switches discovery to explicit mode.
    """

    root: Path | None = None
    max_depth: int | None = None
    exclude_paths: tuple[str, ...] | None = None
    test_path: str | Path | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @property
    def has_test_path(self) -> bool:
        return self.test_path is not None and str(self.test_path).strip() != ""


@dataclass(frozen=True)
class Validation:
    """Validation flags derived from a discovery run."""

    has_valid_directories: bool
    has_valid_files: bool

    @property
    def conventions_followed(self) -> bool:
        return self.has_valid_directories and self.has_valid_files

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "hasValidDirectories": self.has_valid_directories,
            "hasValidFiles": self.has_valid_files,
            "conventionsFollowed": self.conventions_followed,
        }


@dataclass(frozen=True)
class DiscoveryMetadata:
    """Settings and conventions a discovery run used."""

    root: Path
    search_depth: int
    excluded_paths: tuple[str, ...]
    valid_directory_names: tuple[str, ...]
    valid_file_patterns: tuple[str, ...]
    timestamp: datetime  # UTC

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "root": str(self.root),
            "searchDepth": self.search_depth,
            "excludedPaths": list(self.excluded_paths),
            "validDirectoryNames": list(self.valid_directory_names),
            "validFilePatterns": list(self.valid_file_patterns),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class DiscoveryResult:
    """Everything a single discovery run found."""

    mode: DiscoveryMode
    test_directories: tuple[DirectoryEntry, ...]  # Discovery order
    test_files: tuple[FileEntry, ...]  # Sorted by path, unique
    validation: Validation
    metadata: DiscoveryMetadata
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def discovered_paths(self) -> list[str]:
        return [str(entry.path) for entry in self.test_directories]

    @property
    def test_directories_count(self) -> int:
        return len(self.test_directories)

    @property
    def test_files_count(self) -> int:
        return len(self.test_files)

    @property
    def conventions_followed(self) -> bool:
        return self.validation.conventions_followed

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "mode": self.mode.value,
            "testDirectories": [
                {"path": str(d.path), "depth": d.depth} for d in self.test_directories
            ],
            "testFiles": [str(f.path) for f in self.test_files],
            "discoveredPaths": self.discovered_paths,
            "testDirectoriesCount": self.test_directories_count,
            "testFilesCount": self.test_files_count,
            "validation": self.validation.to_dict(),
            "metadata": self.metadata.to_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True)
class ManifestInfo:
    """A located module manifest."""

    root: Path
    path: Path
    candidates: tuple[Path, ...]  # Every manifest seen, qualifying or not


class OutputFormat(str, Enum):
    """How the CLI renders a discovery result."""

    TEXT = "text"
    JSON = "json"
