"""Output formatting for discovery results."""

import json
from collections.abc import Iterable
from collections.abc import Mapping
from pathlib import Path

import typer

from testlocator.models import Diagnostic
from testlocator.models import DiagnosticLevel
from testlocator.models import DiscoveryMode
from testlocator.models import DiscoveryResult
from testlocator.models import ManifestInfo


def print_diagnostics(
    diagnostics: Iterable[Diagnostic], root: Path | None = None
) -> None:
    """Print diagnostics to stderr.

    Args:
        diagnostics: Diagnostics to print, in order
        root: If given, paths under root are shown relative to it
    """
    for diagnostic in diagnostics:
        if diagnostic.level == DiagnosticLevel.WARNING:
            typer.secho(f"! {diagnostic.message}", fg=typer.colors.YELLOW, err=True)
        else:
            typer.secho(
                f"  {diagnostic.message}", fg=typer.colors.BRIGHT_BLACK, err=True
            )
        for path in diagnostic.paths:
            typer.secho(f"    {_display_path(path, root)}", err=True)


def print_discovery_result(result: DiscoveryResult) -> None:
    """Print a discovery result to stdout.

    Args:
        result: DiscoveryResult to print
    """
    root = result.metadata.root

    if result.mode == DiscoveryMode.EXPLICIT:
        typer.secho("Mode: explicit test path", fg=typer.colors.BRIGHT_BLACK)
    else:
        typer.secho(
            f"Mode: auto-discovery (depth {result.metadata.search_depth})",
            fg=typer.colors.BRIGHT_BLACK,
        )

    if result.test_directories:
        typer.secho("Test directories:", fg=typer.colors.BRIGHT_BLACK)
        for entry in result.test_directories:
            typer.secho(
                f"  {_display_path(entry.path, root)}", fg=typer.colors.BRIGHT_BLACK
            )

    if result.test_files:
        typer.secho("Test files:", fg=typer.colors.BRIGHT_BLACK)
        for entry in result.test_files:
            typer.secho(
                f"  {_display_path(entry.path, root)}", fg=typer.colors.BRIGHT_BLACK
            )

    # Summary line
    num_dirs = result.test_directories_count
    num_files = result.test_files_count
    summary = (
        f"{num_dirs} director{'ies' if num_dirs != 1 else 'y'}, "
        f"{num_files} file{'s' if num_files != 1 else ''}"
    )
    if result.conventions_followed:
        typer.secho(
            f"✓ Conventions followed ({summary})", fg=typer.colors.GREEN, bold=True
        )
    else:
        typer.secho(
            f"✗ Conventions not followed ({summary})",
            fg=typer.colors.YELLOW,
            bold=True,
        )


def print_manifest(info: ManifestInfo) -> None:
    """Print a located manifest to stdout."""
    typer.secho(f"✓ Module manifest: {info.path}", fg=typer.colors.GREEN, bold=True)


def result_to_json(result: DiscoveryResult) -> str:
    """Serialize a discovery result as an indented JSON document."""
    return json.dumps(result.to_dict(), indent=2)


def ci_outputs(result: DiscoveryResult) -> dict[str, str]:
    """Build the CI key/value outputs for a discovery result.

    Returns:
        Mapping of output name to value; booleans are lowercase and discovered
        paths are joined with semicolons.
    """
    return {
        "test-path-exists": _ci_bool(result.validation.has_valid_directories),
        "test-paths": ";".join(result.discovered_paths),
        "test-file-count": str(result.test_files_count),
        "test-directory-count": str(result.test_directories_count),
        "conventions-followed": _ci_bool(result.conventions_followed),
    }


def write_ci_outputs(outputs: Mapping[str, str], sink: Path) -> None:
    """Append key=value lines to a CI output file (e.g. $GITHUB_OUTPUT).

    Args:
        outputs: Output names and values
        sink: File to append to (created if missing)
    """
    with sink.open("a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(f"{key}={value}\n")


def _ci_bool(value: bool) -> str:
    return "true" if value else "false"


def _display_path(path: Path, root: Path | None) -> str:
    """Format path for display, relative to root when it is inside it.

    Args:
        path: Path to format
        root: Search root, or None to always show the full path

    Returns:
        String representation relative to root if applicable
    """
    if root is None:
        return str(path)
    try:
        rel_path = path.relative_to(root)
    except ValueError:
        # Not under root, return as-is
        return str(path)
    return str(rel_path) if rel_path.parts else "."
