"""Command-line interface for testlocator."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from testlocator import __version__
from testlocator.exceptions import AmbiguousManifestError
from testlocator.exceptions import LocatorError
from testlocator.exceptions import ManifestNotFoundError
from testlocator.exceptions import TraversalError
from testlocator.models import DEFAULT_CONVENTIONS
from testlocator.models import DiscoveryConfig
from testlocator.models import OutputFormat
from testlocator.operations import discover
from testlocator.operations import find_manifest
from testlocator.output import ci_outputs
from testlocator.output import print_diagnostics
from testlocator.output import print_discovery_result
from testlocator.output import print_manifest
from testlocator.output import result_to_json
from testlocator.output import write_ci_outputs

app = typer.Typer(help="Discover and validate test directories and files")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"testlocator {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log traversal details")
    ] = False,
) -> None:
    """Discover and validate test directories and files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("discover")
def discover_command(
    root: Annotated[
        Path | None,
        typer.Argument(help="Project root to search (default: current directory)"),
    ] = None,
    max_depth: Annotated[
        int,
        typer.Option("--max-depth", "-d", min=0, help="Deepest directory level"),
    ] = DEFAULT_CONVENTIONS.default_max_depth,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            help="Skip paths containing this text (repeatable; replaces defaults)",
        ),
    ] = None,
    test_path: Annotated[
        str | None,
        typer.Option("--test-path", help="Search only this path for test files"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output format")
    ] = OutputFormat.TEXT,
    ci_output: Annotated[
        Path | None,
        typer.Option(
            "--ci-output",
            envvar="GITHUB_OUTPUT",
            help="Append CI key=value outputs to this file",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit 1 when conventions are not followed"),
    ] = False,
) -> None:
    """Discover test directories and files and check naming conventions."""
    config = DiscoveryConfig(
        root=root,
        max_depth=max_depth,
        exclude_paths=tuple(exclude) if exclude is not None else None,
        test_path=test_path,
    )

    try:
        result = discover(config)
    except TraversalError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except LocatorError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    print_diagnostics(result.diagnostics, root=result.metadata.root)
    if output_format == OutputFormat.JSON:
        typer.echo(result_to_json(result))
    else:
        print_discovery_result(result)

    if ci_output is not None:
        write_ci_outputs(ci_outputs(result), ci_output)

    if strict and not result.conventions_followed:
        raise typer.Exit(1)


@app.command("manifest")
def manifest_command(
    root: Annotated[
        Path | None,
        typer.Argument(help="Project root to search (default: current directory)"),
    ] = None,
    name: Annotated[
        str | None, typer.Option("--name", help="Module name (<name>.psd1)")
    ] = None,
    ci_output: Annotated[
        Path | None,
        typer.Option(
            "--ci-output",
            envvar="GITHUB_OUTPUT",
            help="Append manifest-path=<path> to this file",
        ),
    ] = None,
) -> None:
    """Locate the module manifest in a project."""
    try:
        info = find_manifest(root, module_name=name)
    except (ManifestNotFoundError, AmbiguousManifestError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except LocatorError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    print_manifest(info)
    if ci_output is not None:
        write_ci_outputs({"manifest-path": str(info.path)}, ci_output)


def main() -> None:
    """Main entry point for the testlocator CLI."""
    app()


if __name__ == "__main__":
    main()
