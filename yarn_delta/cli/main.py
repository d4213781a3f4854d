"""Main CLI interface for yarn-delta."""

from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..api import package_versions_from_host
from ..core.differ import VersionMapDiffer
from ..core.extractor import LOCAL_WORKSPACE_VERSION, METADATA_KEY, NPM_SEPARATOR, LockfileExtractor
from ..core.models import BoundaryError, PackageVersionMap, ParseError, SelectorGrammarError
from ..output.formatters import ConsoleFormatter, JSONFormatter
from ..utils.logging import get_logger, setup_logging
from ..utils.path_utils import LOCKFILE_NAME, is_snapshot, read_snapshot, read_text, resolve_lockfile

app = typer.Typer(
    name="yarn-delta",
    help="Find which packages changed between two Yarn lockfiles",
    add_completion=False
)

console = Console()
logger = get_logger("CLI")

# Same convention as `git diff --exit-code`
EXIT_CHANGED = 1
EXIT_ERROR = 2
EXIT_INVARIANT = 3


def _load_versions(path: Path) -> PackageVersionMap:
    """Load package versions from a lockfile, a directory or a JSON snapshot.

    Args:
        path: Location given on the command line

    Returns:
        Extracted or deserialized package versions
    """
    path = resolve_lockfile(path)

    if is_snapshot(path):
        logger.debug(f"Reading snapshot {path}")
        return package_versions_from_host(read_snapshot(path), str(path))

    logger.debug(f"Reading lockfile {path}")
    return LockfileExtractor().extract(read_text(path))


def _fail(error: Exception, code: int = EXIT_ERROR) -> None:
    logger.error(str(error))
    ConsoleFormatter(console).format_error(str(error), type(error).__name__)
    raise typer.Exit(code)


def _load_or_fail(path: Path) -> PackageVersionMap:
    """Load package versions, exiting with an error status on failure.

    A key outside the selector grammar exits with its own status so it is
    never mistaken for bad input or for a reported change.
    """
    try:
        return _load_versions(path)
    except SelectorGrammarError as e:
        Console(stderr=True).print_exception()
        _fail(e, EXIT_INVARIANT)
    except (ParseError, BoundaryError, OSError, ValueError) as e:
        _fail(e)


def _save_or_fail(json_formatter: JSONFormatter, results: Dict[str, Any]) -> None:
    try:
        json_formatter.save_results(results)
    except OSError as e:
        _fail(e)


@app.command()
def packages(
    path: Path = typer.Argument(
        Path("."),
        help=f"Path to a {LOCKFILE_NAME} or the directory containing it"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the package versions as JSON"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write a JSON snapshot usable as an input to 'diff'"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    )
) -> None:
    """List every package in a lockfile with its resolved versions."""
    setup_logging(verbose=verbose)

    versions = _load_or_fail(path)

    json_formatter = JSONFormatter(output)
    results = json_formatter.format_packages(versions)

    if output:
        _save_or_fail(json_formatter, results)

    if as_json:
        typer.echo(json_formatter.dumps(results))
    else:
        ConsoleFormatter(console).format_packages(versions, str(path))


@app.command()
def diff(
    before: Path = typer.Argument(
        ...,
        help="Earlier lockfile, directory or JSON snapshot"
    ),
    after: Path = typer.Argument(
        ...,
        help="Later lockfile, directory or JSON snapshot"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the changed packages as JSON"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for JSON results"
    ),
    exit_code: bool = typer.Option(
        False,
        "--exit-code",
        help=f"Exit with status {EXIT_CHANGED} when any package changed"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    )
) -> None:
    """Show the packages whose resolved versions differ between two snapshots."""
    setup_logging(verbose=verbose)

    before_versions = _load_or_fail(before)
    after_versions = _load_or_fail(after)

    differ = VersionMapDiffer()
    result = differ.compare(before_versions, after_versions)

    json_formatter = JSONFormatter(output)
    results = json_formatter.format_changes(result)

    if output:
        _save_or_fail(json_formatter, results)

    if as_json:
        typer.echo(json_formatter.dumps(results))
    else:
        statuses = differ.describe(before_versions, after_versions)
        ConsoleFormatter(console).format_changes(result, statuses)

    if exit_code and result.changed_packages:
        raise typer.Exit(EXIT_CHANGED)


@app.command()
def info() -> None:
    """Show yarn-delta information."""
    console.print(Panel.fit(
        "[bold blue]yarn-delta[/bold blue]\n"
        "Lists the packages resolved in a Yarn Berry lockfile and\n"
        "reports which of them changed between two snapshots",
        title="Information"
    ))

    console.print(f"\n[bold]Lockfile:[/bold] {LOCKFILE_NAME} (Yarn 2+, entries keyed by '<name>{NPM_SEPARATOR}<range>')")
    console.print(f"[bold]Ignored entries:[/bold] {METADATA_KEY}, version {LOCAL_WORKSPACE_VERSION}")


def main() -> None:
    """Main entry point for yarn-delta CLI."""
    app()


if __name__ == "__main__":
    main()
