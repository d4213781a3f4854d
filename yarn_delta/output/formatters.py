"""Output formatters for yarn-delta results."""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.differ import ADDED, CHANGED, REMOVED
from ..core.models import ChangedPackagesResult, PackageVersionMap
from ..utils.logging import get_logger

STATUS_STYLES = {
    ADDED: "green",
    REMOVED: "red",
    CHANGED: "yellow",
}


class ConsoleFormatter:
    """Rich console formatter for yarn-delta output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the console formatter.

        Args:
            console: Rich console instance
        """
        self.console = console or Console()

    def format_packages(self, versions: PackageVersionMap, source: str = "") -> None:
        """Display a package version map as a table.

        Args:
            versions: Extracted package versions
            source: Where the versions were read from, used as table title
        """
        table = Table(title=f"Packages in {source}" if source else "Packages")
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Versions", style="blue")

        for name, package_versions in versions.to_dict().items():
            table.add_row(name, ", ".join(package_versions))

        self.console.print(table)
        self.console.print(f"{len(versions)} packages")

    def format_changes(self, result: ChangedPackagesResult, statuses: Mapping[str, str]) -> None:
        """Display changed packages with their before and after versions.

        Args:
            result: Diff result
            statuses: Package name -> added/removed/changed
        """
        if not result.changed_packages:
            self.console.print(Panel("No package versions changed", style="green"))
            return

        table = Table(title=f"{len(result.changed_packages)} changed packages")
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Status")
        table.add_column("Before", style="dim")
        table.add_column("After", style="blue")

        for name in sorted(result.changed_packages):
            status = statuses.get(name, CHANGED)
            table.add_row(
                name,
                Text(status, style=STATUS_STYLES.get(status, "white")),
                ", ".join(result.versions_before(name)) or "-",
                ", ".join(result.versions_after(name)) or "-",
            )

        self.console.print(table)

    def format_error(self, error: str, details: Optional[str] = None) -> None:
        """Format and display error message.

        Args:
            error: Error message
            details: Optional error details
        """
        content = f"[bold red]Error:[/bold red] {escape(error)}"
        if details:
            content += f"\n\n[dim]{escape(details)}[/dim]"

        self.console.print(Panel(content, style="red"))


class JSONFormatter:
    """JSON formatter for yarn-delta output."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the JSON formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("JSONFormatter")

    def format_packages(self, versions: PackageVersionMap) -> Dict[str, Any]:
        """Format a package version map as JSON.

        Args:
            versions: Extracted package versions

        Returns:
            Package name -> sorted list of versions
        """
        return versions.to_dict()

    def format_changes(self, result: ChangedPackagesResult) -> Dict[str, Any]:
        """Format a diff result as JSON.

        Args:
            result: Diff result

        Returns:
            Document with changedPackages and packageVersions keys
        """
        return result.to_dict()

    def dumps(self, results: Dict[str, Any]) -> str:
        """Serialize results to an indented JSON string.

        Args:
            results: Results dictionary

        Returns:
            JSON text
        """
        return json.dumps(results, indent=2, ensure_ascii=False)

    def save_results(
        self,
        results: Dict[str, Any],
        output_file: Optional[Path] = None
    ) -> None:
        """Save results to JSON file.

        Args:
            results: Results dictionary
            output_file: Output file path (uses instance default if None)
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(self.dumps(results))
                f.write("\n")

            self.logger.info(f"Results saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save results to {file_path}: {e}")
            raise
