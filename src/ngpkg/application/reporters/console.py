"""Console reporter: DiscoveryReport -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from ngpkg.domain.model.candidate import DiscoveryReport
    from ngpkg.domain.model.package_graph import PackageGraph


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_skipped: Show candidates that were skipped, with reasons.
        relative_paths: Render paths relative to the package root.
        width: Console width in characters.
    """

    show_skipped: bool = True
    relative_paths: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: DiscoveryReport) -> str:
        """Format discovery report as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        graph = result.graph
        self._render_header(console, result)
        self._render_entry_points(console, graph)

        if self._config.show_skipped and result.skipped:
            self._render_skipped(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: DiscoveryReport) -> None:
        graph = result.graph
        console.print()
        console.rule(f"[bold]PACKAGE {graph.primary.module_id}[/bold]")
        console.print()
        console.print(f"[bold]Root:[/bold] {graph.root_path}")
        console.print(f"[bold]Dest:[/bold] {graph.dest}")
        console.print(
            f"[bold]Entry points:[/bold] {len(graph.entry_points)}"
            f" (skipped: {len(result.skipped)})",
        )
        console.print()

    def _render_entry_points(self, console: Console, graph: PackageGraph) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Kind")
        table.add_column("Module id", style="cyan")
        table.add_column("Source")
        table.add_column("Destination")
        table.add_column("Entry file", style="dim")

        for entry in graph.entry_points:
            kind = "primary" if entry is graph.primary else "secondary"
            table.add_row(
                kind,
                entry.module_id,
                self._format_path(entry.source_path, graph),
                self._format_path(entry.destination_path, graph),
                entry.entry_file,
            )

        console.print(table)
        console.print()

    def _render_skipped(self, console: Console, result: DiscoveryReport) -> None:
        console.print(f"[bold yellow]SKIPPED[/bold yellow] ({len(result.skipped)})")
        console.print()
        for skipped in result.skipped:
            path = self._format_path(skipped.path, result.graph)
            console.print(f"  {path}: {skipped.reason}", markup=False)
        console.print()

    def _format_path(self, path: Path, graph: PackageGraph) -> str:
        if self._config.relative_paths and path.is_relative_to(graph.root_path):
            relative = path.relative_to(graph.root_path).as_posix()
            return relative if relative != "." else "./"
        return str(path)
