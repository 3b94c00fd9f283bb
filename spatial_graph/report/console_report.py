"""
Text and console rendering of an analysis report.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..graph.constants import MAX_ERROR_ITEMS, MAX_WARNING_ITEMS
from ..validators.validation_result import Severity

CYCLE_METHOD_LINES = [
    "1. Depth-first traversal of the whole graph, restarted from every unvisited vertex",
    "2. Each vertex is unvisited, in progress (on the traversal stack) or done",
    "3. An edge to an in-progress vertex other than the DFS parent is a back edge: a cycle",
]


def _path_lines(path_result, decimals: int) -> List[str]:
    lines = [
        f"  * source vertex: {path_result.source}",
        f"  * target vertex: {path_result.target}",
    ]
    header = f"Shortest path from {path_result.source} to {path_result.target}: "
    if not path_result.found:
        lines.append(header + f"No path found ({path_result.error})")
        return lines
    lines.append(header + f"length = {path_result.distance:.{decimals}f}")
    lines.append("Path: " + path_result.format_path(" -> "))
    return lines


def _diagnostic_lines(diagnostics) -> List[str]:
    lines: List[str] = []
    if diagnostics is None or not diagnostics.has_issues:
        return lines

    summary = diagnostics.get_summary()
    lines.append(f"Errors: {summary['errors']}, Warnings: {summary['warnings']}, Info: {summary['infos']}")
    for title, severity, limit in (
        ("ERRORS", Severity.ERROR, MAX_ERROR_ITEMS),
        ("WARNINGS", Severity.WARNING, MAX_WARNING_ITEMS),
    ):
        for source, entries in diagnostics.by_source(severity).items():
            lines.append(f"{title} ({source}):")
            for i, entry in enumerate(entries[:limit]):
                lines.append(f"  {i + 1}. {entry.message}")
            if len(entries) > limit:
                lines.append(f"  ... and {len(entries) - limit} more")
    return lines


def format_report(report, diagnostics=None, decimals: int = 2) -> str:
    """
    Plain-text rendering of ``report``.

    Args:
        report: AnalysisReport to render
        diagnostics: Optional ValidationResult listed at the end
        decimals: Digits after the decimal point for distances

    Returns:
        Report text, one section per analysis
    """
    lines = ["=== GRAPH ANALYSIS REPORT ==="]
    lines.append(f"Vertices: {report.vertex_count}")
    lines.append(f"Edges: {report.edge_count}")

    lines.append("")
    lines.append("== i. Vertex degree ==")
    for external_id, degree in report.degrees.by_external_id().items():
        lines.append(f"Vertex {external_id}: {degree}")
    lines.append(f"Graph degree: {report.max_degree}")

    lines.append("")
    lines.append("== ii. Connectivity ==")
    if report.is_connected:
        lines.append("The graph is connected")
    else:
        lines.append(f"The graph is not connected ({report.connectivity.component_count} components)")

    lines.append("")
    lines.append("== iii. Cycle detection ==")
    lines.append(f"The graph {'contains' if report.has_cycle else 'does not contain'} a cycle")
    lines.extend(CYCLE_METHOD_LINES)

    if report.path is not None:
        lines.append("")
        lines.append("== iv. Shortest path ==")
        lines.extend(_path_lines(report.path, decimals))

    diagnostic_lines = _diagnostic_lines(diagnostics)
    if diagnostic_lines:
        lines.append("")
        lines.append("== Diagnostics ==")
        lines.extend(diagnostic_lines)

    lines.append("")
    lines.append(f"Analysis time: {report.elapsed_ms:.0f} ms")
    return "\n".join(lines)


def print_report(report, diagnostics=None, console: Optional[Console] = None, decimals: int = 2) -> None:
    """Print ``report`` to a rich console."""
    console = console or Console()

    summary = Text()
    summary.append("Vertices: ", style="bold")
    summary.append(f"{report.vertex_count}\n")
    summary.append("Edges: ", style="bold")
    summary.append(f"{report.edge_count}")
    console.print(Panel(summary, title="Graph analysis report", border_style="bold white", expand=False))

    table = Table(title="i. Vertex degree", show_header=True, header_style="bold white")
    table.add_column("Vertex", style="bright_yellow", justify="right")
    table.add_column("Degree", style="bold cyan", justify="right")
    for external_id, degree in report.degrees.by_external_id().items():
        table.add_row(str(external_id), str(degree))
    console.print(table)
    console.print(f"Graph degree: [bold]{report.max_degree}[/bold]")

    console.print("\n[bold]ii. Connectivity[/bold]")
    if report.is_connected:
        console.print("The graph is [green]connected[/green]")
    else:
        console.print(
            f"The graph is [red]not connected[/red] "
            f"({report.connectivity.component_count} components)"
        )

    console.print("\n[bold]iii. Cycle detection[/bold]")
    verdict = "[yellow]contains[/yellow]" if report.has_cycle else "[green]does not contain[/green]"
    console.print(f"The graph {verdict} a cycle")
    for line in CYCLE_METHOD_LINES:
        console.print(line, style="dim", markup=False)

    if report.path is not None:
        console.print("\n[bold]iv. Shortest path[/bold]")
        for line in _path_lines(report.path, decimals):
            console.print(line, markup=False)

    diagnostic_lines = _diagnostic_lines(diagnostics)
    if diagnostic_lines:
        console.print("\n[bold]Diagnostics[/bold]")
        for line in diagnostic_lines:
            console.print(line, markup=False)

    console.print(f"\nAnalysis time: {report.elapsed_ms:.0f} ms")
