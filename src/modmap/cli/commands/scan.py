"""
Scan Command - Parse a project and summarize its import graph.
"""

import sys
from pathlib import Path
from typing import List, Optional

import click
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ...core.graph import WorkspaceGraph
from ...parsing.engine import GraphBuilder
from ...parsing.scanner import ScanConfig
from ..utils import configure_logging, echo_error, echo_success, echo_warning, load_settings

console = Console()


# --- API Models ---
class DiagnosticEntry(BaseModel):
    file_path: str
    kind: str
    message: str
    line: Optional[int] = None


class ConnectedFile(BaseModel):
    name: str
    path: str
    degree: int


class ScanSummary(BaseModel):
    """
    Structured response for the scan command.
    """
    root: str
    total_files: int
    files_parsed: int
    files_failed: int
    nodes_found: int
    edges_found: int
    specifiers_found: int
    specifiers_resolved: int
    duration_sec: float
    most_connected: List[ConnectedFile] = []
    diagnostics: List[DiagnosticEntry] = []


def _most_connected(graph: WorkspaceGraph, limit: int) -> List[ConnectedFile]:
    ranked = sorted(
        ((graph.degree(idx), idx, file) for idx, file in graph.iter_files()),
        key=lambda item: (-item[0], item[1]),
    )
    return [
        ConnectedFile(name=file.name, path=file.path, degree=degree)
        for degree, _, file in ranked[:limit]
        if degree > 0
    ]


def _print_summary(summary: ScanSummary) -> None:
    console.print(f"📦 [bold]{summary.root}[/bold]")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Files discovered", str(summary.total_files))
    table.add_row("Files parsed", str(summary.files_parsed))
    table.add_row("Files with errors", str(summary.files_failed))
    table.add_row("Import specifiers", f"{summary.specifiers_resolved}/{summary.specifiers_found} resolved")
    table.add_row("Graph", f"{summary.nodes_found} files, {summary.edges_found} imports")
    console.print(table)

    if summary.most_connected:
        top = Table(title="Most connected files")
        top.add_column("File", style="cyan")
        top.add_column("Degree", justify="right")
        for entry in summary.most_connected:
            top.add_row(entry.name, str(entry.degree))
        console.print(top)

    for diagnostic in summary.diagnostics:
        where = f"{diagnostic.file_path}:{diagnostic.line}" if diagnostic.line else diagnostic.file_path
        echo_warning(f"{where}: {diagnostic.message}")


@click.command()
@click.argument("directory", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--top", default=10, show_default=True, help="Number of most connected files to list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def scan(directory: str, top: int, as_json: bool, verbose: bool):
    """
    Scan DIRECTORY and build its import graph.

    Reports how many files and imports were found, which files are the
    most connected, and which files could not be parsed.
    """
    configure_logging(verbose)
    root = Path(directory).absolute()

    settings = load_settings(root)
    if settings is None:
        sys.exit(1)

    result = GraphBuilder().build(ScanConfig.from_settings(root, settings))
    if result.is_err():
        echo_error(result.error.message)
        sys.exit(1)

    report = result.unwrap()
    graph = report.graph
    summary = ScanSummary(
        root=str(root),
        total_files=report.stats.files_discovered,
        files_parsed=report.stats.files_parsed,
        files_failed=report.stats.files_failed,
        nodes_found=graph.node_count,
        edges_found=graph.edge_count,
        specifiers_found=report.stats.specifiers_found,
        specifiers_resolved=report.stats.specifiers_resolved,
        duration_sec=round(report.stats.build_time_ms / 1000, 3),
        most_connected=_most_connected(graph, top),
        diagnostics=[
            DiagnosticEntry(
                file_path=d.file_path, kind=d.kind.value, message=d.message, line=d.line
            )
            for d in report.diagnostics
        ],
    )

    if as_json:
        click.echo(summary.model_dump_json(indent=2))
        return

    _print_summary(summary)
    if graph.node_count == 0:
        echo_warning("No JS/TS source files found.")
    else:
        echo_success(f"Scan complete in {summary.duration_sec}s")
