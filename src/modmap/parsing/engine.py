"""
Graph Builder for modmap.

Orchestrates discovery, import extraction and path resolution into a
WorkspaceGraph. Uses the Result type for explicit error propagation:
only an unusable root directory is an Err, every per-file problem is
collected as a diagnostic and the build carries on.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Callable, Dict, List

from ..core.graph import WorkspaceGraph
from ..core.result import Err, Ok, Result
from ..core.types import DiagnosticKind, NodeId, ParseDiagnostic, SourceFile, SourceType
from .javascript.parser import ImportExtractor
from .resolver import PathResolver, canonicalize
from .scanner import ScanConfig, SourceScanner

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    files_discovered: int = 0
    files_parsed: int = 0
    files_failed: int = 0
    specifiers_found: int = 0
    specifiers_resolved: int = 0
    edges_added: int = 0
    build_time_ms: float = 0.0


@dataclass
class ScanError:
    """Structured error for build operations."""
    message: str
    path: str | None = None


@dataclass
class BuildReport:
    graph: WorkspaceGraph
    stats: BuildStats = field(default_factory=BuildStats)
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)


class GraphBuilder:
    """
    Two-pass workspace graph construction.

    Pass 1 adds one node per canonical file path; pass 2 parses each file
    and adds an edge for every specifier that resolves to a pass-1 node.
    """

    def __init__(
        self,
        extractor: ImportExtractor | None = None,
        resolver: PathResolver | None = None,
    ):
        self.extractor = extractor or ImportExtractor()
        self.resolver = resolver or PathResolver()
        self._logger = logging.getLogger(f"{__name__}.GraphBuilder")

    def build(
        self,
        scan_config: ScanConfig,
        progress_callback: Callable[[Path, int, int], None] | None = None,
    ) -> Result[BuildReport, ScanError]:
        """
        Scan scan_config.root_dir and build its import graph.

        Returns Ok(BuildReport) or Err(ScanError).
        """
        root = scan_config.root_dir
        if not root.is_dir():
            return Err(ScanError(f"Not a directory: {root}", path=str(root)))

        start_time = time.perf_counter()
        files = list(SourceScanner(scan_config).discover())
        report = BuildReport(graph=WorkspaceGraph())
        report.stats.files_discovered = len(files)

        # Pass 1: nodes
        file_to_node: Dict[str, NodeId] = {}
        canonical_paths: List[str] = []
        for file_path in files:
            canonical = canonicalize(file_path)
            canonical_paths.append(canonical)
            file_to_node[canonical] = report.graph.add_file(SourceFile.from_path(canonical))

        # Pass 2: edges
        total = len(files)
        for i, (file_path, canonical) in enumerate(zip(files, canonical_paths)):
            if progress_callback:
                progress_callback(file_path, i + 1, total)
            self._add_imports(report, file_path, canonical, file_to_node)

        report.stats.build_time_ms = (time.perf_counter() - start_time) * 1000
        self._logger.info(
            f"Built graph for {root}: {report.graph.node_count} files, "
            f"{report.graph.edge_count} imports, {len(report.diagnostics)} diagnostics"
        )
        return Ok(report)

    def _add_imports(
        self,
        report: BuildReport,
        file_path: Path,
        canonical: str,
        file_to_node: Dict[str, NodeId],
    ) -> None:
        try:
            content = file_path.read_bytes()
        except OSError as e:
            self._logger.warning(f"Failed to read {file_path}: {e}")
            report.diagnostics.append(
                ParseDiagnostic(file_path=canonical, message=str(e), kind=DiagnosticKind.IO)
            )
            report.stats.files_failed += 1
            return

        result = self.extractor.extract(content, SourceType.from_path(file_path), canonical)
        if result.is_err():
            report.diagnostics.append(result.error)
            report.stats.files_failed += 1
            return

        report.stats.files_parsed += 1
        specifiers = result.unwrap()
        report.stats.specifiers_found += len(specifiers)

        current = file_to_node[canonical]
        importer_dir = PurePath(canonical).parent
        for specifier in specifiers:
            target = self.resolver.resolve(specifier, importer_dir)
            if target is None:
                continue
            report.stats.specifiers_resolved += 1

            target_node = file_to_node.get(target)
            if target_node is None:
                self._logger.debug(f"{specifier} from {canonical} resolves outside the scan: {target}")
                continue

            report.graph.add_import(current, target_node)
            report.stats.edges_added += 1


def build_workspace_graph(root_dir: str | Path) -> Result[BuildReport, ScanError]:
    """Build the import graph of root_dir with default settings."""
    return GraphBuilder().build(ScanConfig(root_dir=Path(root_dir)))
