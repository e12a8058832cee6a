"""
Parsing package: discovery, import extraction, resolution and graph assembly.
"""

from .engine import BuildReport, BuildStats, GraphBuilder, ScanError, build_workspace_graph
from .javascript import ImportExtractor
from .resolver import PathResolver, canonicalize
from .scanner import ScanConfig, SourceScanner

__all__ = [
    "BuildReport",
    "BuildStats",
    "GraphBuilder",
    "ImportExtractor",
    "PathResolver",
    "ScanConfig",
    "ScanError",
    "SourceScanner",
    "build_workspace_graph",
    "canonicalize",
]
