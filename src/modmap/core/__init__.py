"""
modmap Core Module.

Fundamental building blocks shared by the parser, layout and viewport:
    - SourceFile, Position, PlacedNode, ScreenBox: Data types
    - WorkspaceGraph: In-memory undirected import graph
    - Ok, Err, Result: Explicit error values
    - ProjectSettings: Parse modmap.toml overrides
"""

from .graph import WorkspaceGraph
from .manifest import ManifestError, ProjectSettings
from .result import Err, Ok, Result, map_ok
from .types import (
    DiagnosticKind,
    NodeId,
    ParseDiagnostic,
    PlacedNode,
    Position,
    ScreenBox,
    SourceFile,
    SourceType,
)

__all__ = [
    "DiagnosticKind",
    "Err",
    "ManifestError",
    "NodeId",
    "Ok",
    "ParseDiagnostic",
    "PlacedNode",
    "Position",
    "ProjectSettings",
    "Result",
    "ScreenBox",
    "SourceFile",
    "SourceType",
    "WorkspaceGraph",
    "map_ok",
]
