"""
Core type definitions for modmap.

SourceFile is the node payload stored in the workspace graph. The layout
and viewport types are small frozen dataclasses because they are created
in bulk on every redraw.
"""

import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

# Stable integer handle of a node in a WorkspaceGraph
NodeId = int


class SourceType(StrEnum):
    """Syntax flavour of a source file, derived from its extension."""
    TS = "ts"
    TSX = "tsx"
    JS = "js"
    JSX = "jsx"
    MJS = "mjs"
    CJS = "cjs"
    SCRIPT = "script"

    @classmethod
    def from_path(cls, path: str | Path) -> "SourceType":
        ext = Path(path).suffix.lstrip(".")
        try:
            return cls(ext)
        except ValueError:
            return cls.SCRIPT

    @property
    def grammar(self) -> str:
        """Name of the tree-sitter grammar that parses this flavour."""
        if self is SourceType.TS:
            return "typescript"
        if self is SourceType.TSX:
            return "tsx"
        return "javascript"


class SourceFile(BaseModel):
    """
    A discovered source file.

    Identity is the canonical absolute path; ``name`` is the basename
    shown on the canvas.
    """
    model_config = ConfigDict(frozen=True)

    path: str
    name: str

    @classmethod
    def from_path(cls, canonical_path: str) -> "SourceFile":
        return cls(path=canonical_path, name=os.path.basename(canonical_path))


class DiagnosticKind(StrEnum):
    SYNTAX = "syntax"
    IO = "io"


@dataclass(frozen=True)
class ParseDiagnostic:
    """A non-fatal problem found while reading or parsing one file."""
    file_path: str
    message: str
    kind: DiagnosticKind = DiagnosticKind.SYNTAX
    line: Optional[int] = None

    def __str__(self) -> str:
        location = f"{self.file_path}:{self.line}" if self.line else self.file_path
        return f"{location}: {self.message}"


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def distance(self, other: "Position") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


@dataclass(frozen=True)
class PlacedNode:
    """
    A laid-out node, pre-joined with the positions of its neighbours.

    ``neighbor_positions`` holds one entry per incident edge, so duplicate
    imports show up twice and a self-import points back at the node.
    """
    node_id: NodeId
    file: SourceFile
    position: Position
    neighbor_positions: List[Position] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.node_id,
            "name": self.file.name,
            "path": self.file.path,
            "x": self.position.x,
            "y": self.position.y,
            "neighbors": [[p.x, p.y] for p in self.neighbor_positions],
        }


@dataclass(frozen=True)
class ScreenBox:
    """Axis-aligned hit box of one node in screen space."""
    node_id: NodeId
    path: str
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom
