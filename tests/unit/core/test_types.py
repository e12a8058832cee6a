"""
Unit tests for core types.
"""

import pytest
from pydantic import ValidationError

from modmap.core.types import (
    DiagnosticKind,
    ParseDiagnostic,
    PlacedNode,
    Position,
    ScreenBox,
    SourceFile,
    SourceType,
)


class TestSourceType:

    @pytest.mark.parametrize(
        "path,expected,grammar",
        [
            ("a.ts", SourceType.TS, "typescript"),
            ("a.d.ts", SourceType.TS, "typescript"),
            ("a.tsx", SourceType.TSX, "tsx"),
            ("a.js", SourceType.JS, "javascript"),
            ("a.jsx", SourceType.JSX, "javascript"),
            ("a.mjs", SourceType.MJS, "javascript"),
            ("a.cjs", SourceType.CJS, "javascript"),
            ("Makefile", SourceType.SCRIPT, "javascript"),
        ],
    )
    def test_from_path(self, path, expected, grammar):
        source_type = SourceType.from_path(path)
        assert source_type is expected
        assert source_type.grammar == grammar


class TestSourceFile:

    def test_name_is_basename(self):
        file = SourceFile.from_path("/project/src/app.tsx")
        assert file.name == "app.tsx"
        assert file.path == "/project/src/app.tsx"

    def test_frozen(self):
        file = SourceFile.from_path("/a.ts")
        with pytest.raises(ValidationError):
            file.path = "/b.ts"

    def test_equality_by_value(self):
        assert SourceFile.from_path("/a.ts") == SourceFile.from_path("/a.ts")


def test_diagnostic_str():
    with_line = ParseDiagnostic("/a.ts", "syntax error", DiagnosticKind.SYNTAX, line=3)
    without_line = ParseDiagnostic("/a.ts", "denied", DiagnosticKind.IO)
    assert str(with_line) == "/a.ts:3: syntax error"
    assert str(without_line) == "/a.ts: denied"


def test_position_distance():
    assert Position(0, 0).distance(Position(3, 4)) == 5.0


def test_placed_node_to_dict():
    placed = PlacedNode(
        node_id=4,
        file=SourceFile.from_path("/src/a.ts"),
        position=Position(1.5, 2.0),
        neighbor_positions=[Position(3.0, 4.0), Position(3.0, 4.0)],
    )
    assert placed.to_dict() == {
        "id": 4,
        "name": "a.ts",
        "path": "/src/a.ts",
        "x": 1.5,
        "y": 2.0,
        "neighbors": [[3.0, 4.0], [3.0, 4.0]],
    }


def test_screen_box_edges_are_inclusive():
    box = ScreenBox(node_id=0, path="/a.ts", left=0, top=0, right=10, bottom=10)
    assert box.contains(0, 0)
    assert box.contains(10, 10)
    assert box.contains(5, 5)
    assert not box.contains(10.01, 5)
    assert not box.contains(5, -0.01)
