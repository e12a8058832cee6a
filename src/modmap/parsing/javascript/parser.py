"""
JavaScript/TypeScript Import Extractor for modmap.

Walks the tree-sitter syntax tree of one file and collects the raw
specifiers of every module reference:
- import x from "mod" / import "mod" / import type T from "mod"
- export { x } from "mod" / export * from "mod"
- import("mod") with a string literal argument
- require("mod"), including require("mod").default and friends
- import x = require("mod") (TypeScript)

The walk descends into every node, so references nested in call
arguments, member chains or function bodies are found too.
"""

import logging
from typing import Dict, Iterator, List, Optional

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from ...core.result import Err, Ok, Result
from ...core.types import DiagnosticKind, ParseDiagnostic, SourceType

logger = logging.getLogger(__name__)

_LANGUAGE_LOADERS = {
    "javascript": tsjs.language,
    "typescript": tsts.language_typescript,
    "tsx": tsts.language_tsx,
}

_parsers: Dict[str, Parser] = {}


def get_parser(grammar: str) -> Parser:
    """Return a cached tree-sitter parser for a grammar name."""
    parser = _parsers.get(grammar)
    if parser is None:
        parser = Parser(Language(_LANGUAGE_LOADERS[grammar]()))
        _parsers[grammar] = parser
    return parser


_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


def _unescape(sequence: str) -> str:
    """Decode one JS escape sequence, backslash included."""
    body = sequence[1:]
    try:
        if body.startswith("u{"):
            return chr(int(body[2:-1], 16))
        if body[0] in "xu" and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        # out of range code point
        return body
    if body.isdigit() and all(c in "01234567" for c in body):
        return chr(int(body, 8))
    if body[0] in "\r\n\u2028\u2029":
        # line continuation
        return ""
    return _SIMPLE_ESCAPES.get(body, body)


def _string_value(node: Optional[Node]) -> Optional[str]:
    """Value of a plain string literal node, None for anything else."""
    if node is None or node.type != "string":
        return None

    parts = []
    for child in node.named_children:
        text = child.text.decode("utf-8", errors="replace")
        if child.type == "escape_sequence":
            parts.append(_unescape(text))
        elif child.type == "string_fragment":
            parts.append(text)
    return "".join(parts)


def _first_argument(call: Node) -> Optional[Node]:
    args = call.child_by_field_name("arguments")
    if args is None or args.type != "arguments":
        return None
    for child in args.named_children:
        if child.type != "comment":
            return child
    return None


def _first_error(root: Node) -> Optional[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class ImportExtractor:
    """
    Extracts raw import specifiers from JS/TS source.

    Features:
    - Grammar chosen from the source type (ts, tsx or javascript)
    - Document-order results, one entry per import expression
    - Syntax errors reported as a ParseDiagnostic instead of raising
    """

    name = "js_imports"

    def extract(
        self,
        content: bytes | str,
        source_type: SourceType = SourceType.SCRIPT,
        file_path: str = "<memory>",
    ) -> Result[List[str], ParseDiagnostic]:
        """
        Parse content and return its specifiers.

        Returns:
            Ok(list of specifiers) or Err(ParseDiagnostic) when the file
            does not parse cleanly.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")

        tree = get_parser(source_type.grammar).parse(content)
        root = tree.root_node

        if root.has_error:
            bad = _first_error(root)
            line = bad.start_point[0] + 1 if bad is not None else None
            what = "missing token" if bad is not None and bad.is_missing else "syntax error"
            diagnostic = ParseDiagnostic(
                file_path=file_path,
                message=f"{what} ({source_type.grammar} grammar)",
                kind=DiagnosticKind.SYNTAX,
                line=line,
            )
            logger.warning(f"Parse error in {diagnostic}")
            return Err(diagnostic)

        return Ok(list(self._walk(root)))

    def _walk(self, root: Node) -> Iterator[str]:
        stack = [root]
        while stack:
            node = stack.pop()

            specifier = self._specifier_of(node)
            if specifier is not None:
                yield specifier

            stack.extend(reversed(node.children))

    def _specifier_of(self, node: Node) -> Optional[str]:
        # import_require_clause: TypeScript's `import x = require("mod")`
        if node.type in ("import_statement", "export_statement", "import_require_clause"):
            return _string_value(node.child_by_field_name("source"))

        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            if callee is None:
                return None
            is_dynamic_import = callee.type == "import"
            is_require = callee.type == "identifier" and callee.text == b"require"
            if is_dynamic_import or is_require:
                return _string_value(_first_argument(node))

        return None


def extract_imports(
    content: bytes | str,
    source_type: SourceType = SourceType.SCRIPT,
) -> List[str]:
    """Specifiers found in content; empty when it fails to parse."""
    return ImportExtractor().extract(content, source_type).unwrap_or([])
