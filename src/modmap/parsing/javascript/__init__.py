"""
JavaScript/TypeScript parsing module for modmap.

Usage:
    from modmap.parsing.javascript import ImportExtractor

    result = ImportExtractor().extract(Path("app.ts").read_bytes(), SourceType.TS)
"""

from .parser import ImportExtractor, extract_imports, get_parser

__all__ = [
    "ImportExtractor",
    "extract_imports",
    "get_parser",
]
